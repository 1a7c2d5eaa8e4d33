"""
Word-search grid generation.

Every vocabulary word is placed along a random orientation (horizontal,
vertical or diagonal down-right) at a random start cell, retrying until the
placement fits without contradicting letters already written. Words may
cross where their letters coincide. Remaining cells are filled with random
uppercase letters.

The search is bounded: a word that cannot be placed within the attempt
budget raises ConfigurationError instead of looping forever.
"""

import random
import re
import string
from typing import List, Optional, Sequence

from .models import ConfigurationError, Grid, Placement
from .grid import ORIENTATIONS, placement_cells
from .data import ATTEMPTS_PER_CELL


Matrix = List[List[Optional[str]]]

_WORD_PATTERN = re.compile(r'^[A-Z]+$')


def normalize_vocabulary(words: Sequence[str]) -> List[str]:
    """
    Upper-case and validate a vocabulary, preserving order.

    Raises:
        ConfigurationError: If the vocabulary is empty, contains a
            non-alphabetic word, or repeats a word
    """
    vocabulary: List[str] = []
    for raw in words:
        word = raw.strip().upper()
        if not _WORD_PATTERN.match(word):
            raise ConfigurationError(f"Invalid word '{raw}': only letters A-Z are allowed")
        if word in vocabulary:
            raise ConfigurationError(f"Duplicate word '{word}' in vocabulary")
        vocabulary.append(word)

    if not vocabulary:
        raise ConfigurationError("Vocabulary is empty")

    return vocabulary


def validate_request(vocabulary: Sequence[str], size: int) -> None:
    """Check that every word can fit in a `size` x `size` grid."""
    if size < 1:
        raise ConfigurationError(f"Grid size must be positive, got {size}")

    for word in vocabulary:
        if len(word) > size:
            raise ConfigurationError(
                f"Word '{word}' ({len(word)} letters) does not fit in a {size}x{size} grid"
            )


def check_placement(matrix: Matrix, placement: Placement) -> bool:
    """
    Check whether a word fits at the given placement.

    A cell passes if it is empty or already holds the word's letter at
    that offset.
    """
    size = len(matrix)
    if not placement.word or placement.row < 0 or placement.col < 0:
        return False

    cells = placement_cells(placement)

    end_row, end_col = cells[-1]
    if end_row >= size or end_col >= size:
        return False

    for letter, (r, c) in zip(placement.word, cells):
        existing = matrix[r][c]
        if existing is not None and existing != letter:
            return False
    return True


def place_word(matrix: Matrix, placement: Placement) -> None:
    """Write the placement's letters into the matrix."""
    cells = placement_cells(placement)
    for letter, (r, c) in zip(placement.word, cells):
        matrix[r][c] = letter


def find_placement(
    matrix: Matrix,
    word: str,
    rng: random.Random,
    max_attempts: int,
) -> Placement:
    """
    Sample random placements for `word` until one fits.

    Raises:
        ConfigurationError: If no fitting placement is found within
            `max_attempts` samples
    """
    size = len(matrix)
    for _ in range(max_attempts):
        orientation = rng.choice(ORIENTATIONS)
        row = rng.randrange(size)
        col = rng.randrange(size)
        placement = Placement(word, row, col, orientation)
        if check_placement(matrix, placement):
            return placement

    raise ConfigurationError(
        f"Could not place '{word}' in a {size}x{size} grid after {max_attempts} attempts"
    )


def fill_empty_cells(matrix: Matrix, rng: random.Random) -> None:
    """Assign a random uppercase letter to every empty cell."""
    for row in matrix:
        for c, letter in enumerate(row):
            if letter is None:
                row[c] = rng.choice(string.ascii_uppercase)


def generate_grid(
    vocabulary: Sequence[str],
    size: int,
    rng: Optional[random.Random] = None,
    max_attempts: Optional[int] = None,
) -> Grid:
    """
    Build a fully populated grid that embeds every vocabulary word.

    Args:
        vocabulary: Words to embed, placed in the given order
        size: Grid dimension N
        rng: Random source (a fresh unseeded one if omitted)
        max_attempts: Placement attempts allowed per word
            (default: ATTEMPTS_PER_CELL * size * size)

    Returns:
        The generated Grid

    Raises:
        ConfigurationError: If the vocabulary or size is invalid, or a
            word could not be placed within the attempt budget
    """
    words = normalize_vocabulary(vocabulary)
    validate_request(words, size)

    if rng is None:
        rng = random.Random()
    if max_attempts is None:
        max_attempts = ATTEMPTS_PER_CELL * size * size

    matrix: Matrix = [[None] * size for _ in range(size)]

    for word in words:
        placement = find_placement(matrix, word, rng, max_attempts)
        place_word(matrix, placement)

    fill_empty_cells(matrix, rng)

    return Grid(size=size, rows=tuple(map(tuple, matrix)))
