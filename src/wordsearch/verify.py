"""
Selection verification for word-search grids.

A selection is an ordered list of cells. Its letters are read in the order
given and compared, forward and reversed, against the vocabulary. Cells do
not have to be adjacent or in a straight line.
"""

from typing import Iterable, MutableSet, Optional, Sequence

from .models import Cell, Grid, VerifyResult


def extract_letters(grid: Grid, selection: Iterable[Cell]) -> Optional[str]:
    """
    Concatenate the letters under the selected cells, in order.

    Returns None if any cell lies outside the grid.
    """
    letters = []
    for cell in selection:
        letter = grid.letter_at(Cell(*cell))
        if letter is None:
            return None
        letters.append(letter)
    return "".join(letters)


def match_word(letters: str, vocabulary: Sequence[str]) -> Optional[str]:
    """First vocabulary word equal to `letters` or its reverse."""
    reversed_letters = letters[::-1]
    for word in vocabulary:
        if word == letters or word == reversed_letters:
            return word
    return None


def verify_selection(
    grid: Grid,
    selection: Sequence[Cell],
    vocabulary: Sequence[str],
    found: MutableSet[str],
) -> VerifyResult:
    """
    Check a selection against the vocabulary and record new matches.

    Args:
        grid: The session grid
        selection: Ordered cells chosen by the player
        vocabulary: Target words
        found: Words already found; a new match is added to it

    Returns:
        VerifyResult with outcome MATCHED, ALREADY_FOUND or NO_MATCH
    """
    letters = extract_letters(grid, selection)
    if not letters:
        return VerifyResult(outcome='NO_MATCH')

    word = match_word(letters, vocabulary)
    if word is None:
        return VerifyResult(outcome='NO_MATCH', letters=letters)

    if word in found:
        return VerifyResult(outcome='ALREADY_FOUND', word=word, letters=letters)

    found.add(word)
    return VerifyResult(outcome='MATCHED', word=word, letters=letters)


def is_complete(found: Iterable[str], vocabulary: Sequence[str]) -> bool:
    """Whether every vocabulary word has been found."""
    return len(set(found) & set(vocabulary)) == len(vocabulary)
