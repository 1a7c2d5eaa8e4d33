"""
Test suite for selection verification.

Tests all outcomes:
- MATCHED (forward and reversed selections)
- ALREADY_FOUND (re-selecting a solved word)
- NO_MATCH (wrong letters, empty selections, cells off the grid)
"""

import random

import pytest
from src.wordsearch import (
    Cell,
    Grid,
    generate_grid,
    verify_selection,
    extract_letters,
    match_word,
    is_complete,
    find_word,
    render_grid,
    DEFAULT_VOCABULARY,
)


@pytest.fixture
def small_grid():
    """
    S O L
    U X A
    N A Y
    """
    return Grid(size=3, rows=[["S", "O", "L"], ["U", "X", "A"], ["N", "A", "Y"]])


VOCAB = ["SOL", "SUN", "SXY"]


class TestMatched:
    """Test cases for successful matches."""

    def test_forward_horizontal(self, small_grid):
        found = set()
        result = verify_selection(small_grid, [Cell(0, 0), Cell(0, 1), Cell(0, 2)], VOCAB, found)
        assert result.outcome == "MATCHED"
        assert result.word == "SOL"
        assert result.letters == "SOL"
        assert found == {"SOL"}

    def test_reversed_selection(self, small_grid):
        """Selecting a word back to front still matches."""
        found = set()
        result = verify_selection(small_grid, [Cell(0, 2), Cell(0, 1), Cell(0, 0)], VOCAB, found)
        assert result.outcome == "MATCHED"
        assert result.word == "SOL"
        assert result.letters == "LOS"

    def test_vertical_and_diagonal(self, small_grid):
        found = set()
        assert verify_selection(small_grid, [(0, 0), (1, 0), (2, 0)], VOCAB, found).word == "SUN"
        assert verify_selection(small_grid, [(0, 0), (1, 1), (2, 2)], VOCAB, found).word == "SXY"
        assert found == {"SUN", "SXY"}

    def test_non_adjacent_cells_still_match(self):
        """Cells need not form a line; only the spelled letters count."""
        found = set()
        grid = Grid(size=3, rows=[["S", "Q", "Q"], ["Q", "O", "Q"], ["L", "Q", "Q"]])
        result = verify_selection(grid, [(0, 0), (1, 1), (2, 0)], VOCAB, found)
        assert result.outcome == "MATCHED"
        assert result.word == "SOL"


class TestAlreadyFound:
    """Test cases for repeated matches."""

    def test_second_match_is_already_found(self, small_grid):
        found = set()
        cells = [(0, 0), (0, 1), (0, 2)]
        verify_selection(small_grid, cells, VOCAB, found)
        result = verify_selection(small_grid, cells, VOCAB, found)
        assert result.outcome == "ALREADY_FOUND"
        assert result.word == "SOL"
        assert len(found) == 1

    def test_reverse_after_forward_is_already_found(self, small_grid):
        found = set()
        verify_selection(small_grid, [(0, 0), (0, 1), (0, 2)], VOCAB, found)
        result = verify_selection(small_grid, [(0, 2), (0, 1), (0, 0)], VOCAB, found)
        assert result.outcome == "ALREADY_FOUND"
        assert found == {"SOL"}


class TestNoMatch:
    """Test cases for rejected selections."""

    def test_wrong_letters(self, small_grid):
        found = set()
        result = verify_selection(small_grid, [(1, 0), (1, 1), (1, 2)], VOCAB, found)
        assert result.outcome == "NO_MATCH"
        assert result.word is None
        assert result.letters == "UXA"
        assert found == set()

    def test_partial_word(self, small_grid):
        found = set()
        result = verify_selection(small_grid, [(0, 0), (0, 1)], VOCAB, found)
        assert result.outcome == "NO_MATCH"

    def test_empty_selection(self, small_grid):
        found = set()
        result = verify_selection(small_grid, [], VOCAB, found)
        assert result.outcome == "NO_MATCH"
        assert result.letters == ""

    def test_cell_outside_grid(self, small_grid):
        """Verification never raises for bad cells."""
        found = set()
        result = verify_selection(small_grid, [(0, 0), (0, 1), (0, 3)], VOCAB, found)
        assert result.outcome == "NO_MATCH"
        assert found == set()


class TestHelpers:
    """Test cases for letter extraction and word matching."""

    def test_extract_letters_in_order(self, small_grid):
        assert extract_letters(small_grid, [(2, 2), (0, 0)]) == "YS"

    def test_extract_letters_outside(self, small_grid):
        assert extract_letters(small_grid, [(-1, 0)]) is None

    def test_match_word_first_in_vocabulary_order(self):
        assert match_word("ABA", ["XYZ", "ABA"]) == "ABA"
        assert match_word("NUS", ["SUN", "NUS"]) == "SUN"

    def test_is_complete(self):
        assert is_complete({"SOL", "SUN"}, ["SOL", "SUN"]) is True
        assert is_complete({"SOL"}, ["SOL", "SUN"]) is False


class TestGeneratedGrids:
    """Properties over generated grids."""

    def test_every_placed_word_matches_both_ways(self):
        grid = generate_grid(DEFAULT_VOCABULARY, 12, rng=random.Random(99))
        forward_found = set()
        backward_found = set()

        for word in DEFAULT_VOCABULARY:
            cells = find_word(grid, word)
            forward = verify_selection(grid, cells, DEFAULT_VOCABULARY, forward_found)
            backward = verify_selection(grid, list(reversed(cells)), DEFAULT_VOCABULARY, backward_found)
            assert forward.outcome == "MATCHED" and forward.word == word
            assert backward.outcome == "MATCHED" and backward.word == word

        assert is_complete(forward_found, DEFAULT_VOCABULARY)
        assert is_complete(backward_found, DEFAULT_VOCABULARY)

    def test_completion_only_after_every_word(self):
        grid = generate_grid(DEFAULT_VOCABULARY, 12, rng=random.Random(5))
        found = set()
        for i, word in enumerate(DEFAULT_VOCABULARY):
            assert not is_complete(found, DEFAULT_VOCABULARY)
            verify_selection(grid, find_word(grid, word), DEFAULT_VOCABULARY, found)
            assert len(found) == i + 1
        assert is_complete(found, DEFAULT_VOCABULARY)

    def test_sol_scenario(self):
        """Forward match, reversed match on a fresh session, then already found."""
        grid = generate_grid(["SOL"], 5, rng=random.Random(11))
        cells = find_word(grid, "SOL")
        assert cells is not None

        assert verify_selection(grid, cells, ["SOL"], set()).outcome == "MATCHED"

        fresh = set()
        reversed_result = verify_selection(grid, cells[::-1], ["SOL"], fresh)
        assert reversed_result.outcome == "MATCHED"
        assert reversed_result.word == "SOL"

        third = verify_selection(grid, cells, ["SOL"], fresh)
        assert third.outcome == "ALREADY_FOUND"
        assert third.word == "SOL"


class TestRenderGrid:
    """Test cases for grid rendering."""

    def test_plain(self, small_grid):
        assert render_grid(small_grid) == "S O L\nU X A\nN A Y"

    def test_highlight_lowercases(self, small_grid):
        rendered = render_grid(small_grid, highlight=[Cell(0, 0)])
        assert rendered.splitlines()[0] == "s O L"

    def test_indices(self, small_grid):
        lines = render_grid(small_grid, show_indices=True).splitlines()
        assert lines[0] == "  0 1 2"
        assert lines[1] == "0 S O L"
        assert lines[3] == "2 N A Y"
