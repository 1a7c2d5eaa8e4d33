"""Grid geometry and rendering utilities."""

from typing import Dict, Iterable, List, Optional, Set, Tuple

from .models import Cell, Grid, Placement


# (row step, col step) for each orientation
STEPS: Dict[str, Tuple[int, int]] = {
    'H': (0, 1),
    'V': (1, 0),
    'D': (1, 1),
}

ORIENTATIONS: Tuple[str, ...] = tuple(STEPS)


def line_cells(row: int, col: int, orientation: str, length: int) -> List[Cell]:
    """Cells covered by a run of `length` letters starting at (row, col)."""
    dr, dc = STEPS[orientation]
    return [Cell(row + dr * i, col + dc * i) for i in range(length)]


def placement_cells(placement: Placement) -> List[Cell]:
    """Cells covered by a placement, in word order."""
    return line_cells(placement.row, placement.col, placement.orientation, len(placement.word))


def find_word(grid: Grid, word: str) -> Optional[List[Cell]]:
    """
    Locate `word` along any orientation in the grid.

    Returns the covered cells in word order for the first run found
    (scanning rows, then columns, then orientations), or None.
    """
    length = len(word)
    if length == 0 or length > grid.size:
        return None

    for row in range(grid.size):
        for col in range(grid.size):
            if grid.rows[row][col] != word[0]:
                continue
            for orientation in ORIENTATIONS:
                cells = line_cells(row, col, orientation, length)
                if not grid.contains(cells[-1]):
                    continue
                if all(grid.rows[r][c] == word[i] for i, (r, c) in enumerate(cells)):
                    return cells
    return None


def render_grid(
    grid: Grid,
    highlight: Optional[Iterable[Cell]] = None,
    show_indices: bool = False,
) -> str:
    """
    Render the grid to a string, one row per line.

    Highlighted cells are shown in lowercase. With `show_indices`,
    column numbers are printed above and row numbers to the left.
    """
    marked: Set[Tuple[int, int]] = {tuple(cell) for cell in highlight} if highlight else set()
    width = len(str(grid.size - 1))

    lines = []
    if show_indices:
        header = " ".join(str(c).rjust(width) for c in range(grid.size))
        lines.append(" " * (width + 1) + header)

    for r, row in enumerate(grid.rows):
        letters = [
            (letter.lower() if (r, c) in marked else letter).rjust(width)
            for c, letter in enumerate(row)
        ]
        line = " ".join(letters)
        if show_indices:
            line = f"{str(r).rjust(width)} {line}"
        lines.append(line)

    return "\n".join(lines)
