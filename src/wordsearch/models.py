"""Data models for grid generation and selection verification."""

from typing import Optional, Literal, NamedTuple, Tuple
from pydantic import BaseModel, ConfigDict, Field


Orientation = Literal['H', 'V', 'D']
Outcome = Literal['MATCHED', 'ALREADY_FOUND', 'NO_MATCH']


class ConfigurationError(ValueError):
    """Raised when a vocabulary/grid-size combination cannot produce a grid."""


class Cell(NamedTuple):
    """A grid coordinate."""
    row: int
    col: int


class Placement(NamedTuple):
    """A candidate word placement considered during generation."""
    word: str
    row: int
    col: int
    orientation: Orientation


class Grid(BaseModel):
    """A fully populated square letter grid."""
    model_config = ConfigDict(frozen=True)

    size: int = Field(..., ge=1)
    rows: Tuple[Tuple[str, ...], ...]

    def letter_at(self, cell: Cell) -> Optional[str]:
        """Letter at `cell`, or None if the cell is outside the grid."""
        row, col = cell
        if 0 <= row < self.size and 0 <= col < self.size:
            return self.rows[row][col]
        return None

    def contains(self, cell: Cell) -> bool:
        """Whether `cell` lies inside the grid."""
        return 0 <= cell[0] < self.size and 0 <= cell[1] < self.size


class VerifyResult(BaseModel):
    """Outcome of checking a selection against the vocabulary."""
    outcome: Outcome
    word: Optional[str] = None
    letters: str = ""

    @property
    def matched(self) -> bool:
        return self.outcome == 'MATCHED'
