import random
from typing import List, Dict, Optional, Sequence, Set
from pydantic import BaseModel, Field, ConfigDict, field_validator

from ..wordsearch import (
    Cell,
    Grid,
    VerifyResult,
    generate_grid,
    normalize_vocabulary,
    verify_selection,
    render_grid,
    DEFAULT_VOCABULARY,
    DEFAULT_GRID_SIZE,
)
from .models import ProgressRecord


class WordSearchGame(BaseModel):
    """
    Manages one word-search session.

    Owns the generated grid, the words found so far and the player's
    current selection. Each session has its own random source, so
    sessions never share state.

    Attributes:
        vocabulary: Target words, upper-cased, in placement order
        size: Grid dimension
        seed: Optional random seed for reproducible grids
        grid: The current grid (regenerated on reset)
        found_words: Words matched this session
        selection: Cells currently selected, in click order
        completion: Progress record created when the last word is found
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    vocabulary: List[str] = Field(default_factory=lambda: list(DEFAULT_VOCABULARY))
    size: int = Field(default=DEFAULT_GRID_SIZE, ge=1)
    seed: Optional[int] = None
    player: Optional[str] = None
    grid: Optional[Grid] = None
    found_words: Set[str] = Field(default_factory=set)
    selection: List[Cell] = Field(default_factory=list)
    completion: Optional[ProgressRecord] = None
    _rng: random.Random = None

    @field_validator("vocabulary")
    @classmethod
    def _normalize_vocabulary(cls, value: List[str]) -> List[str]:
        """Upper-case and validate words however the session is built."""
        return normalize_vocabulary(value)

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.seed)

    @classmethod
    def create(
        cls,
        vocabulary: Sequence[str] = DEFAULT_VOCABULARY,
        size: int = DEFAULT_GRID_SIZE,
        seed: Optional[int] = None,
        player: Optional[str] = None,
    ) -> "WordSearchGame":
        """
        Factory method to create a session with a freshly generated grid.

        Args:
            vocabulary: Words to hide in the grid
            size: Grid dimension
            seed: Optional random seed for reproducibility
            player: Optional player name recorded on completion

        Returns:
            A new WordSearchGame ready to play

        Raises:
            ConfigurationError: If the grid cannot be generated
        """
        # Normalize here too so bad words raise ConfigurationError,
        # not pydantic's ValidationError
        game = cls(
            vocabulary=normalize_vocabulary(vocabulary),
            size=size,
            seed=seed,
            player=player,
        )
        game.reset()
        return game

    def reset(self) -> None:
        """
        Generate a new grid and clear found words and selection.

        Raises:
            ConfigurationError: If no grid could be generated; the
                session keeps its current grid and progress
        """
        self.grid = generate_grid(self.vocabulary, self.size, rng=self._rng)
        self.found_words = set()
        self.selection = []
        self.completion = None

    @property
    def is_complete(self) -> bool:
        """Whether every word has been found."""
        return len(self.found_words) == len(self.vocabulary)

    @property
    def score(self) -> int:
        """Number of words found."""
        return len(self.found_words)

    @property
    def words_remaining(self) -> List[str]:
        """Words not yet found, in vocabulary order."""
        return [w for w in self.vocabulary if w not in self.found_words]

    def toggle_cell(self, row: int, col: int) -> bool:
        """
        Toggle a cell in the current selection.

        Args:
            row: Grid row
            col: Grid column

        Returns:
            True if the cell is now selected, False if it was deselected

        Raises:
            ValueError: If the cell is outside the grid
        """
        cell = Cell(row, col)
        if self.grid is None:
            raise ValueError("Game not initialized. Call reset() first.")
        if not self.grid.contains(cell):
            raise ValueError(f"Cell {tuple(cell)} is outside the {self.size}x{self.size} grid")

        if cell in self.selection:
            self.selection.remove(cell)
            return False
        self.selection.append(cell)
        return True

    def select(self, cells: Sequence[Sequence[int]]) -> None:
        """Replace the current selection with `cells`, in order."""
        self.selection = []
        for row, col in cells:
            self.toggle_cell(row, col)

    def check_selection(self) -> VerifyResult:
        """
        Verify the current selection, then clear it.

        Returns:
            VerifyResult for the selection
        """
        if self.grid is None:
            raise ValueError("Game not initialized. Call reset() first.")

        result = verify_selection(self.grid, self.selection, self.vocabulary, self.found_words)
        self.selection = []

        if result.matched and self.is_complete and self.completion is None:
            self.completion = ProgressRecord(score=str(self.score), player=self.player)

        return result

    def render(self, show_indices: bool = True) -> str:
        """Render the grid, showing selected cells in lowercase."""
        if self.grid is None:
            return ""
        return render_grid(self.grid, highlight=self.selection, show_indices=show_indices)

    def get_state(self) -> Dict:
        """
        Get the current session state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "size": self.size,
            "seed": self.seed,
            "words_total": len(self.vocabulary),
            "words_found": [w for w in self.vocabulary if w in self.found_words],
            "words_remaining": self.words_remaining,
            "selection": [list(cell) for cell in self.selection],
            "is_complete": self.is_complete,
        }
