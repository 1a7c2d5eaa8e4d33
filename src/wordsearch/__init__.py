"""Word-search grid generation and selection verification."""

from .generator import generate_grid, normalize_vocabulary, check_placement, place_word, fill_empty_cells
from .verify import verify_selection, extract_letters, match_word, is_complete
from .models import Cell, Grid, Placement, VerifyResult, ConfigurationError
from .grid import ORIENTATIONS, line_cells, find_word, render_grid
from .data import DEFAULT_VOCABULARY, DEFAULT_GRID_SIZE

__all__ = [
    # Generation
    "generate_grid",
    "normalize_vocabulary",
    "check_placement",
    "place_word",
    "fill_empty_cells",
    # Verification
    "verify_selection",
    "extract_letters",
    "match_word",
    "is_complete",
    # Models
    "Cell",
    "Grid",
    "Placement",
    "VerifyResult",
    "ConfigurationError",
    # Grid utilities
    "ORIENTATIONS",
    "line_cells",
    "find_word",
    "render_grid",
    # Defaults
    "DEFAULT_VOCABULARY",
    "DEFAULT_GRID_SIZE",
]
