from .vocabulary import DEFAULT_VOCABULARY, DEFAULT_GRID_SIZE, ATTEMPTS_PER_CELL

__all__ = ["DEFAULT_VOCABULARY", "DEFAULT_GRID_SIZE", "ATTEMPTS_PER_CELL"]
