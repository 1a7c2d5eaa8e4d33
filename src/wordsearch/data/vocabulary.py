"""Default puzzle configuration."""

from typing import List


# Astronomy vocabulary used by the reference game
DEFAULT_VOCABULARY: List[str] = [
    "JUPITER", "MARTE", "VENUS", "TIERRA",
    "LUNA", "SOL", "ESTRELLA", "GALAXIA",
]

DEFAULT_GRID_SIZE = 12

# Placement attempts allowed per word, per grid cell
ATTEMPTS_PER_CELL = 10
