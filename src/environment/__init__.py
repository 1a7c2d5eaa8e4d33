"""Game sessions and the LLM benchmark environment."""

from .models import (
    Message,
    Role,
    ParsedResponse,
    TurnResult,
    ProgressRecord,
    PlayerConfig,
    BenchmarkConfig,
    BenchmarkResult,
)
from .llm_client import LLMClient
from .game import WordSearchGame
from .progress import ProgressLog
from .player import Player
from .wordsearchbench import WordSearchBench

__all__ = [
    "Message",
    "Role",
    "ParsedResponse",
    "TurnResult",
    "ProgressRecord",
    "PlayerConfig",
    "BenchmarkConfig",
    "BenchmarkResult",
    "LLMClient",
    "WordSearchGame",
    "ProgressLog",
    "Player",
    "WordSearchBench",
]
