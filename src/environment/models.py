"""
Pydantic models for the environment layer.

This module contains the data models (configurations, results, parsed responses,
progress records) used throughout the environment layer. The main logic classes
(WordSearchGame, Player, LLMClient, WordSearchBench) live in their own files.
"""

from datetime import datetime
from typing import List, Dict, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict

from ..wordsearch.models import Cell, VerifyResult
from ..wordsearch.data import DEFAULT_VOCABULARY, DEFAULT_GRID_SIZE


# Type aliases
Role = Literal["system", "user", "assistant"]


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class ParsedResponse(BaseModel):
    """Parsed components from an LLM response."""
    thinking: Optional[str] = None
    selection: Optional[List[Cell]] = None
    parse_error: Optional[str] = None
    raw_response: str = ""


class TurnResult(BaseModel):
    """Result of a single player turn."""
    player_id: str
    turn_number: int
    selection: List[Cell] = Field(default_factory=list)
    result: Optional[VerifyResult] = None
    thinking: Optional[str] = None
    words_found: int = 0
    completed: bool = False
    raw_response: str = ""
    error: Optional[str] = None
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class ProgressRecord(BaseModel):
    """A completed game, as stored in the progress log."""
    game_type: str = "wordsearch"
    score: str
    player: Optional[str] = None
    completed_at: str = Field(default_factory=lambda: datetime.now().isoformat())


class PlayerConfig(BaseModel):
    """Configuration for a single player."""
    model_config = ConfigDict(extra='allow')

    model: str
    name: Optional[str] = None
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    # Additional kwargs are allowed and passed to LiteLLM


class BenchmarkConfig(BaseModel):
    """Configuration for a benchmark run."""
    grid_size: int = Field(default=DEFAULT_GRID_SIZE, ge=1)
    vocabulary: List[str] = Field(default_factory=lambda: list(DEFAULT_VOCABULARY))
    max_turns: int = Field(default=100, ge=1)
    seed: Optional[int] = None
    players: List[PlayerConfig] = Field(default_factory=lambda: [PlayerConfig(model="gpt-4o")])

    @property
    def num_players(self) -> int:
        """Number of players (derived from the players list)."""
        return len(self.players)


class BenchmarkResult(BaseModel):
    """Result of a complete benchmark run."""
    config: BenchmarkConfig
    winner: Optional[str] = None
    total_turns: int = 0
    end_reason: str = ""
    grid: List[str] = Field(default_factory=list)
    player_results: Dict[str, Dict] = Field(default_factory=dict)
    turn_history: List[TurnResult] = Field(default_factory=list)
    conversation_history: Dict[str, List[Dict[str, str]]] = Field(default_factory=dict)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
    total_prompt_tokens: int = 0
    total_completion_tokens: int = 0
    total_tokens: int = 0
