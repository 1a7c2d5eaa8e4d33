"""
Player class for managing an individual player's session and LLM interaction.

Each player owns its own WordSearchGame and coordinates with the LLM client
to choose cell selections.
"""

import re
from typing import List, Dict, Optional, Any
from pydantic import BaseModel, ConfigDict

from .llm_client import LLMClient
from .game import WordSearchGame
from .models import ParsedResponse
from ..wordsearch.models import Cell, VerifyResult


_CELL_PATTERN = re.compile(r'\(?\s*(\d+)\s*,\s*(\d+)\s*\)?')


class Player(BaseModel):
    """
    Manages individual player state and LLM interaction.

    Attributes:
        player_id: Unique identifier for the player
        name: Display name for the player
        game: The player's own word-search session
        llm_client: LLM client for choosing selections
        turn_count: Number of turns taken
        last_result: Outcome of the player's last selection
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    player_id: str
    name: str = ""
    game: WordSearchGame
    llm_client: Optional[LLMClient] = None
    turn_count: int = 0
    last_result: Optional[VerifyResult] = None

    def model_post_init(self, __context) -> None:
        """Set default name if not provided."""
        if not self.name:
            self.name = f"Player {self.player_id}"

    @classmethod
    def create(
        cls,
        player_id: str,
        model: str,
        game: WordSearchGame,
        name: Optional[str] = None,
        temperature: float = 1.0,
        max_tokens: Optional[int] = None,
        **llm_kwargs: Any
    ) -> "Player":
        """
        Factory method to create a player with an LLM client.

        Args:
            player_id: Unique identifier for the player
            model: LLM model name (e.g., "gpt-4o", "claude-3-opus")
            game: The session this player solves
            name: Optional display name
            temperature: LLM temperature setting
            max_tokens: Optional max tokens for responses
            **llm_kwargs: Additional arguments for the LLM client

        Returns:
            A new Player instance with configured LLM client
        """
        llm_client = LLMClient(
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            **llm_kwargs
        )
        game.player = name or f"Player {player_id}"

        return cls(
            player_id=player_id,
            name=game.player,
            game=game,
            llm_client=llm_client,
        )

    @staticmethod
    def parse_response(response: str) -> ParsedResponse:
        """
        Parse an LLM response for reasoning and the selected cells.

        Expected format:
        <reasoning>...</reasoning>
        <selection>r,c r,c r,c</selection>

        Cells may also be written as (r,c). Rows and columns are 0-indexed.
        """
        result = ParsedResponse(raw_response=response)

        think_match = re.search(r'<reasoning>(.*?)</reasoning>', response, re.DOTALL)
        if think_match:
            result.thinking = think_match.group(1).strip()

        selection_match = re.search(r'<selection>(.*?)</selection>', response, re.DOTALL)
        if not selection_match:
            result.parse_error = "Missing <selection> tag"
            return result

        content = selection_match.group(1)
        cells: List[Cell] = [
            Cell(int(row), int(col)) for row, col in _CELL_PATTERN.findall(content)
        ]
        if not cells:
            result.parse_error = f"No cells found in selection: '{content.strip()}'"
            return result

        result.selection = cells
        return result

    def submit(self, cells: List[Cell]) -> VerifyResult:
        """
        Select `cells` in the player's session and check them.

        Raises:
            ValueError: If a cell is outside the grid
        """
        try:
            self.game.select(cells)
        except ValueError:
            self.game.selection = []
            raise
        self.last_result = self.game.check_selection()
        return self.last_result

    def get_state(self) -> Dict:
        """
        Get the current player state as a dictionary.

        Useful for serialization and logging.
        """
        return {
            "player_id": self.player_id,
            "name": self.name,
            "turn_count": self.turn_count,
            "score": self.game.score,
            **self.game.get_state(),
            "last_outcome": self.last_result.outcome if self.last_result else None,
        }
