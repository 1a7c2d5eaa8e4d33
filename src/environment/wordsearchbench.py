import json
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Optional, Any, Callable
from pydantic import BaseModel, Field, ConfigDict

from .game import WordSearchGame
from .player import Player
from .progress import ProgressLog
from .models import TurnResult, BenchmarkConfig, BenchmarkResult
from .prompts import SYSTEM_PROMPT, build_player_prompt


class WordSearchBench(BaseModel):
    """
    Top-level orchestrator for word-search benchmarks.

    Every player solves its own session built from the same seed, so all
    players see the same grid without sharing any state. Players take
    turns submitting one selection each until someone finds every word or
    the turn limit is reached.

    Attributes:
        players: List of Player instances
        config: Benchmark configuration
        turn_history: History of all turns
        current_turn: Current turn number
        is_complete: Whether the benchmark has finished
        progress_log: Optional log that receives completion records
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    players: List[Player] = Field(default_factory=list)
    config: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    turn_history: List[TurnResult] = Field(default_factory=list)
    current_turn: int = 0
    is_complete: bool = False
    winner: Optional[str] = None
    end_reason: str = ""
    started_at: Optional[datetime] = None
    progress_log: Optional[ProgressLog] = None

    @classmethod
    def create(
        cls,
        config: Optional[BenchmarkConfig] = None,
        progress_path: Optional[str | Path] = None,
        **config_kwargs: Any
    ) -> "WordSearchBench":
        """
        Factory method to create a benchmark with a session per player.

        Args:
            config: Optional BenchmarkConfig instance
            progress_path: Optional JSON-lines file for completion records
            **config_kwargs: Config parameters if config not provided

        Returns:
            Configured WordSearchBench instance

        Raises:
            ConfigurationError: If the configured puzzle cannot be generated
        """
        if config is None:
            config = BenchmarkConfig(**config_kwargs)

        players = []
        for i, player_config in enumerate(config.players):
            player_name = player_config.name or f"Player {i+1} ({player_config.model})"

            llm_kwargs = {
                "temperature": player_config.temperature,
                "max_tokens": player_config.max_tokens,
            }

            # Extra player config keys (e.g. reasoning params) go to LiteLLM
            if player_config.__pydantic_extra__:
                llm_kwargs.update(player_config.__pydantic_extra__)

            game = WordSearchGame.create(
                vocabulary=config.vocabulary,
                size=config.grid_size,
                seed=config.seed,
            )
            players.append(Player.create(
                player_id=f"p{i+1}",
                model=player_config.model,
                game=game,
                name=player_name,
                **llm_kwargs
            ))

        progress_log = ProgressLog(path=Path(progress_path)) if progress_path else None
        return cls(players=players, config=config, progress_log=progress_log)

    def setup(self) -> None:
        """Reset turn bookkeeping and start the clock."""
        if not self.players:
            raise ValueError("No players configured")

        self.started_at = datetime.now()
        self.current_turn = 0
        self.is_complete = False
        self.winner = None
        self.end_reason = ""
        self.turn_history = []

    def get_current_player(self) -> Player:
        """Get the player whose turn it is."""
        return self.players[self.current_turn % len(self.players)]

    def check_winner(self, player: Player) -> bool:
        """
        Finish the benchmark if `player` has found every word.

        Appends the player's completion record to the progress log.
        """
        if not player.game.is_complete:
            return False

        self.winner = player.player_id
        self.is_complete = True
        self.end_reason = f"{player.name} found all {len(player.game.vocabulary)} words"

        if self.progress_log and player.game.completion:
            self.progress_log.append(player.game.completion)
        return True

    def check_max_turns(self) -> bool:
        """Check if max turns reached."""
        if self.current_turn >= self.config.max_turns:
            self.is_complete = True
            self.end_reason = f"Max turns ({self.config.max_turns}) reached"
            return True
        return False

    def record_turn(self, turn_result: TurnResult) -> None:
        """Record a turn result in history."""
        self.turn_history.append(turn_result)
        self.current_turn += 1

    def _get_last_turn_feedback(self, player: Player) -> Dict[str, Any]:
        """Get feedback from the player's last turn."""
        for turn in reversed(self.turn_history):
            if turn.player_id == player.player_id:
                if turn.error:
                    return {"error": turn.error}
                if turn.result:
                    return {
                        "outcome": turn.result.outcome,
                        "word": turn.result.word,
                        "letters": turn.result.letters,
                    }
                return {}
        return {}

    def step(self, player: Optional[Player] = None) -> TurnResult:
        """
        Execute a single turn for a player.

        Prompts the LLM, parses the selection and checks it against the
        player's session.

        Args:
            player: The player to step (defaults to current player)

        Returns:
            TurnResult containing the turn outcome
        """
        if self.is_complete:
            raise ValueError("Benchmark is already complete")

        if player is None:
            player = self.get_current_player()

        if player.llm_client is None:
            raise ValueError(f"Player {player.player_id} has no LLM client")

        game = player.game
        turn_number = self.current_turn + 1

        prompt = build_player_prompt(
            rendered_grid=game.render(show_indices=True),
            words_remaining=game.words_remaining,
            words_found=[w for w in game.vocabulary if w in game.found_words],
            turn_number=turn_number,
            **self._get_last_turn_feedback(player)
        )

        if not player.llm_client.messages:
            player.llm_client.add_message("system", SYSTEM_PROMPT)
        player.llm_client.add_message("user", prompt)

        prompt_tokens = None
        completion_tokens = None
        total_tokens = None
        try:
            response = player.llm_client.completion()
            raw_response = response.choices[0].message.content or ""

            if hasattr(response, 'usage') and response.usage:
                prompt_tokens = getattr(response.usage, 'prompt_tokens', None)
                completion_tokens = getattr(response.usage, 'completion_tokens', None)
                total_tokens = getattr(response.usage, 'total_tokens', None)
        except Exception as e:
            # Provider failures cost the player a turn, not the whole run
            turn_result = TurnResult(
                player_id=player.player_id,
                turn_number=turn_number,
                words_found=game.score,
                error=f"LLM error: {str(e)}",
            )
            self.record_turn(turn_result)
            player.turn_count += 1
            self.check_max_turns()
            return turn_result

        player.llm_client.add_message("assistant", raw_response)

        parsed = Player.parse_response(raw_response)

        result = None
        error = parsed.parse_error
        if parsed.selection:
            try:
                result = player.submit(parsed.selection)
            except ValueError as e:
                error = str(e)

        turn_result = TurnResult(
            player_id=player.player_id,
            turn_number=turn_number,
            selection=parsed.selection or [],
            result=result,
            thinking=parsed.thinking,
            words_found=game.score,
            completed=game.is_complete,
            raw_response=raw_response,
            error=error,
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=total_tokens,
        )

        self.record_turn(turn_result)
        player.turn_count += 1

        if not self.check_winner(player):
            self.check_max_turns()

        return turn_result

    def get_state(self) -> Dict:
        """Get the current benchmark state."""
        return {
            "current_turn": self.current_turn,
            "is_complete": self.is_complete,
            "winner": self.winner,
            "end_reason": self.end_reason,
            "players": [p.get_state() for p in self.players],
            "num_turns_recorded": len(self.turn_history),
        }

    def get_result(self) -> BenchmarkResult:
        """
        Get the benchmark result.

        Returns:
            BenchmarkResult containing full run data
        """
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        conversation_history = {
            p.player_id: p.llm_client.get_messages()
            for p in self.players if p.llm_client
        }

        grid = []
        if self.players and self.players[0].game.grid:
            grid = ["".join(row) for row in self.players[0].game.grid.rows]

        return BenchmarkResult(
            config=self.config,
            winner=self.winner,
            total_turns=self.current_turn,
            end_reason=self.end_reason,
            grid=grid,
            player_results={p.player_id: p.get_state() for p in self.players},
            turn_history=self.turn_history,
            conversation_history=conversation_history,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
            total_prompt_tokens=sum(t.prompt_tokens or 0 for t in self.turn_history),
            total_completion_tokens=sum(t.completion_tokens or 0 for t in self.turn_history),
            total_tokens=sum(t.total_tokens or 0 for t in self.turn_history),
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the benchmark result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(mode="json"), f, indent=2, default=str)

    def run(
        self,
        on_turn: Optional[Callable[[TurnResult], None]] = None,
        verbose: bool = False,
    ) -> BenchmarkResult:
        """
        Run the full benchmark until completion.

        Args:
            on_turn: Optional callback called after each turn
            verbose: If True, print progress to stdout

        Returns:
            BenchmarkResult containing the full run data
        """
        if not self.started_at:
            self.setup()

        if verbose:
            print(f"Starting benchmark with {len(self.players)} players")
            print(f"Max turns: {self.config.max_turns}")
            print(f"Grid: {self.config.grid_size}x{self.config.grid_size}, "
                  f"{len(self.config.vocabulary)} words")
            print("-" * 40)

        while not self.is_complete:
            player = self.get_current_player()

            if verbose:
                print(f"\n{'='*60}")
                print(f"Turn {self.current_turn + 1}: {player.name}")
                print(f"Found {player.game.score}/{len(player.game.vocabulary)}")
                print("-" * 60)
                print("Calling LLM...", end=" ", flush=True)

            turn_result = self.step(player)

            if verbose:
                print("done.\n")
                if turn_result.thinking:
                    print("Reasoning:")
                    print(turn_result.thinking)
                    print()

                if turn_result.selection:
                    cells = " ".join(f"{r},{c}" for r, c in turn_result.selection)
                    print(f"Selection: {cells}")

                if turn_result.error:
                    print(f"ERROR: {turn_result.error}")
                elif turn_result.result:
                    outcome = turn_result.result
                    if outcome.outcome == "MATCHED":
                        print(f"Found {outcome.word}")
                    elif outcome.outcome == "ALREADY_FOUND":
                        print(f"Already found {outcome.word}")
                    else:
                        print(f"No match ('{outcome.letters}')")

                if turn_result.completed:
                    print(f"\n*** {player.name} found every word! ***")

            if on_turn:
                on_turn(turn_result)

        if verbose:
            print("-" * 40)
            print(f"Benchmark complete: {self.end_reason}")
            if self.winner:
                print(f"Winner: {self.winner}")

            print("\n=== Final Scores ===")
            for player in self.players:
                print(f"{player.name}: {player.game.score}/{len(player.game.vocabulary)} "
                      f"in {player.turn_count} turns")

        return self.get_result()
