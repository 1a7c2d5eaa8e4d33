"""
Play a word-search puzzle in the terminal.

Usage:
    python -m src.play
    python -m src.play --size 10 --seed 7 --words SOL LUNA MARTE
    python -m src.play --progress results/progress.jsonl
"""

import argparse
import re
import sys
from pathlib import Path
from typing import Callable, Optional

from .environment import WordSearchGame, ProgressLog, ProgressRecord
from .wordsearch import ConfigurationError, DEFAULT_VOCABULARY, DEFAULT_GRID_SIZE


_CELL_PATTERN = re.compile(r'(\d+)\s*,\s*(\d+)')

HELP = """Commands:
  r,c r,c ...   select cells in order and check them (e.g. 0,0 0,1 0,2)
  reset         start over with a new grid
  quit          leave the game"""


def show(game: WordSearchGame, write: Callable[[str], None]) -> None:
    """Print the grid and word list."""
    write(game.render(show_indices=True))
    write("")
    for word in game.vocabulary:
        mark = "x" if word in game.found_words else " "
        write(f"  [{mark}] {word}")


def play(
    game: WordSearchGame,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    progress_log: Optional[ProgressLog] = None,
) -> Optional[ProgressRecord]:
    """
    Run the interactive loop until the puzzle is solved or the player quits.

    Returns:
        The completion record, or None if the player quit first
    """
    write(HELP)
    write("")
    show(game, write)

    while not game.is_complete:
        try:
            command = read("> ").strip()
        except EOFError:
            return None

        if not command:
            continue
        if command.lower() in ("quit", "exit", "q"):
            return None
        if command.lower() == "reset":
            try:
                game.reset()
            except ConfigurationError as e:
                write(f"Could not build a new grid: {e}")
                write("Keeping the current grid.")
                continue
            write("New grid.")
            show(game, write)
            continue

        cells = _CELL_PATTERN.findall(command)
        if not cells:
            write(HELP)
            continue

        try:
            game.select([(int(r), int(c)) for r, c in cells])
        except ValueError as e:
            game.selection = []
            write(f"Invalid selection: {e}")
            continue

        result = game.check_selection()
        if result.outcome == "MATCHED":
            write(f"Found {result.word}! ({game.score}/{len(game.vocabulary)})")
        elif result.outcome == "ALREADY_FOUND":
            write(f"{result.word} was already found.")
        else:
            write(f"'{result.letters}' is not one of the words.")

    write("")
    write(f"Puzzle complete! Score: {game.completion.score}")
    if progress_log:
        progress_log.append(game.completion)
    return game.completion


def main():
    parser = argparse.ArgumentParser(
        description="Play a word-search puzzle in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=HELP,
    )
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid dimension")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--words", nargs="+", default=DEFAULT_VOCABULARY, help="Words to hide")
    parser.add_argument("--player", help="Player name stored with the completion record")
    parser.add_argument("--progress", help="Append the completion record to this JSON-lines file")

    args = parser.parse_args()

    try:
        game = WordSearchGame.create(
            vocabulary=args.words,
            size=args.size,
            seed=args.seed,
            player=args.player,
        )
    except ConfigurationError as e:
        print(f"Error setting up puzzle: {e}", file=sys.stderr)
        return 1

    progress_log = ProgressLog(path=Path(args.progress)) if args.progress else None
    play(game, progress_log=progress_log)
    return 0


if __name__ == "__main__":
    sys.exit(main())
