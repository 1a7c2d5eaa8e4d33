from typing import List, Optional


def format_words(words: List[str]) -> str:
    """Format a word list as a comma-separated line."""
    return ", ".join(words) if words else "(none)"


def format_feedback(
    outcome: Optional[str] = None,
    word: Optional[str] = None,
    letters: Optional[str] = None,
    error: Optional[str] = None,
) -> str:
    """Format feedback from the previous turn."""
    if error:
        return f"Your last response could not be used: {error}"

    if outcome == "MATCHED":
        return f"Correct! You found {word}."
    if outcome == "ALREADY_FOUND":
        return f"You had already found {word}. Pick a different word."
    if outcome == "NO_MATCH":
        spelled = f" (your cells spelled '{letters}')" if letters else ""
        return f"That selection is not a target word{spelled}."

    return ""


def build_player_prompt(
    rendered_grid: str,
    words_remaining: List[str],
    words_found: List[str],
    turn_number: int,
    outcome: Optional[str] = None,
    word: Optional[str] = None,
    letters: Optional[str] = None,
    error: Optional[str] = None,
) -> str:
    """
    Build the player prompt with the current grid and feedback.

    Args:
        rendered_grid: Grid rendered with row/column indices
        words_remaining: Target words not yet found
        words_found: Target words already found
        turn_number: Current turn number
        outcome: Outcome of the last selection, if any
        word: Word matched by the last selection, if any
        letters: Letters spelled by the last selection
        error: Error from the last turn (unparseable response, bad cell)

    Returns:
        Formatted prompt string
    """
    lines = []

    lines.append(f"## Turn {turn_number}")
    lines.append("")

    feedback = format_feedback(outcome, word, letters, error)
    if feedback:
        lines.append("### Feedback from last turn")
        lines.append(feedback)
        lines.append("")

    lines.append("### Grid")
    lines.append("```")
    lines.append(rendered_grid)
    lines.append("```")
    lines.append("")

    lines.append("### Words")
    lines.append(f"- Remaining ({len(words_remaining)}): {format_words(words_remaining)}")
    lines.append(f"- Found ({len(words_found)}): {format_words(words_found)}")

    return "\n".join(lines)
