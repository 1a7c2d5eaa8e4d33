"""Prompt templates for word-search LLM players."""

from .system_prompt import SYSTEM_PROMPT, get_system_prompt
from .player_prompt import build_player_prompt, format_words, format_feedback

__all__ = [
    "SYSTEM_PROMPT",
    "get_system_prompt",
    "build_player_prompt",
    "format_words",
    "format_feedback",
]
