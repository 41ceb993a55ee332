"""
Animal or Not - User Interface

This module handles all console output and the continue/exit prompt.
"""

import sys
from typing import Callable, Optional

from .utils import CLEAR_LINES, EXIT_WORD, PROMPT, fmt_discovered


def clear_screen() -> None:
    """Push old output off screen with blank lines."""
    print("\n" * CLEAR_LINES)


def render_progress(discovered: set[str]) -> None:
    """Clear the screen and show which animals have turned up so far."""
    clear_screen()
    print(f"So far: {fmt_discovered(discovered)}\n")


def render_word(word: str) -> None:
    print(f"{word}\n")


def prompt_line(read_line: Optional[Callable[[], str]] = None) -> str:
    """
    Show the continue prompt and wait for one line of input.

    Args:
        read_line: Callable returning the next line (defaults to stdin)

    Returns:
        The raw line, or "" at end of input
    """
    print(PROMPT, end="", flush=True)
    if read_line is None:
        return sys.stdin.readline()
    return read_line()


def wants_exit(reply: str) -> bool:
    """Only the exact word "exit" (surrounding whitespace ignored) quits."""
    return reply.strip() == EXIT_WORD
