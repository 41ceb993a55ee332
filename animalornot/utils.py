"""
Animal or Not - Utilities and Constants

This module contains the word lists, messages and small helpers used throughout the game.
"""

import time

# Every real three-letter animal the player can discover
ANIMAL_NAMES = (
    "pup", "dog", "cat", "rat", "fox",
    "hen", "bug", "ant", "fly", "pig",
    "bat", "cow", "hog", "ape", "owl",
    "bee",
)

# Extra starting letters so made-up words don't always look familiar
EXTRA_FIRST_LETTERS = ("t", "l", "b", "p", "s")

VOWELS = ("a", "e", "i", "o", "u")

# Odds of showing a real, not-yet-seen animal instead of making one up
KNOWN_NAME_CHANCE = 0.25

# Used when the clock can't seed the random source
FALLBACK_SEED = 0

CLEAR_LINES = 50
PROMPT = "Press Enter to continue (or type 'exit' to quit): "
EXIT_WORD = "exit"
DONE_MESSAGE = "All Done!"
EXIT_MESSAGE = "OK!"


def now_ns() -> int:
    """Get current time in nanoseconds since epoch."""
    return time.time_ns()


def fmt_discovered(discovered: set[str]) -> str:
    """Format the discovered names like a set literal, sorted (e.g. "{'cat', 'dog'}")."""
    return "{" + ", ".join(repr(name) for name in sorted(discovered)) + "}"
