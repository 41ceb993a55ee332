"""
Animal or Not - Game Loop

This module contains the session loop that drives the word generator until
every animal has been found or the player types "exit".
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from .generator import Outcome, generate
from .rng import Randomness
from .ui import prompt_line, wants_exit
from .utils import DONE_MESSAGE, EXIT_MESSAGE

logger = logging.getLogger(__name__)


class State(enum.Enum):
    RUNNING = "running"
    DONE = "done"


@dataclass
class Session:
    """One play-through: the random source, what's been found, and where we are."""

    rng: Randomness
    read_line: Optional[Callable[[], str]] = None
    discovered: set[str] = field(default_factory=set)
    state: State = State.RUNNING
    rounds: int = 0

    def step(self) -> State:
        """Show one word, then either finish or ask whether to keep going."""
        if self.state is State.DONE:
            return self.state

        self.rounds += 1
        if generate(self.discovered, self.rng) is Outcome.ALL_DONE:
            print(DONE_MESSAGE)
            logger.debug("All animals found after %d rounds.", self.rounds)
            self.state = State.DONE
            return self.state

        if wants_exit(prompt_line(self.read_line)):
            print(EXIT_MESSAGE)
            logger.debug("Player quit after %d rounds.", self.rounds)
            self.state = State.DONE
        return self.state


def run(rng: Randomness, read_line: Optional[Callable[[], str]] = None) -> int:
    """
    Main game loop.

    Args:
        rng: Random source for the session
        read_line: Callable returning the player's next line (defaults to stdin)

    Returns:
        Exit code (0 for normal exit)
    """
    session = Session(rng, read_line)
    while session.step() is State.RUNNING:
        pass
    return 0
