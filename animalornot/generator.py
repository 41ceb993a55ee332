"""
Animal or Not - Word Generator

This module picks the next word to show: either a real animal the player hasn't
seen yet, or a made-up three-letter word built from letters real animal names use.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .rng import Randomness
from .ui import render_progress, render_word
from .utils import ANIMAL_NAMES, EXTRA_FIRST_LETTERS, KNOWN_NAME_CHANCE, VOWELS

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """What happened on a generator call."""

    CONTINUE = "continue"
    ALL_DONE = "all_done"


@dataclass(frozen=True)
class LetterPools:
    """Candidate letters for each position of a made-up word."""

    first: tuple[str, ...]
    second: tuple[str, ...]
    third: tuple[str, ...]

    @classmethod
    def from_names(cls, names: Iterable[str]) -> LetterPools:
        """
        Build pools from the letters each position uses across names.

        The first pool also gets EXTRA_FIRST_LETTERS. The second pool keeps
        vowels only, falling back to every vowel when none are used.

        Args:
            names: Three-letter names to draw letters from

        Returns:
            LetterPools with each pool sorted
        """
        names = list(names)
        first = {name[0] for name in names} | set(EXTRA_FIRST_LETTERS)
        second = {name[1] for name in names} & set(VOWELS)
        if not second:
            second = set(VOWELS)
        third = {name[2] for name in names}
        return cls(tuple(sorted(first)), tuple(sorted(second)), tuple(sorted(third)))


def is_animal(word: str) -> bool:
    return word in ANIMAL_NAMES


def is_complete(discovered: set[str]) -> bool:
    """True once every animal in the catalog has been discovered."""
    return discovered == set(ANIMAL_NAMES)


def undiscovered(discovered: set[str]) -> list[str]:
    """Animals not yet discovered, in catalog order."""
    return [name for name in ANIMAL_NAMES if name not in discovered]


def pick(rng: Randomness, choices: Sequence[str]) -> str:
    return choices[rng.uniform(len(choices))]


def synthesize_word(rng: Randomness, pools: Optional[LetterPools] = None) -> str:
    """
    Make up a three-letter word, one random letter per position.

    Args:
        rng: Random source
        pools: Letter pools to draw from (derived from ANIMAL_NAMES if omitted)

    Returns:
        The new word (may happen to be a real animal)
    """
    if pools is None:
        pools = LetterPools.from_names(ANIMAL_NAMES)
    return pick(rng, pools.first) + pick(rng, pools.second) + pick(rng, pools.third)


def generate(discovered: set[str], rng: Randomness) -> Outcome:
    """
    Show the next word and record it if it's a real animal.

    Args:
        discovered: Animals found so far (updated in place)
        rng: Random source

    Returns:
        Outcome.ALL_DONE if every animal was already found, else Outcome.CONTINUE
    """
    render_progress(discovered)

    if is_complete(discovered):
        return Outcome.ALL_DONE

    if rng.fraction() < KNOWN_NAME_CHANCE:
        available = undiscovered(discovered)
        if available:
            word = pick(rng, available)
            discovered.add(word)
            logger.debug("Known name: %s (%d left).", word, len(available) - 1)
            render_word(word)
            return Outcome.CONTINUE

    word = synthesize_word(rng)
    if is_animal(word):
        if word not in discovered:
            logger.debug("Made-up word %s is a real animal.", word)
        discovered.add(word)
    else:
        logger.debug("Made-up word: %s", word)

    render_word(word)
    return Outcome.CONTINUE
