#!/usr/bin/env python3
"""
Animal or Not - Main Entry Point

Run:
  python -m animalornot

Press Enter for the next word, type exit to quit. The game ends on its own
once all 16 animals have shown up.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .game import run
from .rng import Randomness, SecureRandomness, SystemRandomness


def build_rng(seed: Optional[int], secure: bool) -> Randomness:
    if secure:
        return SecureRandomness()
    return SystemRandomness(seed)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point with argument parsing.

    Returns:
        Exit code
    """
    parser = argparse.ArgumentParser(description="Real three-letter animal, or made-up word? (no deps).")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--seed", type=int, default=None, help="seed the random source for a repeatable game")
    source.add_argument("--secure", action="store_true", help="use the operating system's random source")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(build_rng(args.seed, bool(args.secure)))
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
