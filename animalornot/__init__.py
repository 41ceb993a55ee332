"""
Animal or Not

A terminal toy that shows either a real three-letter animal name or a made-up
three-letter word, until every animal has turned up or you type "exit".
"""

__version__ = "1.0.0"

from .game import Session, run
from .generator import Outcome, generate
