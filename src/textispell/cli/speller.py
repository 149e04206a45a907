"""
Build a Speller from CLI arguments.
"""

from textispell.core.config import EngineConfig
from textispell.core.session import Session
from textispell.core.speller import Speller


def make_speller(args) -> Speller:
    config = EngineConfig(path=args.ispell) if getattr(args, "ispell", None) else EngineConfig()
    return Speller(Session(config))
