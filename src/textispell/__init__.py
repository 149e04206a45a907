"""
textispell - structured access to the ispell interactive protocol.
"""

from textispell.core.errors import (
    TextIspellError, StartupError, InvalidInputError, ProtocolDesyncError
)
from textispell.core.response import Result, ResultType
from textispell.core.session import Session
from textispell.core.speller import Speller

__all__ = [
    "TextIspellError",
    "StartupError",
    "InvalidInputError",
    "ProtocolDesyncError",
    "Result",
    "ResultType",
    "Session",
    "Speller",
]
