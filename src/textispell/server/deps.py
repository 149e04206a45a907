"""
Shared dependencies for routes.
"""

import threading

from textispell.core.speller import Speller

_speller: Speller | None = None
_lock = threading.Lock()


def get_speller() -> Speller:
    """One engine session for the whole server process, started on first use."""
    global _speller
    with _lock:
        if _speller is None:
            _speller = Speller()
        return _speller


def shutdown():
    global _speller
    with _lock:
        if _speller is not None:
            _speller.close()
            _speller = None
