"""
Term extraction.

Splits a line into the same terms the engine reports on, so that
responses can be matched back to the text.
"""

import re
from functools import lru_cache

# ispell's default word characters: letters, digits and the apostrophe.
DEFAULT_WORD_CHARS = "'0-9A-Za-z"


@lru_cache(maxsize=32)
def split_pattern(word_chars: str) -> re.Pattern:
    """Compile the splitter for a word-character class body."""
    # escape everything but '-' so ranges like a-z keep working
    body = "".join(c if c == "-" else re.escape(c) for c in word_chars)
    return re.compile(f"[^{body}]+")


def tokenize(line: str, word_chars: str = DEFAULT_WORD_CHARS) -> list[str]:
    """
    Split a line into terms.

    Purely numeric tokens are dropped: the engine skips them without a
    response line.
    """
    pieces = split_pattern(word_chars).split(line)
    return [p for p in pieces if p and not p.isdigit()]
