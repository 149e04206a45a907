"""
Spellchecking on top of a Session.

    with Speller() as speller:
        for r in speller.spellcheck("hello hacking perl shrdlu 42"):
            print(r.type.value, r.term)
"""

import logging

from textispell.core.errors import InvalidInputError, ProtocolDesyncError
from textispell.core.response import Result, parse_response
from textispell.core import session as engine
from textispell.core.session import Session
from textispell.core.tokenize import tokenize

logger = logging.getLogger(__name__)

FORMATTERS = ("tex", "nroff")

# Tells the engine to take the rest of the line literally.
LITERAL_PREFIX = "^"


def normalize_line(line: str) -> str:
    """Drop one trailing newline and every carriage return."""
    line = line.removesuffix("\n").replace("\r", "")
    if "\n" in line:
        raise InvalidInputError("newlines are not allowed inside a spellcheck line")
    return line


def char_offset(line: str, byte_offset: int, encoding: str) -> int:
    """
    Turn the engine's 1-based byte offset into a 1-based character offset.
    """
    head = line.encode(encoding)[:byte_offset - 1]
    return len(head.decode(encoding, errors="ignore")) + 1


class Speller:
    def __init__(self, session: Session | None = None):
        self.session = session or Session()

    def __enter__(self) -> "Speller":
        self.session.ensure_started()
        return self

    def __exit__(self, *exc):
        self.close()

    @property
    def terse(self) -> bool:
        return self.session.terse

    def close(self):
        self.session.close()

    def spellcheck(self, line: str) -> list[Result]:
        """
        Analyze one line of text.

        Returns one result per reported term, in line order. Outside terse
        mode every term is reported; in terse mode only the misspelled
        ones are.

        Raises:
            StartupError: the engine could not be launched.
            InvalidInputError: the line contains an embedded newline.
            ProtocolDesyncError: the engine's answer does not line up with
                the terms in the line.
        """
        line = normalize_line(line)
        session = self.session

        # the mode in force must be the one the engine answered in
        with session.lock:
            session.ensure_started()
            terse = session.terse
            word_chars = session.word_chars
            encoding = session.config.encoding
            commentary = session.request(LITERAL_PREFIX + line)

        terms = tokenize(line, word_chars)

        if not terse and len(terms) != len(commentary):
            raise ProtocolDesyncError(
                f"{len(terms)} terms but {len(commentary)} response lines",
                terms=terms,
                commentary=commentary,
            )

        results = []
        for i, raw in enumerate(commentary):
            result = parse_response(raw)
            result.term = terms[i] if i < len(terms) else None
            if result.offset:
                result.offset = char_offset(line, result.offset, encoding)
                if terse:
                    # in terse mode the i-th response is the i-th *failing* term;
                    # the engine's offset says which one
                    rest = tokenize(line[result.offset - 1:], word_chars)
                    result.term = rest[0] if rest else None
            results.append(result)

        logger.debug("%d results for %r", len(results), line)
        return results

    def check_text(self, text: str) -> list[list[Result]]:
        """Spellcheck every line of a multi-line text."""
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return [self.spellcheck(line) for line in lines]

    # === Commands ===

    def _command(self, code: str, arg: str = ""):
        self.session.ensure_started().send_command(code, arg)

    def add_word(self, word: str):
        """Add a word to the personal dictionary, capitalization as given."""
        self._command(engine.ADD_WORD, word)

    def add_word_lowercase(self, word: str):
        """Add a word in lower case so it matches case-insensitively."""
        self._command(engine.ADD_WORD_LOWERCASE, word)

    def accept_word(self, word: str):
        """Accept a word for the rest of this session only."""
        self._command(engine.ACCEPT_WORD, word)

    def set_formatter(self, name: str):
        """Parse subsequent lines as tex or nroff input."""
        if name not in FORMATTERS:
            raise InvalidInputError(f"unknown formatter {name!r}, expected one of {FORMATTERS}")
        self._command(engine.SET_FORMATTER, name)

    def set_language_parameters(self, name: str):
        self._command(engine.SET_LANGUAGE, name)

    def save_dictionary(self):
        """Ask the engine to write its personal dictionary to disk now."""
        self._command(engine.SAVE_DICTIONARY)

    def enter_terse_mode(self):
        """Stop reporting correct words."""
        self.session.ensure_started().set_terse(True)

    def exit_terse_mode(self):
        self.session.ensure_started().set_terse(False)
