"""
Error types raised by the session and the speller.
"""


class TextIspellError(Exception):
    """Base class for everything this package raises."""


class StartupError(TextIspellError):
    """The engine process could not be launched."""


class InvalidInputError(TextIspellError, ValueError):
    """Caller-supplied input the protocol cannot carry."""


class ProtocolDesyncError(TextIspellError):
    """
    Engine output no longer lines up with what was sent.

    Raised when the number of response lines differs from the number of
    terms outside terse mode, or when a response line is malformed.
    """

    def __init__(self, message: str, terms: list[str] | None = None,
                 commentary: list[str] | None = None):
        super().__init__(message)
        self.terms = terms or []
        self.commentary = commentary or []
