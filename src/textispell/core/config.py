"""
Engine configuration.
"""

import os
from dataclasses import dataclass

DEFAULT_ISPELL_PATH = "/usr/local/bin/ispell"
PATH_ENV_VAR = "TEXTISPELL_PATH"

# -a: pipe protocol, -S: sort near misses by probable correctness
PROTOCOL_ARGS = ("-a", "-S")

# ispell works on bytes; offsets it reports count bytes in this encoding
DEFAULT_ENCODING = "utf-8"


def default_path() -> str:
    return os.environ.get(PATH_ENV_VAR) or DEFAULT_ISPELL_PATH


@dataclass(frozen=True)
class EngineConfig:
    """
    How to launch the engine.

    With no explicit path, $TEXTISPELL_PATH (else the default install
    location) is looked up when the session starts, not when the config
    is built. A running session ignores later changes.
    """
    path: str | None = None
    encoding: str = DEFAULT_ENCODING

    @property
    def executable(self) -> str:
        return self.path or default_path()

    @property
    def argv(self) -> list[str]:
        return [self.executable, *PROTOCOL_ARGS]
