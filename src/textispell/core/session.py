"""
Session with an ispell coprocess.

One session owns at most one engine process, started lazily by
ensure_started() and reused by every later request. The engine speaks a
line protocol: one request line in, and for analysis requests a block of
response lines ending with a blank line.
"""

import logging
import subprocess
import threading
from contextlib import suppress

from textispell.core.config import EngineConfig
from textispell.core.errors import TextIspellError, StartupError, InvalidInputError
from textispell.core.tokenize import DEFAULT_WORD_CHARS

logger = logging.getLogger(__name__)


# Single-character command codes understood by the engine.
ADD_WORD = "*"
ADD_WORD_LOWERCASE = "&"
ACCEPT_WORD = "@"
SET_FORMATTER = "-"
SET_LANGUAGE = "~"
SAVE_DICTIONARY = "#"
TERSE_ON = "!"
TERSE_OFF = "%"


class Session:
    def __init__(self, config: EngineConfig | None = None):
        self.config = config or EngineConfig()
        self.terse = False
        self.word_chars = DEFAULT_WORD_CHARS
        self.banner: str | None = None
        self._process: subprocess.Popen | None = None
        self.lock = threading.RLock()  # one request/response at a time

    def __enter__(self) -> "Session":
        return self.ensure_started()

    def __exit__(self, *exc):
        self.close()

    @property
    def running(self) -> bool:
        return self._process is not None and self._process.poll() is None

    def ensure_started(self) -> "Session":
        """Start the engine unless it is already running. Idempotent."""
        with self.lock:
            if self.running:
                return self
            if self._process is not None:
                logger.warning(
                    "engine (pid %s) exited with status %s, restarting",
                    self._process.pid, self._process.returncode,
                )
                process, self._process = self._process, None
                _shutdown(process)
            argv = self.config.argv
            logger.info("starting engine: %s", " ".join(argv))
            try:
                process = subprocess.Popen(
                    argv,
                    stdin=subprocess.PIPE,
                    stdout=subprocess.PIPE,
                    encoding=self.config.encoding,
                    bufsize=1,
                )
            except OSError as e:
                raise StartupError(f"cannot launch {argv[0]}: {e}") from e

            banner = process.stdout.readline()
            if not banner:
                process.kill()
                _shutdown(process)
                raise StartupError(
                    f"{argv[0]} exited before sending its banner"
                )

            self._process = process
            self.banner = banner.rstrip("\n")
            self.terse = False  # engine starts non-terse
            self.word_chars = DEFAULT_WORD_CHARS
            logger.debug("engine banner: %s", self.banner)
            return self

    def close(self):
        """Stop the engine. A later ensure_started() spawns a fresh one."""
        with self.lock:
            process, self._process = self._process, None
            if process is None:
                return
            logger.info("stopping engine (pid %s)", process.pid)
            _shutdown(process)

    def send_line(self, text: str):
        """Write one request line."""
        if "\n" in text or "\r" in text:
            raise InvalidInputError("line terminators are not allowed in a request")
        stdin = self._require_process().stdin
        logger.debug("> %s", text)
        stdin.write(text + "\n")
        stdin.flush()

    def read_response_block(self) -> list[str]:
        """Read lines up to the terminating blank line (or EOF)."""
        stdout = self._require_process().stdout
        lines = []
        while True:
            line = stdout.readline().rstrip("\n")
            if not line:
                break
            logger.debug("< %s", line)
            lines.append(line)
        return lines

    def request(self, text: str) -> list[str]:
        """Send one analysis line and collect its response block."""
        with self.lock:
            self.send_line(text)
            return self.read_response_block()

    def send_command(self, code: str, arg: str = ""):
        """Send a one-character command. The engine does not answer."""
        with self.lock:
            self.send_line(code + arg.strip())

    def set_terse(self, enabled: bool):
        """Toggle terse mode on both sides of the pipe."""
        with self.lock:
            self.send_command(TERSE_ON if enabled else TERSE_OFF)
            self.terse = enabled

    def _require_process(self) -> subprocess.Popen:
        if self._process is None:
            raise TextIspellError("session is not running; call ensure_started() first")
        return self._process


def _shutdown(process: subprocess.Popen):
    """Close the pipes and reap the engine, dead or alive."""
    # a dead engine makes the final flush of stdin fail
    with suppress(BrokenPipeError):
        process.stdin.close()
    try:
        process.wait(timeout=5)
    except subprocess.TimeoutExpired:
        process.terminate()
        process.wait()
    finally:
        process.stdout.close()
