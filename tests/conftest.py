import stat
import sys
from pathlib import Path

import pytest

from textispell.core.config import EngineConfig
from textispell.core.session import Session
from textispell.core.speller import Speller

FAKE_ENGINE = Path(__file__).parent / "fake_ispell.py"


@pytest.fixture
def engine_path(tmp_path) -> str:
    """An executable copy of the fake engine, run by this interpreter."""
    path = tmp_path / "ispell"
    path.write_text(f"#!{sys.executable}\n" + FAKE_ENGINE.read_text())
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture
def session(engine_path):
    s = Session(EngineConfig(path=engine_path))
    yield s
    s.close()


@pytest.fixture
def speller(session):
    return Speller(session)


@pytest.fixture
def missing_path(tmp_path) -> str:
    return str(tmp_path / "no-such-ispell")

