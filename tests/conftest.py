import logging
from pathlib import Path

import pytest

from tests.infrastructure import load_sample, write


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """The CLI installs its own handler; restore propagation for caplog."""
    yield
    log = logging.getLogger("uac")
    for handler in list(log.handlers):
        log.removeHandler(handler)
    log.propagate = True
    log.setLevel(logging.NOTSET)


@pytest.fixture
def sample_go() -> str:
    """Go source with comments in every kind of position."""
    return load_sample("sample.go")


@pytest.fixture
def gofile(tmp_path: Path):
    """Factory writing a .go file under tmp_path."""
    def _make(name: str, code: str) -> Path:
        return write(tmp_path / name, code)
    return _make


@pytest.fixture
def in_tmp(tmp_path: Path, monkeypatch) -> Path:
    """Run the test with tmp_path as the working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
