from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pytest

from utils import write_text_file


@pytest.fixture(autouse=True)
def _no_network(monkeypatch: pytest.MonkeyPatch) -> None:
    """Fail loudly if a test forgets to inject a fake session."""

    def _refuse(*args, **kwargs):
        raise AssertionError("tests must not hit the network")

    monkeypatch.setattr("requests.Session.get", _refuse)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Iterator[Path]:
    """a.txt, b.md and sub/c.txt under a fresh directory."""
    base = tmp_path / "tree"
    write_text_file(base / "a.txt", "alpha\n")
    write_text_file(base / "b.md", "# beta\n")
    write_text_file(base / "sub" / "c.txt", "gamma\n")
    yield base


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """main() attaches a stderr handler bound to the current test's stream; drop it afterwards."""
    yield
    pkg_logger = logging.getLogger("findfiles")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)
    pkg_logger.setLevel(logging.NOTSET)
