import io
from typing import Iterator

import pytest

import loxscan
import loxscan.lox
from loxscan.lox import Lox


@pytest.fixture(autouse=True)
def reset_lox() -> Iterator[None]:
    """Lox error flags are class-level, clear them around every test."""
    Lox.reset()
    yield
    Lox.reset()


@pytest.fixture
def err(monkeypatch: pytest.MonkeyPatch) -> io.StringIO:
    """Capture everything the CLI writes to stderr."""
    stream = io.StringIO()
    monkeypatch.setattr(loxscan, "stderr", stream)
    monkeypatch.setattr(loxscan.lox, "stderr", stream)
    return stream
