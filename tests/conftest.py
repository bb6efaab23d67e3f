"""Pytest configuration and shared fixtures.

This module provides fixtures for testing libranet, including a
controllable clock and sample items of each kind.
"""

import io
import os
from datetime import datetime, timedelta, timezone
from typing import Generator

import pytest

from libranet.config import reset_config
from libranet.lending import AudioBook, Book, EMagazine


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


# ============================================================================
# Config Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    """Reset global config and lending env vars around each test."""
    saved = {k: v for k, v in os.environ.items() if k.startswith("LIBRANET_")}
    for key in saved:
        del os.environ[key]
    reset_config()

    yield

    reset_config()
    for key in [k for k in os.environ if k.startswith("LIBRANET_")]:
        del os.environ[key]
    os.environ.update(saved)


# ============================================================================
# Item Fixtures
# ============================================================================


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock at a fixed UTC time."""
    return FakeClock(datetime(2025, 1, 20, 10, 0, tzinfo=timezone.utc))


@pytest.fixture
def output() -> io.StringIO:
    """Capture play/archive messages."""
    return io.StringIO()


@pytest.fixture
def book(clock, output) -> Book:
    """Create a sample book."""
    return Book(101, "Effective Java", "Joshua Bloch", 10, 416, clock=clock, output=output)


@pytest.fixture
def audio_book(clock, output) -> AudioBook:
    """Create a sample audiobook."""
    return AudioBook(
        102,
        "Java Concurrency",
        "Brian Goetz",
        15,
        timedelta(hours=4),
        clock=clock,
        output=output,
    )


@pytest.fixture
def emagazine(clock, output) -> EMagazine:
    """Create a sample e-magazine issue."""
    return EMagazine(103, "Tech Today", "Editors", 5, 27, clock=clock, output=output)
