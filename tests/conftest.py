"""
Shared test fixtures for the composable test suite.

Resets process-wide state touched by tests: structlog configuration and
the cached settings object.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from composable.config import get_settings


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Give every test pristine structlog defaults and freshly loaded settings."""
    get_settings.cache_clear()
    yield
    structlog.reset_defaults()
    get_settings.cache_clear()


@pytest.fixture()
def call_log() -> list[str]:
    """Ordered record of stage invocations, shared by the stages of one test."""
    return []


def parse_int(text: str) -> int | None:
    """Parse a base-10 integer, returning None when the text isn't one."""
    try:
        return int(text)
    except ValueError:
        return None


def default_zero(value: int | None) -> int:
    """Replace a missing parse result with 0."""
    return 0 if value is None else value


def first_word(text: str) -> str:
    """Return the first whitespace-separated word, or '' for blank text."""
    words = text.split()
    return words[0] if words else ""
