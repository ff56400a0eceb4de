"""Shared pytest fixtures."""

from typing import Callable

import pytest

from agentshot.core.screen import Screen


@pytest.fixture
def make_screen() -> Callable[..., Screen]:
    """Factory building a screen and feeding it text in one step."""
    def _make(text: str = "", cols: int = 20, rows: int = 5) -> Screen:
        screen = Screen(cols, rows)
        screen.feed(text.encode("utf-8"))
        return screen
    return _make
