"""
Shared fixtures and helpers for the ghosttext test suite.
"""

import asyncio
from typing import List
from unittest.mock import Mock

import pytest

from ghosttext.config import GhostTextConfig
from ghosttext.engine import CancellationToken, SuggestionEngine, SuggestionObserver
from ghosttext.surface.tree import TreeSurface


class StubProvider:
    """Synchronous provider that answers from a fixed table and records its calls."""

    def __init__(self, answers=None, default=None):
        self.answers = answers or {}
        self.default = default
        self.calls: List[str] = []
        self.tokens: List[CancellationToken] = []

    def __call__(self, leading_text, token):
        self.calls.append(leading_text)
        self.tokens.append(token)
        return self.answers.get(leading_text, self.default)


class GatedProvider:
    """Async provider that holds every call until release() is called."""

    def __init__(self, text):
        self.text = text
        self.calls: List[str] = []
        self.tokens: List[CancellationToken] = []
        self.gate = asyncio.Event()

    async def __call__(self, leading_text, token):
        self.calls.append(leading_text)
        self.tokens.append(token)
        await self.gate.wait()
        return self.text

    def release(self):
        self.gate.set()


async def settle(engine: SuggestionEngine, extra: float = 0.05) -> None:
    """Wait out the debounce window and any fetch it started."""
    await asyncio.sleep(engine.debounce_ms / 1000 + extra)
    while (task := engine.pending_fetch) is not None:
        await task


def type_into(surface: TreeSurface, engine: SuggestionEngine, text: str) -> None:
    """Type text into a tree surface and deliver the events a browser would."""
    surface.type_text(text)
    engine.handle_content_changed(text)
    engine.handle_selection_changed()


def make_config(**overrides) -> GhostTextConfig:
    config = GhostTextConfig.make_default()
    config.debounce_ms = 10
    for name, value in overrides.items():
        setattr(config, name, value)
    return config


@pytest.fixture
def observer():
    """Create a mock observer that records every notification."""
    return Mock(spec=SuggestionObserver)


@pytest.fixture
def surface():
    """Create a one-line surface with the caret at the end of 'hello'."""
    return TreeSurface.from_text("hello")


@pytest.fixture
def config():
    """Create a configuration with a short debounce window."""
    return make_config()
