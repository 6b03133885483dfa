"""
Tests for the GhostTextEditor prompt_toolkit session, run against a pipe input
and a dummy output.
"""

import asyncio

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput

from ghosttext.editor import GhostTextEditor
from ghosttext.engine import EngineState
from ghosttext.surface.backends.prompt_toolkit import GhostTextProcessor

from .conftest import StubProvider

F5 = "\x1b[15~"


@pytest.fixture
def pipe_input():
    with create_pipe_input() as pipe:
        with create_app_session(input=pipe, output=DummyOutput()):
            yield pipe


class TestGhostTextEditor:
    """Tests for GhostTextEditor."""

    def test_engine_is_wired_to_the_session_buffer(self, pipe_input, config):
        editor = GhostTextEditor(config, StubProvider())

        assert editor.surface.buffer is editor.session.default_buffer
        assert editor.engine.surface is editor.surface
        assert editor.engine.debounce_ms == config.debounce_ms
        assert any(
            isinstance(processor, GhostTextProcessor)
            for processor in editor.session.input_processors
        )

    @pytest.mark.asyncio
    async def test_tab_accepts_the_suggestion(self, pipe_input, config, observer):
        # Arrange
        editor = GhostTextEditor(config, StubProvider({"hel": "lo"}), observer=observer)
        session = asyncio.ensure_future(editor.edit())

        # Act
        pipe_input.send_text("hel")
        await asyncio.sleep(0.2)
        pipe_input.send_text("\t")
        await asyncio.sleep(0.05)
        pipe_input.send_text(F5)
        result = await asyncio.wait_for(session, 5)

        # Assert
        assert result == "hello"
        observer.on_suggestion_accepted.assert_called_once()
        assert editor.engine.state == EngineState.IDLE

    @pytest.mark.asyncio
    async def test_tab_without_suggestion_inserts_spaces(self, pipe_input, config):
        editor = GhostTextEditor(config, StubProvider())
        session = asyncio.ensure_future(editor.edit())

        pipe_input.send_text("ab\t")
        await asyncio.sleep(0.05)
        pipe_input.send_text(F5)

        assert await asyncio.wait_for(session, 5) == "ab  "
