"""
Tests for the prompt_toolkit surface backend and the processor that draws its
ghost text.
"""

import pytest
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.layout.controls import BufferControl
from prompt_toolkit.layout.processors import TransformationInput

from ghosttext.engine import EngineState, RemovalReason, SuggestionEngine
from ghosttext.surface.backends.prompt_toolkit import BufferSurface, GhostTextProcessor

from .conftest import StubProvider, settle


def attached(buffer, provider, config, observer):
    surface = BufferSurface(buffer)
    engine = SuggestionEngine(surface, provider, config=config, observer=observer)
    surface.attach(engine)
    return surface, engine


class TestBufferSurface:
    """Tests for BufferSurface without an engine attached."""

    def test_preceding_text(self):
        surface = BufferSurface(Buffer(document=Document("one\ntwo\xa0three", 9)))

        assert surface.extract_preceding_text() == "one\ntwo t"

    def test_selection_is_not_a_caret(self):
        buffer = Buffer(document=Document("hello", 5))
        buffer.start_selection()
        surface = BufferSurface(buffer)

        assert not surface.is_caret_collapsed()
        assert surface.extract_preceding_text() is None
        assert not surface.is_caret_at_line_end()
        assert not surface.insert_suggestion_marker("!", "s-1", {})

    def test_line_end(self):
        surface = BufferSurface(Buffer(document=Document("hello world\nnext", 11)))

        assert surface.is_caret_at_line_end()

        surface.buffer.cursor_position = 5
        assert not surface.is_caret_at_line_end()

    def test_marker_is_not_part_of_the_buffer(self):
        surface = BufferSurface(Buffer(document=Document("hello", 5)))

        surface.insert_suggestion_marker(" world", "s-1", {"color": "grey"})

        assert surface.buffer.text == "hello"
        assert surface.committed_content() == "hello"
        assert surface.full_content() == "hello world"
        assert surface.marker_ids() == ["s-1"]
        assert surface.marker_text("s-1") == " world"
        assert surface.marker_text("s-2") is None

        surface.remove_marker("s-2")
        assert surface.marker_ids() == ["s-1"]

        surface.remove_marker("s-1")
        assert surface.marker is None
        assert surface.full_content() == "hello"

    def test_insert_plain_text(self):
        surface = BufferSurface(Buffer(document=Document("hello", 5)))

        assert surface.insert_plain_text(" world")

        assert surface.buffer.text == "hello world"
        assert surface.buffer.cursor_position == 11

    @pytest.mark.parametrize(
        "previous,current,expected",
        [
            (Document("ab", 2), Document("abc", 3), "c"),
            (Document("ac", 1), Document("abc", 2), "b"),
            (Document("", 0), Document("x\ny", 3), "x\ny"),
            (Document("abc", 3), Document("ab", 2), None),
            (Document("abc", 3), Document("xyzw", 4), None),
            (Document("abc", 3), Document("abc", 1), None),
        ],
    )
    def test_inserted_text(self, previous, current, expected):
        # pylint: disable=protected-access
        assert BufferSurface._inserted_text(previous, current) == expected


class TestBufferSurfaceWithEngine:
    """Tests for the events a BufferSurface forwards to its engine."""

    @pytest.mark.asyncio
    async def test_typing_drives_the_suggestion_lifecycle(self, config, observer):
        # Arrange
        buffer = Buffer()
        provider = StubProvider({"hel": "lo world"})
        surface, engine = attached(buffer, provider, config, observer)

        # Act: type, wait for the suggestion, then type its first character
        buffer.insert_text("hel")
        await settle(engine)

        assert engine.state == EngineState.DISPLAYED
        assert surface.marker.text == "lo world"
        assert surface.marker.cursor_position == 3

        buffer.insert_text("l")

        # Assert
        assert engine.state == EngineState.DISPLAYED
        assert surface.marker.text == "o world"
        assert surface.marker.cursor_position == 4
        assert provider.calls == ["hel"]
        observer.on_suggestion_rejected.assert_not_called()

    @pytest.mark.asyncio
    async def test_accept_writes_to_the_buffer(self, config, observer):
        buffer = Buffer()
        provider = StubProvider({"hel": "lo world"})
        surface, engine = attached(buffer, provider, config, observer)
        buffer.insert_text("hel")
        await settle(engine)

        assert engine.accept()

        assert buffer.text == "hello world"
        assert buffer.cursor_position == 11
        assert surface.marker is None
        observer.on_suggestion_accepted.assert_called_once()
        observer.on_suggestion_rejected.assert_not_called()
        observer.on_content_change.assert_called_with("hello world")

        await settle(engine)
        assert provider.calls == ["hel", "hello world"]

    @pytest.mark.asyncio
    async def test_cursor_movement_rejects(self, config, observer):
        buffer = Buffer()
        surface, engine = attached(
            buffer, StubProvider({"hello": " world"}), config, observer
        )
        buffer.insert_text("hello")
        await settle(engine)

        buffer.cursor_position = 2

        assert surface.marker is None
        assert engine.state == EngineState.IDLE
        assert (
            observer.on_suggestion_rejected.call_args.args[0].reason
            == RemovalReason.IMPLICIT
        )

    @pytest.mark.asyncio
    async def test_deletion_rejects(self, config, observer):
        buffer = Buffer()
        surface, engine = attached(
            buffer, StubProvider({"hello": " world"}), config, observer
        )
        buffer.insert_text("hello")
        await settle(engine)

        buffer.delete_before_cursor()

        assert surface.marker is None
        observer.on_suggestion_rejected.assert_called_once()


class TestGhostTextProcessor:
    """Tests for GhostTextProcessor."""

    @staticmethod
    def transform(surface, document, lineno, buffer=None):
        processor = GhostTextProcessor(surface)
        fragments = [("", document.lines[lineno])]
        return processor.apply_transformation(
            TransformationInput(
                buffer_control=BufferControl(buffer=buffer or surface.buffer),
                document=document,
                lineno=lineno,
                source_to_display=lambda i: i,
                fragments=fragments,
                width=80,
                height=10,
            )
        ).fragments

    def test_suggestion_is_appended_to_the_cursor_line(self):
        document = Document("first\nhel", 9)
        surface = BufferSurface(Buffer(document=document))
        surface.insert_suggestion_marker("lo\nthere", "s-1", {})

        assert self.transform(surface, document, 1) == [
            ("", "hel"),
            ("class:ghost-text", "lo ⏎ there"),
        ]
        assert self.transform(surface, document, 0) == [("", "first")]

    def test_nothing_is_drawn_without_a_marker(self):
        document = Document("hel", 3)
        surface = BufferSurface(Buffer(document=document))

        assert self.transform(surface, document, 0) == [("", "hel")]

    def test_other_buffers_are_left_alone(self):
        document = Document("hel", 3)
        surface = BufferSurface(Buffer(document=document))
        surface.insert_suggestion_marker("lo", "s-1", {})

        other = Buffer(document=document)

        assert self.transform(surface, document, 0, buffer=other) == [("", "hel")]
