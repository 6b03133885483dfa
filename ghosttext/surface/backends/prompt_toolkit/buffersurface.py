"""
module ghosttext.surface.backends.prompt_toolkit.buffersurface

Contains the definition of the BufferSurface class, a surface backend built on top
of a prompt_toolkit Buffer. The buffer holds the committed content while the
suggestion marker is kept alongside it and drawn by a GhostTextProcessor
"""

from typing import Dict, List

from prompt_toolkit.application.current import get_app_or_none
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document

from .... import constants
from ...abstract import SurfaceBackend
from .ghostmarker import GhostMarker


class BufferSurface(SurfaceBackend):
    """
    class BufferSurface

    A surface backend built on top of a prompt_toolkit Buffer. Text and cursor
    changes made to the buffer are forwarded to an attached suggestion engine,
    except for the ones the engine makes itself
    """

    buffer: Buffer
    __engine: "SuggestionEngine | None"
    __marker: GhostMarker | None
    __muted: bool
    __previous_document: Document

    def __init__(self: "BufferSurface", buffer: Buffer) -> None:
        self.buffer = buffer
        self.__engine = None
        self.__marker = None
        self.__muted = False
        self.__previous_document = buffer.document

        self.buffer.on_text_changed += self._handle_text_changed
        self.buffer.on_cursor_position_changed += self._handle_cursor_position_changed

    def attach(self: "BufferSurface", engine: "SuggestionEngine") -> None:
        self.__engine = engine

    def committed_content(self: "BufferSurface") -> str:
        return self.buffer.text

    def extract_preceding_text(self: "BufferSurface") -> str | None:
        if not self.is_caret_collapsed():
            return None

        return self.buffer.document.text_before_cursor.replace(constants.NBSP, " ")

    def full_content(self: "BufferSurface") -> str:
        if self.__marker is None:
            return self.buffer.text

        position: int = self.__marker.cursor_position
        return self.buffer.text[:position] + self.__marker.text + self.buffer.text[position:]

    def _handle_cursor_position_changed(self: "BufferSurface", _: Buffer) -> None:
        self.__previous_document = self.buffer.document
        if self.__muted or self.__engine is None:
            return

        self.__engine.handle_selection_changed()

    def _handle_text_changed(self: "BufferSurface", _: Buffer) -> None:
        inserted_text: str | None = self._inserted_text(
            self.__previous_document, self.buffer.document
        )
        self.__previous_document = self.buffer.document

        # text typed in front of the marker pushes it along
        if self.__marker is not None and inserted_text is not None:
            self.__marker = GhostMarker(
                self.__marker.id,
                self.__marker.text,
                self.buffer.cursor_position,
                self.__marker.style_hints,
            )

        if self.__muted or self.__engine is None:
            return

        self.__engine.handle_content_changed(inserted_text)

    @staticmethod
    def _inserted_text(previous: Document, current: Document) -> str | None:
        # recovers the text that was inserted at the previous cursor position. any
        # other kind of edit (deletions, replacements) yields None
        inserted_length: int = len(current.text) - len(previous.text)
        position: int = previous.cursor_position
        if inserted_length <= 0:
            return None

        if (
            current.text[:position] != previous.text[:position]
            or current.text[position + inserted_length :] != previous.text[position:]
        ):
            return None

        return current.text[position : position + inserted_length]

    def insert_plain_text(self: "BufferSurface", text: str) -> bool:
        if not self.is_caret_collapsed():
            return False

        self.__muted = True
        try:
            self.buffer.insert_text(text)
        finally:
            self.__muted = False

        return True

    def insert_suggestion_marker(
        self: "BufferSurface",
        text: str,
        suggestion_id: str,
        style_hints: Dict[str, str],
    ) -> bool:
        if not self.is_caret_collapsed():
            return False

        self.__marker = GhostMarker(
            suggestion_id, text, self.buffer.cursor_position, dict(style_hints)
        )
        self._invalidate()

        return True

    @staticmethod
    def _invalidate() -> None:
        if (app := get_app_or_none()) is not None:
            app.invalidate()

    def is_caret_at_line_end(self: "BufferSurface") -> bool:
        return (
            self.is_caret_collapsed()
            and len(self.buffer.document.current_line_after_cursor) == 0
        )

    def is_caret_collapsed(self: "BufferSurface") -> bool:
        return self.buffer.selection_state is None

    @property
    def marker(self: "BufferSurface") -> GhostMarker | None:
        return self.__marker

    def marker_ids(self: "BufferSurface") -> List[str]:
        return [self.__marker.id] if self.__marker is not None else []

    def marker_text(self: "BufferSurface", suggestion_id: str) -> str | None:
        if self.__marker is not None and self.__marker.id == suggestion_id:
            return self.__marker.text

        return None

    def remove_marker(self: "BufferSurface", suggestion_id: str) -> None:
        if self.__marker is not None and self.__marker.id == suggestion_id:
            self.__marker = None
            self._invalidate()


# pylint: disable=wrong-import-position
from ....engine import SuggestionEngine
