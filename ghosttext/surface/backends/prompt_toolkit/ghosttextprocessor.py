"""
module ghosttext.surface.backends.prompt_toolkit.ghosttextprocessor

Contains the definition of the GhostTextProcessor class, a prompt_toolkit input
processor that draws the suggestion held by a BufferSurface after the cursor
"""

from prompt_toolkit.layout.processors import (
    Processor,
    Transformation,
    TransformationInput,
)

from .buffersurface import BufferSurface
from .ghostmarker import GhostMarker


class GhostTextProcessor(Processor):
    """
    class GhostTextProcessor

    A prompt_toolkit input processor that draws the suggestion held by a
    BufferSurface after the cursor. Suggestions are only displayed at the end of
    a line so the text is appended to the cursor's line
    """

    # pylint: disable=too-few-public-methods

    __style: str
    __surface: BufferSurface

    def __init__(
        self: "GhostTextProcessor",
        surface: BufferSurface,
        style: str = "class:ghost-text",
    ) -> None:
        self.__style = style
        self.__surface = surface

    def apply_transformation(
        self: "GhostTextProcessor", transformation_input: TransformationInput
    ) -> Transformation:
        marker: GhostMarker | None = self.__surface.marker
        document = transformation_input.document

        if (
            marker is None
            or transformation_input.buffer_control.buffer is not self.__surface.buffer
            or transformation_input.lineno != document.cursor_position_row
            or not document.is_cursor_at_the_end_of_line
        ):
            return Transformation(fragments=transformation_input.fragments)

        # a multiline suggestion is drawn on the cursor's line
        return Transformation(
            fragments=transformation_input.fragments
            + [(self.__style, marker.text.replace("\n", " ⏎ "))]
        )
