"""
module ghosttext.surface.abstract.surfacebackend

Contains the definition of the SurfaceBackend class, an abstract base class that
is extended by every editable surface that ghost text can be displayed in
"""

from abc import ABCMeta, abstractmethod
from typing import Dict, List


class SurfaceBackend(metaclass=ABCMeta):
    """
    class SurfaceBackend

    Abstract base class that is extended by every editable surface that ghost
    text can be displayed in. A suggestion engine only reads and writes the
    surface through these methods
    """

    @abstractmethod
    def committed_content(self: "SurfaceBackend") -> str:
        """
        Returns the content of the surface excluding any suggestion marker

        Args:
            None

        Returns:
            str: The committed content of the surface

        Raises:
            Nothing
        """

    @abstractmethod
    def extract_preceding_text(self: "SurfaceBackend") -> str | None:
        """
        Returns the text of the surface from its start up to the caret with line
        breaks normalized to newlines and non-breaking spaces to regular spaces

        Args:
            None

        Returns:
            str | None: The text preceding the caret or None if the caret is
                unavailable (no selection or a range selection)

        Raises:
            Nothing
        """

    @abstractmethod
    def full_content(self: "SurfaceBackend") -> str:
        """
        Returns a snapshot of the content of the surface including any
        suggestion marker

        Args:
            None

        Returns:
            str: The full content of the surface

        Raises:
            Nothing
        """

    @abstractmethod
    def insert_plain_text(self: "SurfaceBackend", text: str) -> bool:
        """
        Inserts committed text at the caret and moves the caret after it

        Args:
            text (str): The text to insert

        Returns:
            bool: Whether the text was inserted. False if the caret is no longer
                inside the surface

        Raises:
            Nothing
        """

    @abstractmethod
    def insert_suggestion_marker(
        self: "SurfaceBackend",
        text: str,
        suggestion_id: str,
        style_hints: Dict[str, str],
    ) -> bool:
        """
        Inserts a suggestion marker holding the provided text at the caret. The
        caret stays in front of the marker

        Args:
            text (str): The suggestion text to display
            suggestion_id (str): The id that identifies the marker
            style_hints (Dict[str, str]): Presentation hints for the marker

        Returns:
            bool: Whether the marker was inserted. False if the caret is no
                longer inside the surface

        Raises:
            Nothing
        """

    @abstractmethod
    def is_caret_at_line_end(self: "SurfaceBackend") -> bool: ...

    @abstractmethod
    def is_caret_collapsed(self: "SurfaceBackend") -> bool: ...

    @abstractmethod
    def marker_ids(self: "SurfaceBackend") -> List[str]:
        """
        Returns the ids of every suggestion marker currently in the surface in
        document order

        Args:
            None

        Returns:
            List[str]: The ids of the markers in the surface

        Raises:
            Nothing
        """

    @abstractmethod
    def marker_text(self: "SurfaceBackend", suggestion_id: str) -> str | None: ...

    @abstractmethod
    def remove_marker(self: "SurfaceBackend", suggestion_id: str) -> None:
        """
        Removes every suggestion marker with the provided id. Removing a marker
        that does not exist does nothing

        Args:
            suggestion_id (str): The id of the marker to remove

        Returns:
            Nothing

        Raises:
            Nothing
        """
