"""
module ghosttext.surface.tree.dataclasses.node

Contains the definition of the Node dataclass, a single node of an abstract
editable-content tree. A tree of nodes stands in for the structure of a rich text
surface (paragraphs, inline formatting, line breaks and text) so that caret
resolution can be performed as an explicit tree walk
"""

from dataclasses import dataclass, field
import html
from typing import Dict, Iterator, List, Tuple

from .... import constants
from ..enums import NodeKind
from ...exceptions import UnresolvableCaretException


@dataclass
class Node:
    """
    class Node

    A single node of an abstract editable-content tree. Blocks are line or paragraph
    level structure, inlines are transparent formatting, text and line breaks are
    leaves and markers hold suggestion text that is not part of the committed
    content.
    """

    kind: NodeKind
    text: str = ""
    children: List["Node"] = field(default_factory=list)
    tag: str = ""
    marker_id: str | None = None
    class_name: str = ""
    style_hints: Dict[str, str] = field(default_factory=dict)

    @staticmethod
    def block(*children: "Node") -> "Node":
        return Node(NodeKind.BLOCK, children=list(children), tag="div")

    @staticmethod
    def inline(tag: str, *children: "Node") -> "Node":
        return Node(NodeKind.INLINE, children=list(children), tag=tag)

    @staticmethod
    def line_break() -> "Node":
        return Node(NodeKind.LINE_BREAK, tag="br")

    @staticmethod
    def marker(
        text: str,
        marker_id: str,
        class_name: str = constants.SUGGESTION_CLASS_NAME,
        style_hints: Dict[str, str] | None = None,
    ) -> "Node":
        return Node(
            NodeKind.MARKER,
            text=text,
            tag="span",
            marker_id=marker_id,
            class_name=class_name,
            style_hints=dict(style_hints) if style_hints is not None else {},
        )

    @staticmethod
    def text_node(text: str) -> "Node":
        return Node(NodeKind.TEXT, text=text)

    @property
    def is_container(self: "Node") -> bool:
        return self.kind in (NodeKind.BLOCK, NodeKind.INLINE)

    def iter_markers(
        self: "Node", path: Tuple[int, ...] = ()
    ) -> Iterator[Tuple[Tuple[int, ...], "Node"]]:
        """
        Yields every marker node below this node in document order along with
        the path leading to it

        Args:
            path (Tuple[int, ...]): The path of this node relative to the root

        Returns:
            Iterator[Tuple[Tuple[int, ...], Node]]: (path, marker node) pairs

        Raises:
            Nothing
        """

        for index, child in enumerate(self.children):
            if child.kind == NodeKind.MARKER:
                yield (*path, index), child
            elif child.is_container:
                yield from child.iter_markers((*path, index))

    def node_at(self: "Node", path: Tuple[int, ...]) -> "Node":
        """
        Returns the node found by following the provided child indexes from
        this node

        Args:
            path (Tuple[int, ...]): The child indexes to follow

        Returns:
            Node: The node at the end of the path

        Raises:
            UnresolvableCaretException: If the path leaves the tree
        """

        current: Node = self
        for index in path:
            if not 0 <= index < len(current.children):
                raise UnresolvableCaretException(
                    f"Path {path} does not exist in the surface"
                )

            current = current.children[index]

        return current

    def text_content(self: "Node", include_markers: bool = False) -> str:
        """
        Returns the plain text of this node with line breaks and block boundaries
        represented as newlines and inline formatting flattened

        Args:
            include_markers (bool): Whether the text of suggestion markers should
                be included

        Returns:
            str: The plain text of this node

        Raises:
            Nothing
        """

        match self.kind:
            case NodeKind.TEXT:
                return self.text
            case NodeKind.LINE_BREAK:
                return "\n"
            case NodeKind.MARKER:
                return self.text if include_markers else ""

        return "".join(
            ("\n" if index > 0 and child.kind == NodeKind.BLOCK else "")
            + child.text_content(include_markers)
            for index, child in enumerate(self.children)
        )

    def inner_markup(self: "Node", include_markers: bool = True) -> str:
        return "".join(child.to_markup(include_markers) for child in self.children)

    def to_markup(self: "Node", include_markers: bool = True) -> str:
        match self.kind:
            case NodeKind.TEXT:
                return html.escape(self.text, quote=False)
            case NodeKind.LINE_BREAK:
                return "<br>"
            case NodeKind.MARKER:
                if not include_markers:
                    return ""

                style: str = "; ".join(
                    f"{name}: {value}" for name, value in self.style_hints.items()
                )
                return (
                    f'<span class="{html.escape(self.class_name)}" '
                    f'{constants.SUGGESTION_ID_ATTRIBUTE}="{html.escape(self.marker_id or "")}"'
                    + (f' style="{html.escape(style)}"' if style else "")
                    + f">{html.escape(self.text, quote=False)}</span>"
                )

        return f"<{self.tag}>{self.inner_markup(include_markers)}</{self.tag}>"
