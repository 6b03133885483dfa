"""
module ghosttext.surface.tree.treesurface

Contains the definition of the TreeSurface class, an in-memory surface backend that
keeps its content as an abstract editable-content tree along with a selection
"""

from typing import Dict, List, Sequence, Tuple

from ... import constants
from ..abstract import SurfaceBackend
from .caretextractor import extract_preceding_text, is_caret_at_line_end, resolve_caret
from .dataclasses import CaretPosition, Node, Selection
from .enums import NodeKind
from ..exceptions import UnresolvableCaretException


class TreeSurface(SurfaceBackend):
    """
    class TreeSurface

    An in-memory surface backend that keeps its content as an abstract
    editable-content tree. Suggestion markers are inserted into the tree as
    marker nodes and the caret is kept in front of them
    """

    root: Node
    selection: Selection | None
    class_name: str

    def __init__(
        self: "TreeSurface",
        root: Node | None = None,
        caret: CaretPosition | None = None,
        class_name: str = constants.SUGGESTION_CLASS_NAME,
    ) -> None:
        self.root = root if root is not None else Node.block()
        self.selection = Selection.at(caret) if caret is not None else None
        self.class_name = class_name

    @staticmethod
    def from_text(text: str) -> "TreeSurface":
        """
        Constructs a TreeSurface with one block per line of the provided text and
        the caret placed at the end of the last line

        Args:
            text (str): The text to populate the surface with

        Returns:
            TreeSurface: The populated surface

        Raises:
            Nothing
        """

        surface: TreeSurface = TreeSurface(
            Node.block(
                *(
                    Node.block(Node.text_node(line)) if len(line) > 0 else Node.block()
                    for line in text.split("\n")
                )
            )
        )
        surface.move_caret_to_end()

        return surface

    def _caret(self: "TreeSurface") -> CaretPosition | None:
        try:
            return resolve_caret(self.root, self.selection)
        except UnresolvableCaretException:
            return None

    def clear_selection(self: "TreeSurface") -> None:
        self.selection = None

    def committed_content(self: "TreeSurface") -> str:
        return self.root.inner_markup(include_markers=False)

    def extract_preceding_text(self: "TreeSurface") -> str | None:
        return extract_preceding_text(self.root, self.selection)

    def full_content(self: "TreeSurface") -> str:
        return self.root.inner_markup(include_markers=True)

    def insert_plain_text(self: "TreeSurface", text: str) -> bool:
        caret: CaretPosition | None = self._caret()
        if caret is None:
            return False

        if len(text) == 0:
            return True

        # typing inside a text node only extends that node
        container: Node = self.root.node_at(caret.path)
        if container.kind == NodeKind.TEXT and "\n" not in text:
            container.text = (
                container.text[: caret.offset] + text + container.text[caret.offset :]
            )
            self.set_caret(caret.path, caret.offset + len(text))
            return True

        nodes: List[Node] = self._nodes_for_text(text)
        parent_path, index = self._split_at_caret(caret)
        self.root.node_at(parent_path).children[index:index] = nodes

        # leave the caret after the inserted text
        last_node: Node = nodes[-1]
        if last_node.kind == NodeKind.TEXT:
            self.set_caret((*parent_path, index + len(nodes) - 1), len(last_node.text))
        else:
            self.set_caret(parent_path, index + len(nodes))

        return True

    def insert_suggestion_marker(
        self: "TreeSurface",
        text: str,
        suggestion_id: str,
        style_hints: Dict[str, str],
    ) -> bool:
        caret: CaretPosition | None = self._caret()
        if caret is None:
            return False

        parent_path, index = self._split_at_caret(caret)
        self.root.node_at(parent_path).children.insert(
            index,
            Node.marker(
                text,
                suggestion_id,
                class_name=self.class_name,
                style_hints=style_hints,
            ),
        )

        # a caret at the very start of a text node now sits in front of the marker
        # instead. in every other case the caret is already in front of it
        if caret.path != parent_path and caret.offset == 0:
            self.set_caret(parent_path, index)

        return True

    def is_caret_at_line_end(self: "TreeSurface") -> bool:
        return is_caret_at_line_end(self.root, self.selection)

    def is_caret_collapsed(self: "TreeSurface") -> bool:
        return self.selection is not None and self.selection.collapsed

    def marker_ids(self: "TreeSurface") -> List[str]:
        return [
            marker.marker_id
            for _, marker in self.root.iter_markers()
            if marker.marker_id is not None
        ]

    def marker_text(self: "TreeSurface", suggestion_id: str) -> str | None:
        for _, marker in self.root.iter_markers():
            if marker.marker_id == suggestion_id:
                return marker.text

        return None

    def move_caret_to_end(self: "TreeSurface") -> None:
        """
        Places the caret at the very end of the surface, inside the last text node
        if the surface ends with one

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        path: Tuple[int, ...] = ()
        current: Node = self.root
        while current.is_container and len(current.children) > 0:
            last_index: int = len(current.children) - 1
            if not (
                current.children[last_index].is_container
                or current.children[last_index].kind == NodeKind.TEXT
            ):
                break

            path = (*path, last_index)
            current = current.children[last_index]

        self.set_caret(
            path,
            len(current.text) if current.kind == NodeKind.TEXT else len(current.children),
        )

    @staticmethod
    def _nodes_for_text(text: str) -> List[Node]:
        nodes: List[Node] = []
        for index, segment in enumerate(text.split("\n")):
            if index > 0:
                nodes.append(Node.line_break())
            if len(segment) > 0:
                nodes.append(Node.text_node(segment))

        return nodes

    def remove_marker(self: "TreeSurface", suggestion_id: str) -> None:
        # remove from the back so that the remaining paths stay valid
        for path, marker in reversed(list(self.root.iter_markers())):
            if marker.marker_id == suggestion_id:
                self._remove_node(path)

    def _remove_node(self: "TreeSurface", path: Tuple[int, ...]) -> None:
        parent_path: Tuple[int, ...] = path[:-1]
        index: int = path[-1]
        del self.root.node_at(parent_path).children[index]

        if self.selection is not None:
            self.selection = Selection(
                anchor=self._shift_after_removal(self.selection.anchor, parent_path, index),
                focus=self._shift_after_removal(self.selection.focus, parent_path, index),
            )

    def select(
        self: "TreeSurface", anchor: CaretPosition, focus: CaretPosition
    ) -> None:
        self.selection = Selection(anchor=anchor, focus=focus)

    def set_caret(self: "TreeSurface", path: Sequence[int], offset: int) -> None:
        self.selection = Selection.at(CaretPosition(tuple(path), offset))

    @staticmethod
    def _shift_after_removal(
        position: CaretPosition, parent_path: Tuple[int, ...], index: int
    ) -> CaretPosition:
        depth: int = len(parent_path)
        if position.path[:depth] != parent_path:
            return position

        # the removed node was a direct child of the caret's container
        if len(position.path) == depth:
            return (
                CaretPosition(position.path, position.offset - 1)
                if position.offset > index
                else position
            )

        branch: int = position.path[depth]
        if branch == index:
            return CaretPosition(parent_path, index)
        if branch > index:
            return CaretPosition(
                (*parent_path, branch - 1, *position.path[depth + 1 :]), position.offset
            )

        return position

    def _split_at_caret(
        self: "TreeSurface", caret: CaretPosition
    ) -> Tuple[Tuple[int, ...], int]:
        # returns the container path and child index equivalent to the caret,
        # splitting the text node the caret is in if needed
        container: Node = self.root.node_at(caret.path)
        if container.kind != NodeKind.TEXT:
            return caret.path, caret.offset

        parent_path: Tuple[int, ...] = caret.parent_path
        index: int = caret.path[-1]
        if caret.offset == 0:
            return parent_path, index
        if caret.offset >= len(container.text):
            return parent_path, index + 1

        self.root.node_at(parent_path).children.insert(
            index + 1, Node.text_node(container.text[caret.offset :])
        )
        container.text = container.text[: caret.offset]

        return parent_path, index + 1

    @property
    def text(self: "TreeSurface") -> str:
        return self.root.text_content()

    def type_text(self: "TreeSurface", text: str) -> bool:
        """
        Inserts text at the caret the way a user typing into the surface would

        Args:
            text (str): The text that was typed

        Returns:
            bool: Whether the text was inserted

        Raises:
            Nothing
        """

        return self.insert_plain_text(text)
