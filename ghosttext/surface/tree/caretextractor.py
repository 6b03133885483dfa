"""
module ghosttext.surface.tree.caretextractor

Contains the caret resolution functions used by tree surfaces: extracting the text
that precedes the caret and deciding whether the caret sits at the end of its line.
Both operate on an explicit walk over child indexes rather than on a live surface
"""

from typing import Iterable, Iterator, List

from ... import constants
from .dataclasses import CaretPosition, Node, Selection
from .enums import NodeKind
from ..exceptions import UnresolvableCaretException


def resolve_caret(root: Node, selection: Selection | None) -> CaretPosition:
    """
    Resolves a selection to the single caret position it represents

    Args:
        root (Node): The root node of the surface
        selection (Selection | None): The current selection of the surface

    Returns:
        CaretPosition: The caret position of the collapsed selection

    Raises:
        UnresolvableCaretException: If there is no selection, the selection is a
            range or the caret does not point at a valid position in the tree
    """

    if selection is None:
        raise UnresolvableCaretException("There is no selection in the surface")

    caret: CaretPosition | None = selection.caret
    if caret is None:
        raise UnresolvableCaretException("The selection is a range, not a caret")

    container: Node = root.node_at(caret.path)
    limit: int
    match container.kind:
        case NodeKind.TEXT:
            limit = len(container.text)
        case NodeKind.BLOCK | NodeKind.INLINE:
            limit = len(container.children)
        case _:
            raise UnresolvableCaretException(
                f"A caret cannot be placed inside a {container.kind} node"
            )

    if not 0 <= caret.offset <= limit:
        raise UnresolvableCaretException(
            f"Offset {caret.offset} is outside of the node at {caret.path}"
        )

    return caret


def _render_siblings(siblings: Iterable[Node]) -> Iterator[str]:
    for index, sibling in enumerate(siblings):
        if index > 0 and sibling.kind == NodeKind.BLOCK:
            yield "\n"

        yield sibling.text_content()


def extract_preceding_text(root: Node, selection: Selection | None) -> str | None:
    """
    Returns the text of the surface from its start up to (not including) the caret.
    Line breaks and block boundaries are represented as a single newline, inline
    formatting is flattened, suggestion markers are skipped and non-breaking spaces
    are normalized to regular spaces

    Args:
        root (Node): The root node of the surface
        selection (Selection | None): The current selection of the surface

    Returns:
        str | None: The text preceding the caret or None if the caret could
            not be resolved

    Raises:
        Nothing
    """

    caret: CaretPosition
    try:
        caret = resolve_caret(root, selection)
    except UnresolvableCaretException:
        return None

    parts: List[str] = []
    current: Node = root
    for index in caret.path:
        # everything before the branch that leads to the caret is rendered whole
        parts.extend(_render_siblings(current.children[:index]))

        current = current.children[index]
        if index > 0 and current.kind == NodeKind.BLOCK:
            parts.append("\n")

    if current.kind == NodeKind.TEXT:
        parts.append(current.text[: caret.offset])
    else:
        parts.extend(_render_siblings(current.children[: caret.offset]))

    return "".join(parts).replace(constants.NBSP, " ")


def _scan_same_line(siblings: Iterable[Node]) -> bool | None:
    # True if content follows on the same line, False if the line ends before any
    # content does and None if the siblings ran out without deciding either way
    for sibling in siblings:
        if sibling.kind == NodeKind.BLOCK:
            return False

        same_line, newline, _ = sibling.text_content().partition("\n")
        if same_line != "":
            return True
        if newline:
            return False

    return None


def is_caret_at_line_end(root: Node, selection: Selection | None) -> bool:
    """
    Checks if the caret sits at the trailing edge of its line. This is a heuristic:
    ambiguous positions (a caret outside of a text node, formatting toggled at the
    end of a line) are treated as the end of the line

    Args:
        root (Node): The root node of the surface
        selection (Selection | None): The current selection of the surface

    Returns:
        bool: Whether the caret is at the end of its line. False if the caret
            could not be resolved

    Raises:
        Nothing
    """

    caret: CaretPosition
    try:
        caret = resolve_caret(root, selection)
    except UnresolvableCaretException:
        return False

    container: Node = root.node_at(caret.path)

    # a caret between nodes is usually at the start of a freshly created line
    if container.kind != NodeKind.TEXT:
        return True

    if len(container.text) > caret.offset:
        return False

    # walk outward until the nearest block, checking what follows at each level
    for depth in range(len(caret.path), 0, -1):
        parent: Node = root.node_at(caret.path[: depth - 1])
        following: List[Node] = parent.children[caret.path[depth - 1] + 1 :]

        match _scan_same_line(following):
            case True:
                return False
            case False:
                return True

        if parent.kind == NodeKind.BLOCK:
            break

    return True
