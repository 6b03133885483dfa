"""
module ghosttext.surface.tree.dataclasses.caretposition

Contains the definition of the CaretPosition dataclass, a single point inside an
editable-content tree
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class CaretPosition:
    """
    class CaretPosition

    A single point inside an editable-content tree. The path is the series of
    child indexes leading from the root to the container node. When the container
    is a text node, the offset is a character offset into its text. Otherwise, the
    offset is a child index and the caret sits just before that child.
    """

    path: Tuple[int, ...]
    offset: int

    @property
    def parent_path(self: "CaretPosition") -> Tuple[int, ...]:
        return self.path[:-1]
