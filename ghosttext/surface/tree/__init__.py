"""
module ghosttext.surface.tree

Contains the abstract editable-content tree, the caret text extraction functions
that operate on it and the TreeSurface class, an in-memory surface backend built
on top of the tree
"""

from .caretextractor import extract_preceding_text, is_caret_at_line_end, resolve_caret
from .dataclasses import CaretPosition, Node, Selection
from .enums import NodeKind
from .treesurface import TreeSurface
