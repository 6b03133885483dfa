"""
module ghosttext.surface.tree.dataclasses

Contains all dataclass definitions that make up the editable-content tree and
the positions of a caret within it
"""

from .caretposition import CaretPosition
from .node import Node
from .selection import Selection
