"""
module ghosttext.surface.tree.enums

Contains the definitions of all enum classes used by the editable-content tree
"""

from .nodekind import NodeKind
