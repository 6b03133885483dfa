from enum import StrEnum


class NodeKind(StrEnum):
    BLOCK = "block"
    INLINE = "inline"
    LINE_BREAK = "line_break"
    MARKER = "marker"
    TEXT = "text"
