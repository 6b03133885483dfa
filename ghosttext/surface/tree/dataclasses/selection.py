from dataclasses import dataclass

from .caretposition import CaretPosition


@dataclass(frozen=True)
class Selection:
    anchor: CaretPosition
    focus: CaretPosition

    @property
    def caret(self: "Selection") -> CaretPosition | None:
        return self.anchor if self.collapsed else None

    @property
    def collapsed(self: "Selection") -> bool:
        return self.anchor == self.focus

    @staticmethod
    def at(caret: CaretPosition) -> "Selection":
        return Selection(anchor=caret, focus=caret)
