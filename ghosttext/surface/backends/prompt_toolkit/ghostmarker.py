from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class GhostMarker:
    id: str
    text: str
    cursor_position: int
    style_hints: Dict[str, str] = field(default_factory=dict)
