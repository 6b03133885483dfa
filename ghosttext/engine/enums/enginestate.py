from enum import auto, Enum


class EngineState(Enum):
    IDLE = auto()
    DEBOUNCE_PENDING = auto()
    FETCHING = auto()
    DISPLAYED = auto()
