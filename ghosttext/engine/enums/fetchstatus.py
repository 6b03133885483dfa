from enum import auto, Enum


class FetchStatus(Enum):
    CACHE_HIT = auto()
    FETCHED = auto()
    EMPTY = auto()
    FAILED = auto()
    CANCELLED = auto()
    STALE = auto()
