from dataclasses import dataclass

from ..enums import FetchStatus


@dataclass(frozen=True)
class FetchOutcome:
    status: FetchStatus
    leading_text: str
    text: str | None = None
    latency_ms: float = 0.0

    @property
    def usable(self: "FetchOutcome") -> bool:
        return self.status in (FetchStatus.CACHE_HIT, FetchStatus.FETCHED)
