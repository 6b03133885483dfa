from dataclasses import dataclass, field
import time

from ..cancellationtoken import CancellationToken


@dataclass(frozen=True)
class PendingFetch:
    leading_text: str
    token: CancellationToken = field(default_factory=CancellationToken)
    started_at: float = field(default_factory=time.perf_counter)
