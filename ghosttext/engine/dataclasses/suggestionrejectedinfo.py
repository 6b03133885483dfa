from dataclasses import dataclass

from ..enums import RemovalReason


@dataclass(frozen=True)
class SuggestionRejectedInfo:
    suggestion_id: str
    time_rejected: float
    reason: RemovalReason
