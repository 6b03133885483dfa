from dataclasses import dataclass


@dataclass(frozen=True)
class SuggestionAcceptedInfo:
    suggestion_id: str
    time_accepted: float
