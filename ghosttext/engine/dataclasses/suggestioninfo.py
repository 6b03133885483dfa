"""
module ghosttext.engine.dataclasses.suggestioninfo

Contains the definition of the SuggestionInfo dataclass, the information handed
to observers whenever a suggestion has been shown
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class SuggestionInfo:
    """
    class SuggestionInfo

    The information handed to observers whenever a suggestion has been shown.
    Mostly useful for logging. get_full_content() returns a snapshot of the
    surface that includes the suggestion marker itself
    """

    id: str
    time_shown: float
    latency_ms: float
    suggestion_text: str
    leading_text: str
    get_full_content: Callable[[], str]
