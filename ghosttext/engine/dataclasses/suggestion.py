"""
module ghosttext.engine.dataclasses.suggestion

Contains the definition of the Suggestion dataclass, the ghost text that is
currently materialized in a surface
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Suggestion:
    """
    class Suggestion

    The ghost text that is currently materialized in a surface. The leading text
    is the exact preceding text the suggestion was fetched (or cached) for
    """

    id: str
    text: str
    leading_text: str
    shown_at: float
    latency_ms: float = 0.0
