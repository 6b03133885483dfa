"""
module ghosttext.engine

Contains the suggestion lifecycle engine: the suggestion cache, the fetch
coordinator, the debounce timer and the state machine that ties them to a surface
"""

from .abstract import SuggestionObserver
from .callbackobserver import CallbackObserver
from .cancellationtoken import CancellationToken
from .dataclasses import (
    FetchOutcome,
    Suggestion,
    SuggestionAcceptedInfo,
    SuggestionInfo,
    SuggestionRejectedInfo,
)
from .debouncetimer import DebounceTimer
from .enums import EngineState, FetchStatus, RemovalReason
from .fetchcoordinator import FetchCoordinator, SuggestionProvider
from .suggestioncache import SuggestionCache
from .suggestionengine import SuggestionEngine
