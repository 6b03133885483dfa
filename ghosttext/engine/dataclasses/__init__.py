"""
module ghosttext.engine.dataclasses

Contains all dataclass definitions used by the suggestion engine, including the
information objects handed to observers
"""

from .fetchoutcome import FetchOutcome
from .pendingfetch import PendingFetch
from .suggestion import Suggestion
from .suggestionacceptedinfo import SuggestionAcceptedInfo
from .suggestioninfo import SuggestionInfo
from .suggestionrejectedinfo import SuggestionRejectedInfo
