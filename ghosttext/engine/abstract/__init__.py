"""
module ghosttext.engine.abstract

Contains the definition of the SuggestionObserver base class that is extended
by anything that wants to be notified of suggestion lifecycle events
"""

from .suggestionobserver import SuggestionObserver
