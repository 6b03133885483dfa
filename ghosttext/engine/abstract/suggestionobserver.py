"""
module ghosttext.engine.abstract.suggestionobserver

Contains the definition of the SuggestionObserver class, a base class that is
extended by anything that wants to be notified of suggestion lifecycle events
"""

from ..dataclasses import SuggestionAcceptedInfo, SuggestionInfo, SuggestionRejectedInfo


class SuggestionObserver:
    """
    class SuggestionObserver

    A base class that is extended by anything that wants to be notified of
    suggestion lifecycle events. Every notification is delivered synchronously
    from within the transition that caused it and defaults to doing nothing.
    Observers must not drive the engine from inside a notification
    """

    def on_content_change(self: "SuggestionObserver", content: str) -> None:
        """
        Called whenever the committed content of the surface changes

        Args:
            content (str): The committed content, excluding any suggestion marker

        Returns:
            Nothing

        Raises:
            Nothing
        """

    def on_suggestion_accepted(
        self: "SuggestionObserver", info: SuggestionAcceptedInfo
    ) -> None:
        """
        Called after a suggestion has been committed into the surface

        Args:
            info (SuggestionAcceptedInfo): The id of the accepted suggestion and
                when it was accepted

        Returns:
            Nothing

        Raises:
            Nothing
        """

    def on_suggestion_rejected(
        self: "SuggestionObserver", info: SuggestionRejectedInfo
    ) -> None:
        """
        Called after a suggestion has been removed implicitly or explicitly.
        Removals made internally by the engine are never reported

        Args:
            info (SuggestionRejectedInfo): The id of the rejected suggestion,
                when it was rejected and why

        Returns:
            Nothing

        Raises:
            Nothing
        """

    def on_suggestion_shown(self: "SuggestionObserver", info: SuggestionInfo) -> None:
        """
        Called after a suggestion has been materialized in the surface

        Args:
            info (SuggestionInfo): Details of the displayed suggestion

        Returns:
            Nothing

        Raises:
            Nothing
        """
