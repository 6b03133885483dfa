"""
module ghosttext.engine.callbackobserver

Contains the definition of the CallbackObserver class, a SuggestionObserver that
forwards notifications to optional callables
"""

from typing import Callable

from .abstract import SuggestionObserver
from .dataclasses import SuggestionAcceptedInfo, SuggestionInfo, SuggestionRejectedInfo


class CallbackObserver(SuggestionObserver):
    """
    class CallbackObserver

    A SuggestionObserver that forwards notifications to optional callables.
    Notifications without a callable are ignored
    """

    __on_content_change: Callable[[str], None] | None
    __on_suggestion_accepted: Callable[[SuggestionAcceptedInfo], None] | None
    __on_suggestion_rejected: Callable[[SuggestionRejectedInfo], None] | None
    __on_suggestion_shown: Callable[[SuggestionInfo], None] | None

    def __init__(
        self: "CallbackObserver",
        on_suggestion_shown: Callable[[SuggestionInfo], None] | None = None,
        on_suggestion_accepted: Callable[[SuggestionAcceptedInfo], None] | None = None,
        on_suggestion_rejected: Callable[[SuggestionRejectedInfo], None] | None = None,
        on_content_change: Callable[[str], None] | None = None,
    ) -> None:
        self.__on_content_change = on_content_change
        self.__on_suggestion_accepted = on_suggestion_accepted
        self.__on_suggestion_rejected = on_suggestion_rejected
        self.__on_suggestion_shown = on_suggestion_shown

    def on_content_change(self: "CallbackObserver", content: str) -> None:
        if self.__on_content_change is not None:
            self.__on_content_change(content)

    def on_suggestion_accepted(
        self: "CallbackObserver", info: SuggestionAcceptedInfo
    ) -> None:
        if self.__on_suggestion_accepted is not None:
            self.__on_suggestion_accepted(info)

    def on_suggestion_rejected(
        self: "CallbackObserver", info: SuggestionRejectedInfo
    ) -> None:
        if self.__on_suggestion_rejected is not None:
            self.__on_suggestion_rejected(info)

    def on_suggestion_shown(self: "CallbackObserver", info: SuggestionInfo) -> None:
        if self.__on_suggestion_shown is not None:
            self.__on_suggestion_shown(info)
