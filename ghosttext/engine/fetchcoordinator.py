"""
module ghosttext.engine.fetchcoordinator

Contains the definition of the FetchCoordinator class, which serves suggestions from
the cache or from an external suggestion provider and discards results that have
gone stale while they were being fetched
"""

import inspect
import logging
import time
from typing import Awaitable, Callable

from .cancellationtoken import CancellationToken
from .dataclasses import FetchOutcome, PendingFetch
from .enums import FetchStatus
from .suggestioncache import SuggestionCache

logger = logging.getLogger(__name__)

SuggestionProvider = Callable[
    [str, CancellationToken], str | None | Awaitable[str | None]
]


class FetchCoordinator:
    """
    class FetchCoordinator

    Serves suggestions from the cache or from an external suggestion provider.
    At most one provider call is pending at a time; starting another one
    cancels the previous one
    """

    cache: SuggestionCache
    __pending: PendingFetch | None

    def __init__(self: "FetchCoordinator", cache: SuggestionCache) -> None:
        self.cache = cache
        self.__pending = None

    def cancel_pending(self: "FetchCoordinator") -> None:
        """
        Signals cancellation to the pending provider call (if any). Its result
        will be discarded whenever it arrives

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        if self.__pending is not None:
            logger.debug("Cancelling fetch for %r", self.__pending.leading_text)
            self.__pending.token.cancel()
            self.__pending = None

    @property
    def pending(self: "FetchCoordinator") -> PendingFetch | None:
        return self.__pending

    async def request_suggestion(
        self: "FetchCoordinator",
        leading_text: str,
        get_suggestion: SuggestionProvider,
        current_leading_text: Callable[[], str | None],
    ) -> FetchOutcome:
        """
        Returns a suggestion for the provided leading text. A cache hit returns
        immediately. On a miss, the provider is called exactly once and a non-empty
        result is cached before it is checked for staleness against the text that
        precedes the caret once the call completes

        Args:
            leading_text (str): The text preceding the caret the request is for
            get_suggestion (SuggestionProvider): The external provider to call on
                a cache miss. May be a regular function or a coroutine function
            current_leading_text (Callable[[], str | None]): Returns the text that
                currently precedes the caret

        Returns:
            FetchOutcome: The outcome of the request. Only CACHE_HIT and FETCHED
                outcomes carry a suggestion that may be displayed

        Raises:
            Nothing
        """

        cached_text: str | None = self.cache.get(leading_text)
        if cached_text is not None:
            logger.debug("Cache hit for %r", leading_text)
            return FetchOutcome(FetchStatus.CACHE_HIT, leading_text, cached_text, 0.0)

        self.cancel_pending()
        pending: PendingFetch = PendingFetch(leading_text)
        self.__pending = pending

        suggestion_text: str | None
        # pylint: disable=broad-exception-caught
        try:
            result = get_suggestion(leading_text, pending.token)
            suggestion_text = await result if inspect.isawaitable(result) else result
        except Exception:
            logger.debug(
                "Suggestion provider failed for %r", leading_text, exc_info=True
            )
            return FetchOutcome(FetchStatus.FAILED, leading_text)
        finally:
            if self.__pending is pending:
                self.__pending = None

        latency_ms: float = (time.perf_counter() - pending.started_at) * 1000

        if not suggestion_text:
            return FetchOutcome(FetchStatus.EMPTY, leading_text, None, latency_ms)

        self.cache.set(leading_text, suggestion_text)

        if pending.token.cancelled:
            return FetchOutcome(
                FetchStatus.CANCELLED, leading_text, suggestion_text, latency_ms
            )

        # the caret may have moved while the provider was working
        if current_leading_text() != leading_text:
            return FetchOutcome(
                FetchStatus.STALE, leading_text, suggestion_text, latency_ms
            )

        return FetchOutcome(FetchStatus.FETCHED, leading_text, suggestion_text, latency_ms)
