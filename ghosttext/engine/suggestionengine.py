"""
module ghosttext.engine.suggestionengine

Contains the definition of the SuggestionEngine class, the state machine that owns
the suggestion displayed in a surface. It decides from caret and content events
when a suggestion should be fetched and handles showing, accepting, rejecting and
partially accepting suggestions
"""

import asyncio
import logging
import time
from typing import Any, Callable, Dict, List
import uuid

from .. import constants
from ..config import GhostTextConfig, InvalidConfigException
from ..surface.abstract import SurfaceBackend
from .abstract import SuggestionObserver
from .dataclasses import (
    FetchOutcome,
    Suggestion,
    SuggestionAcceptedInfo,
    SuggestionInfo,
    SuggestionRejectedInfo,
)
from .debouncetimer import DebounceTimer
from .enums import EngineState, RemovalReason
from .fetchcoordinator import FetchCoordinator, SuggestionProvider
from .suggestioncache import SuggestionCache

logger = logging.getLogger(__name__)


class SuggestionEngine:
    """
    class SuggestionEngine

    The state machine that owns the suggestion displayed in a surface. One engine
    is attached to one surface and all of its state (the cache, the displayed
    suggestion, the debounce timer and the pending fetch) is mutated only from
    within its transitions. Events must be delivered from the thread running the
    asyncio event loop, in the order they happened
    """

    surface: SurfaceBackend
    __cache: SuggestionCache
    __coordinator: FetchCoordinator
    __debounce_ms: int
    __enabled: bool
    __fetch_task: "asyncio.Task[None] | None"
    __generation: int
    __get_suggestion: SuggestionProvider
    __observer: SuggestionObserver
    __state: EngineState
    __style_hints: Dict[str, str]
    __suggestion: Suggestion | None
    __timer: DebounceTimer

    def __init__(
        self: "SuggestionEngine",
        surface: SurfaceBackend,
        get_suggestion: SuggestionProvider,
        config: GhostTextConfig | None = None,
        observer: SuggestionObserver | None = None,
        style_hints: Dict[str, str] | None = None,
    ) -> None:
        if config is None:
            config = GhostTextConfig.make_default()
        config.validate()

        self.surface = surface
        self.__cache = SuggestionCache(config.cache_capacity)
        self.__coordinator = FetchCoordinator(self.__cache)
        self.__debounce_ms = config.debounce_ms
        self.__enabled = config.autocomplete_enabled
        self.__fetch_task = None
        self.__generation = 0
        self.__get_suggestion = get_suggestion
        self.__observer = observer if observer is not None else SuggestionObserver()
        self.__state = EngineState.IDLE
        self.__style_hints = (
            dict(style_hints)
            if style_hints is not None
            else dict(constants.SUGGESTION_STYLE_HINTS)
        )
        self.__suggestion = None
        self.__timer = DebounceTimer()

    def accept(self: "SuggestionEngine") -> bool:
        """
        Commits the displayed suggestion into the surface at the caret

        Args:
            None

        Returns:
            bool: Whether a suggestion was accepted. False if nothing was displayed
                or the surface refused the text

        Raises:
            Nothing
        """

        if not self.__enabled or self.__suggestion is None:
            return False

        suggestion: Suggestion = self.__suggestion
        self._supersede()
        self._remove_suggestion(RemovalReason.SYSTEM)

        if not self.surface.insert_plain_text(suggestion.text):
            logger.debug("Surface refused accepted text for %s", suggestion.id)
            self._set_state(EngineState.IDLE)
            return False

        self._notify(
            self.__observer.on_suggestion_accepted,
            SuggestionAcceptedInfo(suggestion_id=suggestion.id, time_accepted=time.time()),
        )
        self._notify_content_change()

        # the caret moved to the end of the accepted text
        self._arm()
        return True

    def _arm(self: "SuggestionEngine") -> None:
        if not self.surface.is_caret_collapsed() or not self.surface.is_caret_at_line_end():
            self._set_state(EngineState.IDLE)
            return

        try:
            self.__timer.schedule(self.__debounce_ms, self._on_debounce_elapsed)
        except RuntimeError:
            logger.debug("No running event loop, not scheduling a fetch", exc_info=True)
            self._set_state(EngineState.IDLE)
            return

        self._set_state(EngineState.DEBOUNCE_PENDING)

    @property
    def cache(self: "SuggestionEngine") -> SuggestionCache:
        return self.__cache

    def close(self: "SuggestionEngine") -> None:
        """
        Tears down the timer and any pending fetch and removes the displayed
        suggestion without reporting it as rejected

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        self._supersede()
        self._remove_suggestion(RemovalReason.SYSTEM)
        self._set_state(EngineState.IDLE)

    @property
    def debounce_ms(self: "SuggestionEngine") -> int:
        return self.__debounce_ms

    @property
    def enabled(self: "SuggestionEngine") -> bool:
        return self.__enabled

    async def _fetch_and_show(self: "SuggestionEngine", generation: int) -> None:
        try:
            # an event may have arrived between the timer firing and this task starting
            if generation != self.__generation:
                return

            leading_text: str | None = self.surface.extract_preceding_text()
            if leading_text is None:
                self._set_state(EngineState.IDLE)
                return

            self._remove_suggestion(RemovalReason.SYSTEM)
            if leading_text not in self.__cache:
                self._set_state(EngineState.FETCHING)

            outcome: FetchOutcome = await self.__coordinator.request_suggestion(
                leading_text,
                self.__get_suggestion,
                self.surface.extract_preceding_text,
            )

            # a newer event took over while the provider was working
            if generation != self.__generation:
                logger.debug("Discarding %s outcome for %r", outcome.status, leading_text)
                return

            if not outcome.usable or outcome.text is None:
                logger.debug("No suggestion for %r (%s)", leading_text, outcome.status)
                self._set_state(EngineState.IDLE)
                return

            self._show(outcome.text, leading_text, outcome.latency_ms)
        finally:
            if self.__fetch_task is asyncio.current_task():
                self.__fetch_task = None

    def handle_blur(self: "SuggestionEngine") -> None:
        self._remove_suggestion(RemovalReason.IMPLICIT)
        self._supersede()
        self._set_state(EngineState.IDLE)

    def handle_content_changed(
        self: "SuggestionEngine", inserted_text: str | None = None
    ) -> None:
        """
        Handles a change to the committed content of the surface. Typing the start
        of the displayed suggestion replaces it with the rest of the suggestion,
        any other change rejects it

        Args:
            inserted_text (str | None): The text that was just inserted, if known

        Returns:
            Nothing

        Raises:
            Nothing
        """

        if not self.__enabled:
            self._notify_content_change()
            return

        suggestion: Suggestion | None = self.__suggestion
        if (
            suggestion is not None
            and inserted_text
            and suggestion.text.startswith(inserted_text)
        ):
            self._partially_accept(suggestion, inserted_text)
            return

        self._remove_suggestion(RemovalReason.IMPLICIT)
        self._supersede()
        self._set_state(EngineState.IDLE)
        self._notify_content_change()

    def handle_selection_changed(self: "SuggestionEngine") -> None:
        """
        Handles a caret movement or selection change. Any displayed suggestion is
        rejected and, if the caret is collapsed at the end of its line, a new
        debounce cycle is started. Without a running asyncio event loop no
        debounce cycle can be started and the engine stays idle

        Args:
            None

        Returns:
            Nothing

        Raises:
            Nothing
        """

        if not self.__enabled:
            return

        # a caret that still sits right in front of the displayed suggestion has
        # not moved (i.e., the caret event that follows a partial acceptance)
        if (
            self.__suggestion is not None
            and self.surface.is_caret_collapsed()
            and self.surface.extract_preceding_text() == self.__suggestion.leading_text
        ):
            return

        self._remove_suggestion(RemovalReason.IMPLICIT)
        self._supersede()
        self._arm()

    def _notify(
        self: "SuggestionEngine", callback: Callable[[Any], None], payload: Any
    ) -> None:
        # pylint: disable=broad-exception-caught
        try:
            callback(payload)
        except Exception:
            logger.warning("Suggestion observer raised an exception", exc_info=True)

    def _notify_content_change(self: "SuggestionEngine") -> None:
        self._notify(self.__observer.on_content_change, self.surface.committed_content())

    def _on_debounce_elapsed(self: "SuggestionEngine") -> None:
        self.__fetch_task = asyncio.get_running_loop().create_task(
            self._fetch_and_show(self.__generation)
        )

    def _partially_accept(
        self: "SuggestionEngine", suggestion: Suggestion, typed_text: str
    ) -> None:
        # the typed text is already part of the committed content
        self._remove_suggestion(RemovalReason.SYSTEM)
        self._notify_content_change()

        remainder: str = suggestion.text[len(typed_text) :]
        if len(remainder) == 0:
            self._set_state(EngineState.IDLE)
            return

        leading_text: str | None = self.surface.extract_preceding_text()
        if leading_text is None:
            self._set_state(EngineState.IDLE)
            return

        self._show(remainder, leading_text, 0.0)

    @property
    def pending_fetch(self: "SuggestionEngine") -> "asyncio.Task[None] | None":
        return self.__fetch_task

    def reject(self: "SuggestionEngine") -> bool:
        """
        Removes the displayed suggestion as an explicit rejection

        Args:
            None

        Returns:
            bool: Whether a suggestion was displayed and rejected

        Raises:
            Nothing
        """

        if not self.__enabled:
            return False

        self._supersede()
        rejected: bool = self._remove_suggestion(RemovalReason.EXPLICIT)
        self._set_state(EngineState.IDLE)

        return rejected

    def _remove_suggestion(self: "SuggestionEngine", reason: RemovalReason) -> bool:
        suggestion: Suggestion | None = self.__suggestion
        marker_ids: List[str] = self.surface.marker_ids()
        if suggestion is None and len(marker_ids) == 0:
            return False

        if len(marker_ids) > 1:
            logger.warning(
                "Found %d suggestion markers, removing all of them", len(marker_ids)
            )

        # every marker in the surface is treated as one logical suggestion
        for marker_id in dict.fromkeys(
            marker_ids + ([suggestion.id] if suggestion is not None else [])
        ):
            self.surface.remove_marker(marker_id)

        self.__suggestion = None
        if self.__state == EngineState.DISPLAYED:
            self._set_state(EngineState.IDLE)

        if reason != RemovalReason.SYSTEM:
            self._notify(
                self.__observer.on_suggestion_rejected,
                SuggestionRejectedInfo(
                    suggestion_id=suggestion.id if suggestion is not None else marker_ids[0],
                    time_rejected=time.time(),
                    reason=reason,
                ),
            )

        return True

    def set_debounce_time(self: "SuggestionEngine", debounce_ms: int) -> None:
        if debounce_ms < 0:
            raise InvalidConfigException(
                f"Debounce time must not be negative (got {debounce_ms})"
            )

        self.__debounce_ms = debounce_ms

    def set_enabled(self: "SuggestionEngine", enabled: bool) -> None:
        """
        Enables or disables autocomplete. Disabling tears down the timer and any
        pending fetch and rejects the displayed suggestion. Enabling again does
        not bring anything back until the next caret event

        Args:
            enabled (bool): Whether autocomplete should be enabled

        Returns:
            Nothing

        Raises:
            Nothing
        """

        if enabled == self.__enabled:
            return

        if not enabled:
            self._supersede()
            self._remove_suggestion(RemovalReason.IMPLICIT)
            self._set_state(EngineState.IDLE)

        self.__enabled = enabled

    def _set_state(self: "SuggestionEngine", state: EngineState) -> None:
        if state != self.__state:
            logger.debug("%s -> %s", self.__state.name, state.name)
            self.__state = state

    def _show(
        self: "SuggestionEngine", text: str, leading_text: str, latency_ms: float
    ) -> bool:
        self._remove_suggestion(RemovalReason.SYSTEM)

        suggestion_id: str = f"{constants.SUGGESTION_ID_PREFIX}{uuid.uuid4()}"
        if not self.surface.insert_suggestion_marker(
            text, suggestion_id, self.__style_hints
        ):
            logger.debug("Surface refused suggestion marker %s", suggestion_id)
            self._set_state(EngineState.IDLE)
            return False

        self.__suggestion = Suggestion(
            id=suggestion_id,
            text=text,
            leading_text=leading_text,
            shown_at=time.time(),
            latency_ms=latency_ms,
        )
        self._set_state(EngineState.DISPLAYED)

        self._notify(
            self.__observer.on_suggestion_shown,
            SuggestionInfo(
                id=suggestion_id,
                time_shown=self.__suggestion.shown_at,
                latency_ms=latency_ms,
                suggestion_text=text,
                leading_text=leading_text,
                get_full_content=self.surface.full_content,
            ),
        )

        return True

    @property
    def state(self: "SuggestionEngine") -> EngineState:
        return self.__state

    @property
    def suggestion(self: "SuggestionEngine") -> Suggestion | None:
        return self.__suggestion

    def _supersede(self: "SuggestionEngine") -> None:
        # invalidates the debounce timer and anything that is still being fetched
        self.__timer.cancel()
        self.__coordinator.cancel_pending()
        self.__generation += 1
