"""
module ghosttext.engine.debouncetimer

Contains the definition of the DebounceTimer class, a single delayed callback
scheduled on the running asyncio event loop
"""

import asyncio
from typing import Callable


class DebounceTimer:
    """
    class DebounceTimer

    A single delayed callback scheduled on the running asyncio event loop.
    Scheduling always cancels the previously scheduled callback so that at most
    one timer is live at once
    """

    __handle: asyncio.TimerHandle | None

    def __init__(self: "DebounceTimer") -> None:
        self.__handle = None

    @property
    def armed(self: "DebounceTimer") -> bool:
        return self.__handle is not None and not self.__handle.cancelled()

    def cancel(self: "DebounceTimer") -> None:
        if self.__handle is not None:
            self.__handle.cancel()
            self.__handle = None

    def schedule(
        self: "DebounceTimer", delay_ms: float, callback: Callable[[], None]
    ) -> None:
        """
        Cancels any pending callback and schedules the provided one to run after
        the provided delay

        Args:
            delay_ms (float): The delay in milliseconds
            callback (Callable[[], None]): The callback to run once the delay elapses

        Returns:
            Nothing

        Raises:
            RuntimeError: If there is no running event loop
        """

        self.cancel()

        def fire() -> None:
            self.__handle = None
            callback()

        self.__handle = asyncio.get_running_loop().call_later(delay_ms / 1000, fire)
