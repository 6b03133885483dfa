"""
module ghosttext.engine.cancellationtoken

Contains the definition of the CancellationToken class, the cooperative
cancellation signal handed to suggestion providers
"""

import asyncio


class CancellationToken:
    """
    class CancellationToken

    The cooperative cancellation signal handed to suggestion providers. Providers
    may poll cancelled or await wait() to stop early, but are not required to;
    results that arrive after cancellation are discarded either way
    """

    __event: asyncio.Event

    def __init__(self: "CancellationToken") -> None:
        self.__event = asyncio.Event()

    def cancel(self: "CancellationToken") -> None:
        self.__event.set()

    @property
    def cancelled(self: "CancellationToken") -> bool:
        return self.__event.is_set()

    async def wait(self: "CancellationToken") -> None:
        await self.__event.wait()
