"""Cancellation handle for in-flight catalog requests."""

from __future__ import annotations

import asyncio
import contextlib
from typing import Awaitable, TypeVar

T = TypeVar("T")


class RequestCancelled(Exception):
    """Raised internally when a token fires before its request finishes."""


class CancellationToken:
    """One-shot signal that a pending request has been superseded.

    Cancelling is idempotent. Callers create a fresh token per request and
    cancel the previous one before issuing the next.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    async def wait(self) -> None:
        await self._event.wait()

    async def run(self, awaitable: Awaitable[T]) -> T:
        """Await *awaitable* unless the token fires first.

        Raises RequestCancelled if the token is (or becomes) cancelled,
        even when the request has already completed, so a superseded
        response is never handed back.
        """
        request = asyncio.ensure_future(awaitable)
        if self.cancelled:
            request.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await request
            raise RequestCancelled()

        waiter = asyncio.ensure_future(self.wait())
        try:
            await asyncio.wait({request, waiter}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            waiter.cancel()
            if not request.done():
                request.cancel()

        if self.cancelled:
            request.cancel()
            with contextlib.suppress(asyncio.CancelledError, Exception):
                await request
            raise RequestCancelled()
        return request.result()
