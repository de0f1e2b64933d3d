"""
Fire-and-forget delivery of mention-prefixed replies.

Sends are scheduled as background tasks on the running loop. The caller never
waits for delivery; failures are only logged. :meth:`ResponseEmitter.drain`
awaits whatever is still in flight (shutdown, tests).
"""

from __future__ import annotations

import asyncio
import logging
from typing import Set

from .model import IncomingMessage, OutgoingResponse

logger = logging.getLogger(__name__)


class ResponseEmitter:
    def __init__(self) -> None:
        self._pending: Set[asyncio.Task] = set()

    def emit(self, message: IncomingMessage, body: str) -> OutgoingResponse:
        """Queue ``body`` for the message's channel, prefixed with the author mention."""

        response = OutgoingResponse(
            channel=message.channel, content=f"{message.author.mention} {body}"
        )
        task = asyncio.get_running_loop().create_task(
            response.channel.send(response.content)
        )
        self._pending.add(task)
        task.add_done_callback(self._on_sent)
        return response

    def _on_sent(self, task: asyncio.Task) -> None:
        self._pending.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Failed to deliver response: %s", exc, exc_info=exc)

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every queued send to finish."""
        if self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)


__all__ = ["ResponseEmitter"]
