"""
Fire-and-forget mail dispatch.

A use case schedules delivery after its state change is committed and
returns without waiting. Delivery failures are logged, never returned.
"""

import asyncio
import logging
from typing import Awaitable, Set

logger = logging.getLogger(__name__)


class MailDispatcher:
    def __init__(self):
        self._pending: Set[asyncio.Task] = set()

    def dispatch(self, delivery: Awaitable[None], description: str) -> asyncio.Task:
        """Schedule a delivery coroutine on the running loop"""
        task = asyncio.ensure_future(self._deliver(delivery, description))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _deliver(self, delivery: Awaitable[None], description: str) -> None:
        try:
            await delivery
        except Exception:
            logger.exception(f"Mail delivery failed: {description}")

    async def drain(self) -> None:
        """Wait for every scheduled delivery to finish"""
        while self._pending:
            await asyncio.gather(*list(self._pending))
