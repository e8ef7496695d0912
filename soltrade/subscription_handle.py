"""A handle that stops a running event subscription."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class SubscriptionHandle:
    """The task running a subscription and the function that unsubscribes it."""

    task: asyncio.Task
    unsub_fn: Callable[[], None]

    async def shutdown(self) -> None:
        """Unsubscribe, then cancel the task."""
        self.unsub_fn()
        self.task.cancel()