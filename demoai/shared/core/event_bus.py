from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from typing import Any, Awaitable, Callable, Dict, List, TypeAlias

EventPayload: TypeAlias = Dict[str, Any]
EventHandler: TypeAlias = Callable[[EventPayload], Awaitable[None]]

logger = logging.getLogger(__name__)


class EventBus:
    """PubSub hub carrying outcome events from the core to the view layer.

    Every handler of a topic runs as its own task, so a slow notification
    sink never holds up the action that published the event. Subscriptions
    are only touched from the event loop thread.
    """

    def __init__(self) -> None:
        self._subscribers: Dict[str, List[EventHandler]] = defaultdict(list)
        self._in_flight: set[asyncio.Task] = set()

    async def subscribe(self, topic: str, handler: EventHandler) -> None:
        """Register an async handler for a topic. Registering twice is a no-op."""
        handlers = self._subscribers[topic]
        if handler not in handlers:
            handlers.append(handler)

    async def unsubscribe(self, topic: str, handler: EventHandler) -> None:
        handlers = self._subscribers.get(topic)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def subscriber_count(self, topic: str) -> int:
        return len(self._subscribers.get(topic, ()))

    @property
    def in_flight(self) -> int:
        """Number of handler tasks that have not finished yet."""
        return len(self._in_flight)

    async def publish(self, topic: str, payload: EventPayload) -> int:
        """Schedule every handler of ``topic`` and return how many were scheduled."""
        handlers = tuple(self._subscribers.get(topic, ()))
        if not handlers:
            logger.debug(f"Dropped '{topic}': nobody is listening")
            return 0

        logger.debug(f"'{topic}' -> {len(handlers)} handler(s)")
        for handler in handlers:
            task = asyncio.create_task(self._deliver(topic, handler, payload))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)
        return len(handlers)

    async def wait_until_idle(self, timeout: float = 10.0) -> bool:
        """Wait until no handler is running, including ones published by handlers.

        Returns False if handlers are still running after ``timeout`` seconds.
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while self._in_flight:
            remaining = deadline - loop.time()
            if remaining <= 0:
                logger.warning(f"Gave up waiting on {len(self._in_flight)} event handler(s)")
                return False
            await asyncio.wait(set(self._in_flight), timeout=remaining)
        return True

    async def _deliver(self, topic: str, handler: EventHandler, payload: EventPayload) -> None:
        try:
            await handler(payload)
        except Exception:
            name = getattr(handler, "__qualname__", repr(handler))
            logger.exception(f"Handler {name} failed on '{topic}'")

    def clear(self) -> None:
        """Remove all subscriptions."""
        self._subscribers.clear()
