"""Notification sink: turns outcome events into toasts for the view layer."""

from __future__ import annotations

import time
from collections import deque
from typing import Callable, Deque, List, Optional

from pydantic import BaseModel, Field

from demoai.shared.core import events
from demoai.shared.core.event_bus import EventBus, EventPayload


class Notification(BaseModel):
    title: str
    description: str = ""
    level: events.NotificationLevel = "info"
    topic: Optional[str] = None
    ts: float = Field(default_factory=time.time)


class NotificationCenter:
    """Bounded buffer of notifications, newest last.

    When ``enabled`` returns False only warnings and errors are kept.
    """

    def __init__(
        self,
        event_bus: EventBus,
        max_items: int = 50,
        enabled: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.bus = event_bus
        self._items: Deque[Notification] = deque(maxlen=max_items)
        self._enabled = enabled or (lambda: True)
        self._started = False

    async def initialize(self) -> None:
        if self._started:
            return
        await self.bus.subscribe(events.TOPIC_NOTIFY, self._handle_notify)
        self._started = True

    @property
    def items(self) -> List[Notification]:
        return list(self._items)

    @property
    def latest(self) -> Optional[Notification]:
        return self._items[-1] if self._items else None

    def drain(self) -> List[Notification]:
        """Return and forget everything received so far."""
        items = list(self._items)
        self._items.clear()
        return items

    async def _handle_notify(self, payload: EventPayload) -> None:
        notification = Notification(**payload)
        if notification.level in ("info", "success") and not self._enabled():
            return
        self._items.append(notification)
