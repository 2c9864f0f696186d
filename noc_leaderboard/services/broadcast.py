"""Fan-out of leaderboard mutations to connected real-time clients."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Any, Dict, Protocol, Set

from ..core.logging import get_logger
from ..models import Entry
from .serializers import entry_to_dict

logger = get_logger(__name__)

NEW_ENTRY = "new-entry"
UPDATE_ENTRY = "update-entry"
DELETE_ENTRY = "delete-entry"


@dataclass(frozen=True)
class BroadcastEvent:
    """A named event and its JSON-ready payload."""

    name: str
    data: Any

    @classmethod
    def created(cls, entry: Entry) -> "BroadcastEvent":
        return cls(NEW_ENTRY, entry_to_dict(entry))

    @classmethod
    def updated(cls, entry: Entry) -> "BroadcastEvent":
        return cls(UPDATE_ENTRY, entry_to_dict(entry))

    @classmethod
    def deleted(cls, entry_id: int) -> "BroadcastEvent":
        return cls(DELETE_ENTRY, entry_id)

    def to_message(self) -> Dict[str, Any]:
        return {"event": self.name, "data": self.data}


class BroadcastChannel(Protocol):
    """Anything the gateway can publish events to."""

    def publish(self, event: BroadcastEvent) -> None:
        ...


class Subscriber:
    """One connected client and the events waiting to be sent to it."""

    def __init__(self) -> None:
        self.queue: "asyncio.Queue[BroadcastEvent]" = asyncio.Queue()

    async def next_event(self) -> BroadcastEvent:
        return await self.queue.get()


class WebSocketHub:
    """Broadcast channel backed by per-connection queues.

    ``publish`` never suspends: it enqueues the event for every subscriber
    connected at that moment, so clients that subscribe later never see it
    and each client receives events in publish order. Delivery is
    best-effort; nothing is retried or replayed.
    """

    def __init__(self) -> None:
        self._subscribers: Set[Subscriber] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def subscribe(self) -> Subscriber:
        subscriber = Subscriber()
        self._subscribers.add(subscriber)
        logger.info("subscriber_connected", subscribers=len(self._subscribers))
        return subscriber

    def unsubscribe(self, subscriber: Subscriber) -> None:
        if subscriber in self._subscribers:
            self._subscribers.discard(subscriber)
            logger.info("subscriber_disconnected", subscribers=len(self._subscribers))

    def publish(self, event: BroadcastEvent) -> None:
        for subscriber in list(self._subscribers):
            subscriber.queue.put_nowait(event)
        logger.debug("event_published", event_name=event.name, subscribers=len(self._subscribers))


__all__ = [
    "DELETE_ENTRY",
    "NEW_ENTRY",
    "UPDATE_ENTRY",
    "BroadcastChannel",
    "BroadcastEvent",
    "Subscriber",
    "WebSocketHub",
]
