"""Service layer: mutation service, audit log and broadcast channel."""

from .audit import AuditLog
from .broadcast import BroadcastChannel, BroadcastEvent, Subscriber, WebSocketHub
from .context import LeaderboardContext
from .entries import EntryService
from .errors import LeaderboardError, NotFoundError, StoreError, ValidationError
from .serializers import deleted_entry_to_dict, entry_to_dict

__all__ = [
    "AuditLog",
    "BroadcastChannel",
    "BroadcastEvent",
    "EntryService",
    "LeaderboardContext",
    "LeaderboardError",
    "NotFoundError",
    "StoreError",
    "Subscriber",
    "ValidationError",
    "WebSocketHub",
    "deleted_entry_to_dict",
    "entry_to_dict",
]
