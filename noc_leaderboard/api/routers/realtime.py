"""WebSocket endpoint pushing leaderboard events to viewers."""

from __future__ import annotations

import asyncio

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect

from ...core.logging import get_logger
from ...services import LeaderboardContext, Subscriber, WebSocketHub
from ..deps import get_ws_context

router = APIRouter(tags=["realtime"])

logger = get_logger(__name__)


async def _pump(websocket: WebSocket, hub: WebSocketHub, subscriber: Subscriber) -> None:
    while True:
        event = await subscriber.next_event()
        try:
            await websocket.send_json(event.to_message())
        except (WebSocketDisconnect, RuntimeError) as exc:
            # Stop queueing for a client we can no longer reach.
            hub.unsubscribe(subscriber)
            logger.info("subscriber_send_failed", error=str(exc))
            return


@router.websocket("/ws")
async def leaderboard_events(
    websocket: WebSocket, context: LeaderboardContext = Depends(get_ws_context)
) -> None:
    """Stream ``new-entry``, ``update-entry`` and ``delete-entry`` events.

    Clients should fetch ``GET /leaderboard`` after connecting; events
    published before the connection was made are not replayed. Frames sent
    by the client are ignored.
    """

    # Subscribe before accepting so no event published after the handshake
    # can be missed.
    subscriber = context.channel.subscribe()
    sender = None
    try:
        await websocket.accept()
        sender = asyncio.create_task(_pump(websocket, context.channel, subscriber))
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        context.channel.unsubscribe(subscriber)
        if sender is not None:
            sender.cancel()
            await asyncio.gather(sender, return_exceptions=True)


__all__ = ["router"]
