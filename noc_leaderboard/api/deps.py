"""FastAPI dependencies exposing the process-scoped context."""

from __future__ import annotations

from fastapi import Request, WebSocket

from ..services.context import LeaderboardContext


def get_context(request: Request) -> LeaderboardContext:
    return request.app.state.context


def get_ws_context(websocket: WebSocket) -> LeaderboardContext:
    return websocket.app.state.context


__all__ = ["get_context", "get_ws_context"]
