"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from ...services import LeaderboardContext
from ..deps import get_context

router = APIRouter(tags=["system"])


@router.get("/health")
def health(context: LeaderboardContext = Depends(get_context)) -> Dict[str, Any]:
    """Simple readiness probe."""

    return {"ok": True, "subscribers": context.channel.subscriber_count}


__all__ = ["router"]
