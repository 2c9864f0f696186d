"""Leaderboard endpoints."""

from __future__ import annotations

from typing import Annotated, Any, Dict, List

from fastapi import APIRouter, Depends, Path, Response, status

from ...models import EntryCreate, EntryUpdate
from ...services import BroadcastEvent, LeaderboardContext
from ...services.serializers import deleted_entry_to_dict, entry_to_dict
from ..deps import get_context

router = APIRouter(tags=["leaderboard"])

# Ids are 64-bit integers in every supported backend.
EntryId = Annotated[int, Path(ge=1, le=2**63 - 1)]


@router.get("/leaderboard")
async def list_entries(
    context: LeaderboardContext = Depends(get_context),
) -> List[Dict[str, Any]]:
    """Every entry on the board, newest first."""

    entries = await context.service.list_entries()
    return [entry_to_dict(entry) for entry in entries]


@router.get("/leaderboard/{entry_id}")
async def get_entry(
    entry_id: EntryId, context: LeaderboardContext = Depends(get_context)
) -> Dict[str, Any]:
    entry = await context.service.get(entry_id)
    return entry_to_dict(entry)


# Mutations hold the context lock until their event is published, so events
# leave in the same order the rows were committed.


@router.post("/leaderboard", status_code=status.HTTP_201_CREATED)
async def create_entry(
    body: EntryCreate, context: LeaderboardContext = Depends(get_context)
) -> Dict[str, Any]:
    """Add a support entry and announce it to connected viewers."""

    async with context.mutation_lock:
        entry = await context.service.create(body.name, body.text, body.status)
        context.channel.publish(BroadcastEvent.created(entry))
    return entry_to_dict(entry)


@router.put("/leaderboard/{entry_id}")
async def update_entry(
    entry_id: EntryId,
    body: EntryUpdate,
    context: LeaderboardContext = Depends(get_context),
) -> Dict[str, Any]:
    """Edit an entry's name, text or status."""

    async with context.mutation_lock:
        entry = await context.service.update(entry_id, body.name, body.text, body.status)
        context.channel.publish(BroadcastEvent.updated(entry))
    return entry_to_dict(entry)


@router.delete("/leaderboard/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: EntryId, context: LeaderboardContext = Depends(get_context)
) -> Response:
    """Remove an entry; its snapshot moves to the deleted-entries log."""

    async with context.mutation_lock:
        await context.service.delete(entry_id)
        context.channel.publish(BroadcastEvent.deleted(entry_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/deleted-entries")
def list_deleted_entries(
    context: LeaderboardContext = Depends(get_context),
) -> List[Dict[str, Any]]:
    """Entries deleted since the server started, in deletion order."""

    return [deleted_entry_to_dict(snapshot) for snapshot in context.service.deleted_entries()]


__all__ = ["router"]
