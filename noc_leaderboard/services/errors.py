"""Typed failures raised by the leaderboard services."""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base error; carries the HTTP status the gateway should answer with."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(LeaderboardError):
    """A required field is missing or malformed."""

    status_code = 400


class NotFoundError(LeaderboardError):
    """No entry exists for the requested id."""

    status_code = 404


class StoreError(LeaderboardError):
    """The record store failed; details are logged, never returned."""

    status_code = 500


__all__ = ["LeaderboardError", "NotFoundError", "StoreError", "ValidationError"]
