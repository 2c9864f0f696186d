"""Mapping from service errors to JSON error responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.logging import get_logger
from ..services.errors import LeaderboardError

logger = get_logger(__name__)


async def leaderboard_error_handler(request: Request, exc: LeaderboardError) -> JSONResponse:
    logger.warning(
        "request_failed",
        error_type=type(exc).__name__,
        status_code=exc.status_code,
        path=request.url.path,
    )
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        {"error": "Invalid request body", "details": jsonable_encoder(exc.errors())},
        status_code=400,
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(LeaderboardError, leaderboard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)


__all__ = ["register_error_handlers"]
