"""Credential check used by the front-end login screen.

Credentials are plain environment variables compared at request time; no
session or token is issued. This is only suitable for a trusted internal
network.
"""

from __future__ import annotations

import os
import secrets
from typing import Any, Dict, List, Optional, Tuple

from fastapi import APIRouter
from sqlmodel import SQLModel

from ...core.logging import get_logger
from ...services.errors import ValidationError

router = APIRouter(tags=["auth"])

logger = get_logger(__name__)


class LoginRequest(SQLModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


def _accounts() -> List[Tuple[str, Optional[str], Optional[str]]]:
    # Read fresh each request so .env changes apply after restart
    return [
        ("admin", os.getenv("ADMIN_USERNAME"), os.getenv("ADMIN_PASSWORD")),
        ("support", os.getenv("CS_USERNAME"), os.getenv("CS_PASSWORD")),
    ]


def _matches(given: str, expected: Optional[str]) -> bool:
    if not expected:
        return False
    return secrets.compare_digest(given.encode("utf-8"), expected.encode("utf-8"))


@router.post("/login")
def login(body: LoginRequest) -> Dict[str, Any]:
    """Resolve a username/password pair to the admin or support role."""

    username = (body.username or body.email or "").strip()
    password = body.password or ""
    if not username or not password:
        raise ValidationError("username and password are required")

    for role, expected_user, expected_pass in _accounts():
        ok_user = _matches(username, expected_user)
        ok_pass = _matches(password, expected_pass)
        if ok_user and ok_pass:
            logger.info("login_succeeded", username=username, role=role)
            return {"success": True, "user": {"username": username, "role": role}}

    logger.info("login_failed", username=username)
    return {"success": False}


__all__ = ["router"]
