"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from ..services.session import CoordinateSession


def get_session(request: Request) -> CoordinateSession:
    """Return the coordinate session attached to the running application."""
    return request.app.state.session
