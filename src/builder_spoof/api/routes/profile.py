"""Profile and session routes."""

from __future__ import annotations

from typing import Any

from fastapi import HTTPException, status

from builder_spoof.api.route import Route
from builder_spoof.api.router import HandlerContext
from builder_spoof.data.makers import merge_shallow
from builder_spoof.models.entities import Auth, User


def profile(ctx: HandlerContext) -> User:
    return ctx.snapshot.user


def update_profile(ctx: HandlerContext) -> dict[str, Any]:
    """Echo the profile with the submitted fields applied; nothing is stored."""
    if not isinstance(ctx.body, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Expected a JSON object"
        )
    return merge_shallow(ctx.snapshot.user.model_dump(mode="json"), ctx.body)


def authenticate(ctx: HandlerContext) -> Auth:
    return ctx.snapshot.authentication


routes = [
    Route("get", "profile", profile),
    Route("put", "profile", update_profile),
    Route("get", "authenticate", authenticate),
]
