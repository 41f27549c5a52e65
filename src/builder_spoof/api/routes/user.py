"""User routes."""

from __future__ import annotations

from typing import Any

from builder_spoof.api.route import Route
from builder_spoof.api.router import HandlerContext

ROOT = "user"


def origins(ctx: HandlerContext) -> list[Any]:
    return ctx.snapshot.origins


def invitations(ctx: HandlerContext) -> list[Any]:
    return ctx.snapshot.invitations


routes = [
    Route("get", f"{ROOT}/origins", origins),
    Route("get", f"{ROOT}/invitations", invitations),
]
