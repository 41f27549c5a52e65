"""Origin routes."""

from __future__ import annotations

from typing import Any

from builder_spoof.api.route import Route
from builder_spoof.api.router import HandlerContext

ROOT = "depot/origins"


def user_origins(ctx: HandlerContext) -> list[Any]:
    return ctx.snapshot.origins


def origin_stub(ctx: HandlerContext) -> None:
    """Placeholder; the depot namespace registers this path first."""
    return None


routes = [
    Route("get", "user/origins", user_origins),
    Route("get", f"{ROOT}/:user", origin_stub),
]
