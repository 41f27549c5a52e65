"""Shared API dependency providers."""

from __future__ import annotations

from fastapi import Request

from builder_spoof.models.entities import Snapshot


def get_snapshot(request: Request) -> Snapshot:
    """Return the snapshot the middleware attached to this request."""
    snapshot = getattr(request.state, "snapshot", None)
    if snapshot is None:
        snapshot = request.app.state.snapshot
    return snapshot
