"""Debug routes."""

from __future__ import annotations

from builder_spoof.api.route import Route
from builder_spoof.api.router import HandlerContext

ROOT = "debug"


def debug_page(ctx: HandlerContext) -> str:
    """Embed the whole snapshot as ``window.data`` for inspection in a browser."""
    payload = ctx.snapshot.model_dump_json().replace("</", "<\\/")
    return f"<html><body><script> window.data = {payload}; </script></body></html>"


routes = [
    Route("get", ROOT, debug_page),
]
