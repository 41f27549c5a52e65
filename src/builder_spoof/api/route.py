"""Declarative route definitions."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from builder_spoof.errors import RouteError

if TYPE_CHECKING:
    from builder_spoof.api.router import HandlerContext

Handler = Callable[["HandlerContext"], Any]

AVAILABLE_METHODS = ("get", "post", "put")
_EXPRESS_PARAM = re.compile(r":([A-Za-z_][A-Za-z0-9_]*)")


def normalize_path(path: str) -> str:
    """Prefix ``/`` and turn ``:name`` segments into ``{name}``."""
    if not path.startswith("/"):
        path = "/" + path
    return _EXPRESS_PARAM.sub(r"{\1}", path)


@dataclass(slots=True)
class Route:
    """An HTTP method, path and handler to install on the app."""

    method: str
    path: str
    handler: Handler = field(repr=False)

    def __post_init__(self) -> None:
        if self.method not in AVAILABLE_METHODS:
            msg = f"Bad route type: {self.method} - must be one of {list(AVAILABLE_METHODS)}"
            raise RouteError(msg)
        self.path = normalize_path(self.path)
