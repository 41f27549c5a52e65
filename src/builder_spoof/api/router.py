"""Install declarative routes on the FastAPI app."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterable, Mapping

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import HTMLResponse, JSONResponse, Response

from builder_spoof.api.deps import get_snapshot
from builder_spoof.api.route import Route
from builder_spoof.models.entities import Snapshot

logger = logging.getLogger(__name__)

_METHODS_WITH_BODY = frozenset({"post", "put"})


@dataclass(slots=True)
class HandlerContext:
    """Everything a handler may read for one request."""

    request: Request
    snapshot: Snapshot
    state: dict[str, Any]
    params: Mapping[str, str] = field(default_factory=dict)
    query: Mapping[str, str] = field(default_factory=dict)
    body: Any = None


def render(result: Any) -> Response:
    """Turn a handler's return value into a response.

    ``None`` becomes an empty 200, strings are sent as HTML, and everything
    else is JSON encoded.
    """
    if result is None:
        return Response(status_code=status.HTTP_200_OK)
    if isinstance(result, Response):
        return result
    if isinstance(result, str):
        return HTMLResponse(result)
    return JSONResponse(jsonable_encoder(result))


class Router:
    """Register routes in order and share a state bag between their handlers."""

    def __init__(self, app: FastAPI) -> None:
        self.app = app
        self.routes: list[Route] = []
        self.state: dict[str, Any] = {}

    def register(self, routes: Iterable[Route]) -> None:
        for route in routes:
            self.app.add_api_route(
                route.path,
                self._endpoint(route),
                methods=[route.method.upper()],
                name=getattr(route.handler, "__name__", route.path),
                response_model=None,
            )
            self.routes.append(route)
            logger.debug("Registered %s %s", route.method.upper(), route.path)

    def _endpoint(self, route: Route) -> Callable[[Request], Awaitable[Response]]:
        async def endpoint(request: Request) -> Response:
            body = None
            if route.method in _METHODS_WITH_BODY:
                body = _decode_body(await request.body())
            context = HandlerContext(
                request=request,
                snapshot=get_snapshot(request),
                state=self.state,
                params=dict(request.path_params),
                query=request.query_params,
                body=body,
            )
            return render(route.handler(context))

        endpoint.__name__ = getattr(route.handler, "__name__", "endpoint")
        return endpoint


def _decode_body(raw: bytes) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Request body is not valid JSON"
        ) from exc
