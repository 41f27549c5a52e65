"""FastAPI app entrypoint."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

import uvicorn
from fastapi import FastAPI, Request, Response

from builder_spoof.api.route import Route
from builder_spoof.api.router import Router
from builder_spoof.api.routes import debug, depot, origins, profile, projects, user
from builder_spoof.config.settings import SpoofSettings, get_settings
from builder_spoof.data.spoofer import Spoofer
from builder_spoof.models.entities import Snapshot

logger = logging.getLogger(__name__)

# Registration order decides which handler wins a shared method and path.
ROUTES: list[Route] = [
    *debug.routes,
    *depot.routes,
    *origins.routes,
    *projects.routes,
    *user.routes,
    *profile.routes,
]


def create_app(
    snapshot: Snapshot | None = None,
    settings: SpoofSettings | None = None,
) -> FastAPI:
    """Build the app around ``snapshot``, generating one first if none is given."""
    if snapshot is None:
        snapshot = Spoofer(settings or get_settings()).init()

    app = FastAPI(title="Builder API Spoofer", version="0.1.0")
    app.state.snapshot = snapshot

    @app.middleware("http")
    async def attach_snapshot(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request.state.snapshot = snapshot
        return await call_next(request)

    @app.get("/health", tags=["system"])
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    router = Router(app)
    router.register(ROUTES)
    app.state.router = router
    return app


def configure_logging(log_level: str) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        logging.getLogger(logger_name).setLevel(level)


def run() -> None:
    settings = get_settings()
    configure_logging(settings.log_level)
    app = create_app(settings=settings)
    logger.info("Beginning Habitat dev api spoofer on port %s", settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        log_config=None,
    )
