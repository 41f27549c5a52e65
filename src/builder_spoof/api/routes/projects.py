"""Project routes."""

from __future__ import annotations

from typing import Any

from builder_spoof.api.route import Route
from builder_spoof.api.router import HandlerContext
from builder_spoof.api.routes.common import extract_range, paginate

ROOT = "projects"


def origin_projects(ctx: HandlerContext) -> list[Any] | None:
    bundles = ctx.snapshot.projects.get(ctx.params["origin"])
    if bundles is None:
        return None
    return [bundle.root for bundle in bundles.values()]


def project(ctx: HandlerContext) -> Any:
    bundle = ctx.snapshot.bundle(ctx.params["origin"], ctx.params["pkg"])
    return bundle.root if bundle else None


def project_jobs(ctx: HandlerContext) -> dict[str, Any] | None:
    """Page through a project's jobs, most recently created first."""
    offset = extract_range(ctx.query)
    bundle = ctx.snapshot.bundle(ctx.params["origin"], ctx.params["pkg"])
    if bundle is None:
        return None
    jobs = sorted(bundle.jobs, key=lambda job: job.created_at, reverse=True)
    return paginate(jobs, offset)


routes = [
    Route("get", f"{ROOT}/:origin", origin_projects),
    Route("get", f"{ROOT}/:origin/:pkg", project),
    Route("get", f"{ROOT}/:origin/:pkg/jobs", project_jobs),
]
