"""Depot routes."""

from __future__ import annotations

from typing import Any

from builder_spoof.api.route import Route
from builder_spoof.api.router import HandlerContext
from builder_spoof.api.routes.common import extract_range, paginate

ROOT = "depot"


def origin_record(ctx: HandlerContext) -> dict[str, Any] | None:
    origin = ctx.snapshot.origin(ctx.params["user"])
    return origin.base_record() if origin else None


def origin_integrations(ctx: HandlerContext) -> dict[str, list[str]] | None:
    origin = ctx.snapshot.origin(ctx.params["user"])
    return origin.integrations if origin else None


def origin_secrets(ctx: HandlerContext) -> list[Any] | None:
    origin = ctx.snapshot.origin(ctx.params["user"])
    return origin.secrets if origin else None


def origin_packages(ctx: HandlerContext) -> dict[str, Any] | None:
    """Page through every released package ident of one origin."""
    offset = extract_range(ctx.query)
    bundles = ctx.snapshot.projects.get(ctx.params["user"])
    if bundles is None:
        return None
    idents = [
        {
            "origin": version.origin,
            "name": version.name,
            "version": version.version,
            "release": version.latest,
        }
        for bundle in bundles.values()
        for version in bundle.versions
    ]
    return paginate(idents, offset)


def package_versions(ctx: HandlerContext) -> list[Any] | None:
    bundle = ctx.snapshot.bundle(ctx.params["origin"], ctx.params["pkg"])
    return bundle.versions if bundle else None


def invitations(ctx: HandlerContext) -> list[Any]:
    return ctx.snapshot.invitations


routes = [
    Route("get", f"{ROOT}/origins/:user", origin_record),
    Route("get", f"{ROOT}/origins/:user/integrations", origin_integrations),
    Route("get", f"{ROOT}/origins/:user/secret", origin_secrets),
    Route("get", f"{ROOT}/:user/pkgs", origin_packages),
    Route("get", f"{ROOT}/pkgs/:origin/:pkg/versions", package_versions),
    Route("get", f"{ROOT}/invitations", invitations),
]
