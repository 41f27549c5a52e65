"""Build the generated dataset served by the spoofer."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from faker import Faker

from builder_spoof.config.settings import SpoofSettings
from builder_spoof.data import makers
from builder_spoof.data.util import bounded_array
from builder_spoof.errors import GenerationError
from builder_spoof.models.entities import (
    Auth,
    Origin,
    ProjectBundle,
    Snapshot,
    User,
)

logger = logging.getLogger(__name__)

CORE_ORIGIN = "core"
SLUG_ATTEMPTS_PER_PACKAGE = 50


class Spoofer:
    """Compose makers into one relationally consistent snapshot.

    Stages run in a fixed order, each one reading what the previous produced:
    ``add_user`` → ``add_auth`` → ``add_origins`` → ``add_projects``.
    """

    def __init__(
        self,
        settings: SpoofSettings | None = None,
        fake: Faker | None = None,
        now: datetime | None = None,
    ) -> None:
        self.settings = settings or SpoofSettings()
        if fake is None:
            fake = makers.seeded_faker(self.settings.seed)
        self._ctx = makers.GenerationContext(fake=fake, now=now or datetime.now(UTC))
        self.user: User | None = None
        self.authentication: Auth | None = None
        self.origins: list[Origin] | None = None
        self.projects: dict[str, dict[str, ProjectBundle]] | None = None
        self.snapshot: Snapshot | None = None

    def add_user(self) -> Spoofer:
        self.user = makers.make_user(self._ctx)
        logger.debug("Generated user %s", self.user.name)
        return self

    def add_auth(self) -> Spoofer:
        self.authentication = makers.make_auth(self._ctx)
        return self

    def add_origins(self) -> Spoofer:
        if self.user is None:
            msg = "add_origins requires add_user to run first"
            raise GenerationError(msg)
        fake = self._ctx.fake
        settings = self.settings
        core = makers.make_origin(
            self._ctx,
            {
                "name": CORE_ORIGIN,
                "default_package_visibility": True,
                "package_count": fake.random_int(
                    min=settings.core_package_min, max=settings.core_package_max
                ),
            },
        )
        own = makers.make_origin(
            self._ctx,
            {
                "name": self.user.name,
                "owner_id": self.user.id,
                "package_count": fake.random_int(
                    min=settings.user_package_min, max=settings.user_package_max
                ),
            },
        )
        self.origins = [core, own]
        logger.debug("Generated origins %s", [origin.name for origin in self.origins])
        return self

    def add_projects(self) -> Spoofer:
        if self.origins is None:
            msg = "add_projects requires add_origins to run first"
            raise GenerationError(msg)
        projects: dict[str, dict[str, ProjectBundle]] = {}
        for origin in self.origins:
            bundles: dict[str, ProjectBundle] = {}
            for package_name in self._unique_slugs(origin):
                bundles[package_name] = self._bundle(origin, package_name)
            projects[origin.name] = bundles
        self.projects = projects
        return self

    def init(self) -> Snapshot:
        """Run every stage and return the finished snapshot."""
        self.add_user().add_auth().add_origins().add_projects()
        if self.user is None or self.authentication is None or self.origins is None:
            msg = "snapshot stages did not complete"
            raise GenerationError(msg)
        self.snapshot = Snapshot(
            user=self.user,
            authentication=self.authentication,
            origins=self.origins,
            projects=self.projects or {},
        )
        logger.info(
            "Generated snapshot for %s: %s",
            self.user.name,
            ", ".join(
                f"{name}={len(bundles)} projects" for name, bundles in self.snapshot.projects.items()
            ),
        )
        return self.snapshot

    def _unique_slugs(self, origin: Origin) -> list[str]:
        fake = self._ctx.fake
        slugs: dict[str, None] = {}
        attempts = origin.package_count * SLUG_ATTEMPTS_PER_PACKAGE
        while len(slugs) < origin.package_count:
            if attempts == 0:
                msg = (
                    f"could not draw {origin.package_count} unique package names "
                    f"for origin {origin.name}"
                )
                raise GenerationError(msg)
            attempts -= 1
            slugs.setdefault(makers.package_slug(fake), None)
        return list(slugs)

    def _bundle(self, origin: Origin, package_name: str) -> ProjectBundle:
        settings = self.settings
        rng = self._ctx.rng
        root = makers.make_project(
            self._ctx,
            package_name,
            origin.name,
            origin.owner_id,
            origin.default_package_visibility,
        )
        jobs = bounded_array(
            rng,
            lambda _: makers.make_job(self._ctx, package_name, origin.name, origin.owner_id),
            settings.job_min,
            settings.job_max,
        )
        versions = bounded_array(
            rng,
            lambda _: makers.make_version(self._ctx, package_name, origin.name, root.visibility),
            settings.version_min,
            settings.version_max,
        )
        return ProjectBundle(root=root, jobs=jobs, versions=versions)
