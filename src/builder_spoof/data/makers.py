"""Factories producing one record each.

Every maker accepts ``overrides``: a mapping whose top-level keys replace the
generated defaults one for one. Nested values are replaced wholesale, never
merged into the nested default. Fields derived from other fields (an email
from a name, an ``updated_at`` from a ``created_at``) are computed after the
merge so they follow the overridden value.
"""

from __future__ import annotations

import random
import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Mapping

from faker import Faker
from faker.providers.company.en_US import Provider as CompanyProvider

from builder_spoof.data.util import (
    alphanumeric,
    between,
    bounded_array,
    numeric_string,
    past,
    semver,
)
from builder_spoof.models.entities import (
    Auth,
    Job,
    JobState,
    Origin,
    OriginSecret,
    Platform,
    Project,
    User,
    Version,
)

Overrides = Mapping[str, Any]

_PLATFORM_SETS = (
    [Platform.X86_64_LINUX],
    [Platform.X86_64_WINDOWS],
    [Platform.X86_64_LINUX, Platform.X86_64_WINDOWS],
)
_SECRET_SUFFIXES = ("TOKEN", "KEY", "PASSWORD", "URL")
_INTEGRATION_TYPES = ("docker", "artifactory")
_BS_BUZZ = CompanyProvider.bsWords[1]
_BS_NOUNS = CompanyProvider.bsWords[2]
_CATCH_PHRASE_NOUNS = CompanyProvider.catch_phrase_words[2]
_SLUG_INVALID = re.compile(r"[^a-z0-9-]")


def seeded_faker(seed: int | None = None) -> Faker:
    """Return a faker with its own random state."""
    fake = Faker()
    fake.seed_instance(seed)
    return fake


@dataclass(slots=True)
class GenerationContext:
    """Faker instance and reference time shared by the makers."""

    fake: Faker = field(default_factory=seeded_faker)
    now: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def rng(self) -> random.Random:
        return self.fake.random


def merge_shallow(defaults: Mapping[str, Any], overrides: Overrides | None) -> dict[str, Any]:
    merged = dict(defaults)
    if overrides:
        for key, value in overrides.items():
            merged[key] = value
    return merged


def package_slug(fake: Faker) -> str:
    """Compose a lowercase package name such as ``robust-paradigms``."""
    lead = fake.random_element(_BS_BUZZ if fake.pybool() else _CATCH_PHRASE_NOUNS)
    slug = f"{lead}-{fake.random_element(_BS_NOUNS)}".replace(" ", "").lower()
    return _SLUG_INVALID.sub("", slug)


def make_user(ctx: GenerationContext, overrides: Overrides | None = None) -> User:
    fake = ctx.fake
    defaults = {
        "id": numeric_string(ctx.rng, 18),
        "name": fake.user_name(),
        "created_at": past(fake, past(fake, ctx.now, years=1), years=3),
    }
    fields = merge_shallow(defaults, overrides)
    fields.setdefault("email", f"{fields['name']}@{fake.domain_name()}")
    fields.setdefault("updated_at", between(fake, fields["created_at"], ctx.now))
    return User.model_validate(fields)


def make_auth(ctx: GenerationContext, overrides: Overrides | None = None) -> Auth:
    defaults = {
        "token": f"{alphanumeric(ctx.fake, 84)}=",
        "flags": 0,
        "oauth_token": alphanumeric(ctx.fake, 40),
    }
    return Auth.model_validate(merge_shallow(defaults, overrides))


def make_origin_secret(
    ctx: GenerationContext,
    origin: str,
    owner_id: str,
    overrides: Overrides | None = None,
) -> OriginSecret:
    fake = ctx.fake
    defaults = {
        "id": numeric_string(ctx.rng, 19),
        "origin": origin,
        "owner_id": owner_id,
        "name": f"{fake.domain_word().upper()}_{fake.random_element(_SECRET_SUFFIXES)}",
        "value": alphanumeric(fake, 64),
        "created_at": past(fake, ctx.now, years=2),
    }
    fields = merge_shallow(defaults, overrides)
    fields.setdefault("updated_at", between(fake, fields["created_at"], ctx.now))
    return OriginSecret.model_validate(fields)


def make_origin(ctx: GenerationContext, overrides: Overrides | None = None) -> Origin:
    fake = ctx.fake
    defaults = {
        "name": fake.user_name(),
        "created_at": past(fake, ctx.now, years=3),
        "owner_id": numeric_string(ctx.rng, 18),
        "default_package_visibility": False,
        "package_count": fake.random_int(min=2, max=10),
        "integrations": {
            kind: bounded_array(ctx.rng, lambda _: fake.domain_word(), 0, 2)
            for kind in _INTEGRATION_TYPES
        },
    }
    fields = merge_shallow(defaults, overrides)
    fields.setdefault("updated_at", between(fake, fields["created_at"], ctx.now))
    if "secrets" not in fields:
        fields["secrets"] = bounded_array(
            ctx.rng,
            lambda _: make_origin_secret(ctx, fields["name"], fields["owner_id"]),
            0,
            3,
        )
    return Origin.model_validate(fields)


def make_project(
    ctx: GenerationContext,
    package_name: str,
    origin: str,
    owner_id: str,
    visibility: bool,
    overrides: Overrides | None = None,
) -> Project:
    fake = ctx.fake
    defaults = {
        "package_name": package_name,
        "origin": origin,
        "owner_id": owner_id,
        "visibility": visibility,
        "id": numeric_string(ctx.rng, 19),
        "name": f"{origin}/{package_name}",
        "plan_path": f"{package_name}/plan.sh",
        "vcs_type": "git",
        "vcs_data": f"https://github.com/{origin}/{package_name}",
        "vcs_installation_id": numeric_string(ctx.rng, 5),
        "auto_build": fake.pybool(),
        "created_at": past(fake, ctx.now, years=1),
    }
    fields = merge_shallow(defaults, overrides)
    fields.setdefault("updated_at", between(fake, fields["created_at"], ctx.now))
    return Project.model_validate(fields)


def make_job(
    ctx: GenerationContext,
    package_name: str,
    origin: str,
    owner_id: str,
    overrides: Overrides | None = None,
) -> Job:
    fake = ctx.fake
    defaults = {
        "name": package_name,
        "origin": origin,
        "owner_id": owner_id,
        "build_finished_at": past(fake, ctx.now, years=1),
        "id": numeric_string(ctx.rng, 19),
        "release": numeric_string(ctx.rng, 19),
        "state": fake.random_element(list(JobState)),
        "version": semver(fake),
    }
    fields = merge_shallow(defaults, overrides)
    # Sampled backwards from the finish time.
    fields.setdefault("build_started_at", past(fake, fields["build_finished_at"], years=1))
    fields.setdefault("created_at", past(fake, fields["build_started_at"], years=1))
    return Job.model_validate(fields)


def make_version(
    ctx: GenerationContext,
    package_name: str,
    origin: str,
    visibility: bool,
    overrides: Overrides | None = None,
) -> Version:
    fake = ctx.fake
    defaults = {
        "name": package_name,
        "origin": origin,
        "version": semver(fake),
        "release_count": fake.random_int(min=1, max=20),
        "latest": numeric_string(ctx.rng, 14),
        "platforms": list(fake.random_element(_PLATFORM_SETS)),
        "visibility": visibility,
    }
    return Version.model_validate(merge_shallow(defaults, overrides))
