"""Small, seeded snapshots for tests."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from builder_spoof.config.settings import SpoofSettings
from builder_spoof.data.spoofer import Spoofer
from builder_spoof.models.entities import Snapshot

FIXED_NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


def small_settings(seed: int = 1234, **overrides: Any) -> SpoofSettings:
    values: dict[str, Any] = {
        "seed": seed,
        "core_package_min": 3,
        "core_package_max": 6,
        "job_min": 1,
        "job_max": 5,
        "version_min": 1,
        "version_max": 3,
    }
    values.update(overrides)
    return SpoofSettings(**values)


def build_snapshot(seed: int = 1234, **overrides: Any) -> Snapshot:
    return Spoofer(small_settings(seed, **overrides), now=FIXED_NOW).init()
