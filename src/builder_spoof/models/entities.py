"""Records served by the spoofer.

Every identifier is a string of decimal digits so that clients treat it as an
opaque 64-bit id, the same way the production API renders them.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Record(BaseModel):
    """Immutable base for generated records."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class JobState(str, Enum):
    """Build job states reported by the job server."""

    COMPLETE = "Complete"
    FAILED = "Failed"
    PENDING = "Pending"
    RUNNING = "Running"


class Platform(str, Enum):
    """Package target platforms."""

    X86_64_LINUX = "x86_64-linux"
    X86_64_WINDOWS = "x86_64-windows"


class User(Record):
    """The signed-in account."""

    id: str
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class Auth(Record):
    """Session credentials handed to the UI."""

    token: str
    flags: int = 0
    oauth_token: str


class OriginSecret(Record):
    """Encrypted origin secret as listed by the depot."""

    id: str
    origin: str
    owner_id: str
    name: str
    value: str
    created_at: datetime
    updated_at: datetime


class Origin(Record):
    """Package namespace.

    ``integrations`` and ``secrets`` are served from their own endpoints and
    are left out of :meth:`base_record`.
    """

    name: str
    owner_id: str
    default_package_visibility: bool = False
    package_count: int
    created_at: datetime
    updated_at: datetime
    integrations: dict[str, list[str]] = Field(default_factory=dict)
    secrets: list[OriginSecret] = Field(default_factory=list)

    def base_record(self) -> dict[str, object]:
        return self.model_dump(mode="json", exclude={"integrations", "secrets"})


class Project(Record):
    """Build project connected to a source repository."""

    id: str
    name: str
    origin: str
    package_name: str
    owner_id: str
    plan_path: str
    visibility: bool
    vcs_type: str = "git"
    vcs_data: str
    vcs_installation_id: str
    auto_build: bool
    created_at: datetime
    updated_at: datetime


class Job(Record):
    """One build of a project."""

    id: str
    name: str
    origin: str
    owner_id: str
    release: str
    state: JobState
    version: str
    created_at: datetime
    build_started_at: datetime
    build_finished_at: datetime


class Version(Record):
    """Published version of a package."""

    name: str
    origin: str
    version: str
    release_count: int = Field(ge=1)
    latest: str
    platforms: list[Platform] = Field(min_length=1)
    visibility: bool


class ProjectBundle(Record):
    """A project together with its jobs and versions."""

    root: Project
    jobs: list[Job]
    versions: list[Version]


class Snapshot(Record):
    """Complete generated dataset, built once per process."""

    user: User
    authentication: Auth
    origins: list[Origin]
    projects: dict[str, dict[str, ProjectBundle]]
    invitations: list[dict[str, object]] = Field(default_factory=list)

    def origin(self, name: str) -> Origin | None:
        for origin in self.origins:
            if origin.name == name:
                return origin
        return None

    def bundle(self, origin: str, package_name: str) -> ProjectBundle | None:
        return self.projects.get(origin, {}).get(package_name)
