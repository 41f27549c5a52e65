from fastapi.testclient import TestClient

from builder_spoof.api.app import create_app
from tests.support.snapshot_helpers import build_snapshot


def test_origin_record_and_sub_objects() -> None:
    snapshot = build_snapshot()
    client = TestClient(create_app(snapshot))
    own = snapshot.origins[1]

    record = client.get(f"/depot/origins/{own.name}")
    assert record.status_code == 200
    assert record.json() == own.base_record()
    assert record.json()["owner_id"] == snapshot.user.id

    integrations = client.get(f"/depot/origins/{own.name}/integrations")
    assert integrations.json() == own.integrations

    secrets = client.get(f"/depot/origins/{own.name}/secret")
    assert secrets.json() == [secret.model_dump(mode="json") for secret in own.secrets]


def test_unknown_origin_is_empty_success() -> None:
    client = TestClient(create_app(build_snapshot()))
    for path in (
        "/depot/origins/doesnotexist",
        "/depot/origins/doesnotexist/integrations",
        "/depot/origins/doesnotexist/secret",
        "/depot/doesnotexist/pkgs",
    ):
        response = client.get(path)
        assert response.status_code == 200
        assert response.content == b""


def test_origin_packages_are_paginated() -> None:
    snapshot = build_snapshot(core_package_min=30, core_package_max=30, version_min=3, version_max=3)
    client = TestClient(create_app(snapshot))

    first = client.get("/depot/core/pkgs").json()
    assert first["total_count"] == 90
    assert first["range_start"] == 0
    assert first["range_end"] == 49
    assert len(first["data"]) == 50
    assert set(first["data"][0]) == {"origin", "name", "version", "release"}

    last = client.get("/depot/core/pkgs", params={"range": 50}).json()
    assert last["range_start"] == 50
    assert last["range_end"] == 89
    assert len(last["data"]) == 40

    beyond = client.get("/depot/core/pkgs", params={"range": 200}).json()
    assert beyond["data"] == []
    assert beyond["range_start"] == 200
    assert beyond["range_end"] == 200
    assert beyond["total_count"] == 90


def test_invalid_range_is_rejected() -> None:
    client = TestClient(create_app(build_snapshot()))
    assert client.get("/depot/core/pkgs", params={"range": "abc"}).status_code == 400
    assert client.get("/depot/core/pkgs", params={"range": "-1"}).status_code == 400
    assert client.get("/depot/core/pkgs", params={"range": ""}).status_code == 400
    assert client.get("/depot/core/pkgs", params={"range": "+5"}).status_code == 400


def test_package_versions() -> None:
    snapshot = build_snapshot()
    client = TestClient(create_app(snapshot))
    package_name, bundle = next(iter(snapshot.projects["core"].items()))

    response = client.get(f"/depot/pkgs/core/{package_name}/versions")
    assert response.json() == [version.model_dump(mode="json") for version in bundle.versions]
    assert client.get("/depot/pkgs/core/missing/versions").content == b""


def test_depot_invitations() -> None:
    client = TestClient(create_app(build_snapshot()))
    assert client.get("/depot/invitations").json() == []
