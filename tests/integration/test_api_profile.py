from fastapi.testclient import TestClient

from builder_spoof.api.app import create_app
from tests.support.snapshot_helpers import build_snapshot


def test_profile_and_authenticate() -> None:
    snapshot = build_snapshot()
    client = TestClient(create_app(snapshot))

    profile = client.get("/profile").json()
    assert profile["id"] == snapshot.user.id
    assert profile["email"] == snapshot.user.email

    auth = client.get("/authenticate").json()
    assert auth["token"] == snapshot.authentication.token
    assert auth["flags"] == 0


def test_profile_update_is_echoed_not_stored() -> None:
    snapshot = build_snapshot()
    client = TestClient(create_app(snapshot))

    updated = client.put("/profile", json={"email": "new@example.com"})
    assert updated.status_code == 200
    assert updated.json()["email"] == "new@example.com"
    assert updated.json()["id"] == snapshot.user.id

    assert client.get("/profile").json()["email"] == snapshot.user.email


def test_profile_update_requires_object() -> None:
    client = TestClient(create_app(build_snapshot()))
    assert client.put("/profile", json=["email"]).status_code == 400
    assert client.put("/profile").status_code == 400
