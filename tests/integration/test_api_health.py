from fastapi.testclient import TestClient

from builder_spoof.api.app import create_app
from tests.support.snapshot_helpers import build_snapshot, small_settings


def test_health_endpoint() -> None:
    client = TestClient(create_app(build_snapshot()))
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_create_app_generates_snapshot_from_settings() -> None:
    app = create_app(settings=small_settings(seed=99))
    assert app.state.snapshot.origins[0].name == "core"
    assert app.state.router.routes
