from app.core.config import Settings


def test_health_reports_connected_database(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Service is healthy"
    assert body["data"]["database"] == "connected"
    assert body["data"]["version"] == "1.0.0"
    assert body["data"]["timestamp"]


def test_health_stays_200_when_database_is_down(make_client, tmp_path):
    settings = Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'dir' / 'test.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
    )
    with make_client(settings) as client:
        response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json()["data"]["database"] == "disconnected"


def test_unknown_route_uses_envelope(client):
    response = client.get("/api/v1/does-not-exist")
    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Not Found", "data": None}


def test_wrong_method_uses_envelope(client):
    response = client.delete("/api/v1/courts")
    assert response.status_code == 405
    assert response.json()["success"] is False


def test_cors_preflight(client):
    response = client.options(
        "/api/v1/courts",
        headers={"Origin": "http://foo.com", "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 200
    assert response.headers.get("access-control-allow-origin") == "http://foo.com"


class _UnreachableDatabase:
    async def ping(self):
        return False


def test_health_uses_injected_database(client):
    from app.core.database import get_database

    client.app.dependency_overrides[get_database] = lambda: _UnreachableDatabase()
    try:
        response = client.get("/api/v1/health")
    finally:
        client.app.dependency_overrides.clear()
    assert response.status_code == 200
    assert response.json()["data"]["database"] == "disconnected"
