from httpx import ASGITransport, AsyncClient

from folio.api.main import create_application
from folio.shared.db import Database


async def test_health(client):
    response = await client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "folio"


async def test_live(client):
    response = await client.get("/live")
    assert response.json() == {"status": "alive"}


async def test_ready(client):
    response = await client.get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


async def test_not_ready_when_database_is_unreachable(app_settings, tmp_path):
    broken = Database(f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'folio.db'}")
    app = create_application(app_settings, database=broken)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            response = await c.get("/ready")
    finally:
        await broken.dispose()

    assert response.status_code == 503
    assert response.json() == {"status": "unavailable"}


async def test_unknown_route(client):
    response = await client.get("/api/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}
