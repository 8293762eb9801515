"""Application wiring: health probe, CORS allow-list and static file serving.

Tests cover:
    - GET /api/health returns 200 without touching Gemini
    - Preflight from an allowed origin succeeds, GET only
    - Preflight from a disallowed origin is rejected with 400
    - Simple GET from a disallowed origin gets no Access-Control-Allow-Origin
    - SERVE_STATIC mounts the static directory at / without shadowing /api
"""

from httpx import ASGITransport, AsyncClient

from motivation_api.main import create_app

from tests.api.helpers import make_settings
from tests.mock_gemini import quote_response

ALLOWED = "http://localhost:5500"
DISALLOWED = "https://evil.example"


async def test_health_check(client, script):
    response = await client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "motivation-api"
    assert script.calls == 0


# ─── CORS ────────────────────────────────────────────────────────

async def test_preflight_from_allowed_origin(client):
    response = await client.options(
        "/api/motivation",
        headers={"Origin": ALLOWED, "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == ALLOWED
    assert "GET" in response.headers["access-control-allow-methods"]


async def test_preflight_from_disallowed_origin_rejected(client):
    response = await client.options(
        "/api/motivation",
        headers={"Origin": DISALLOWED, "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


async def test_preflight_for_post_rejected(client):
    response = await client.options(
        "/api/motivation",
        headers={"Origin": ALLOWED, "Access-Control-Request-Method": "POST"},
    )
    assert response.status_code == 400


async def test_simple_get_from_disallowed_origin_has_no_cors_header(client, script):
    script.steps.append(quote_response())
    response = await client.get("/api/motivation", headers={"Origin": DISALLOWED})
    assert "access-control-allow-origin" not in response.headers


async def test_simple_get_from_allowed_origin_has_cors_header(client, script):
    script.steps.append(quote_response())
    response = await client.get("/api/motivation", headers={"Origin": ALLOWED})
    assert response.headers["access-control-allow-origin"] == ALLOWED


async def test_cors_origins_come_from_settings():
    app = create_app(make_settings(cors_origins=["https://custom.example"]))
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        allowed = await c.options(
            "/api/health",
            headers={
                "Origin": "https://custom.example",
                "Access-Control-Request-Method": "GET",
            },
        )
        default_origin = await c.options(
            "/api/health",
            headers={"Origin": ALLOWED, "Access-Control-Request-Method": "GET"},
        )
    assert allowed.status_code == 200
    assert default_origin.status_code == 400


# ─── Static files ────────────────────────────────────────────────

async def test_static_files_served_when_enabled(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Motivation</h1>")
    (tmp_path / "motivation.css").write_text("body { color: teal; }")
    app = create_app(make_settings(serve_static=True, static_dir=str(tmp_path)))

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        index = await c.get("/")
        css = await c.get("/motivation.css")
        health = await c.get("/api/health")

    assert index.status_code == 200
    assert "<h1>Motivation</h1>" in index.text
    assert css.status_code == 200
    assert health.json()["status"] == "healthy"


async def test_static_files_not_served_when_disabled(tmp_path):
    (tmp_path / "index.html").write_text("<h1>Motivation</h1>")
    app = create_app(make_settings(serve_static=False, static_dir=str(tmp_path)))

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        response = await c.get("/")

    assert response.status_code == 404


async def test_missing_static_dir_is_skipped(tmp_path):
    app = create_app(
        make_settings(serve_static=True, static_dir=str(tmp_path / "nope")),
    )
    assert not any(getattr(r, "name", None) == "static" for r in app.routes)
