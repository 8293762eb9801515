"""API test fixtures: app factory + ASGI client with a scripted Gemini client.

Invariants:
    - Each test builds its own app from explicit Settings (no .env)
    - get_gemini_client overridden; the lifespan never runs under ASGITransport
"""

import pytest
from httpx import ASGITransport, AsyncClient

from motivation_api.api.dependencies import get_gemini_client
from motivation_api.main import create_app

from tests.api.helpers import make_settings
from tests.mock_gemini import GeminiScript, RecordingSleep, make_client


@pytest.fixture
def script():
    return GeminiScript([])


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def app(script, sleep):
    app = create_app(make_settings())
    app.dependency_overrides[get_gemini_client] = lambda: make_client(script, sleep=sleep)
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
