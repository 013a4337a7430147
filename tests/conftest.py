from pathlib import Path

import httpx
import pytest
import respx
from httpx import ASGITransport, Response

WEBHOOK_URL = "https://hooks.test/webhook/travel-hub-search"
SITE_DIR = Path(__file__).resolve().parent.parent / "site"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("WEBHOOK_URL", WEBHOOK_URL)
    monkeypatch.setenv("SITE_DIR", str(SITE_DIR))
    monkeypatch.setenv("SEARCH_DELAY", "0")
    monkeypatch.setenv("DEFAULT_CURRENCY", "INR")


@pytest.fixture
def webhook():
    """Every beacon lands here; tests can swap the response via ``webhook.routes["webhook"]``."""
    with respx.mock(assert_all_called=False) as router:
        router.post(WEBHOOK_URL, name="webhook").mock(return_value=Response(200, json={"ok": True}))
        yield router


@pytest.fixture
async def client(mock_env, webhook):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
