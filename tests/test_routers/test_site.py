"""Integration tests for the page and static asset routes."""

from httpx import AsyncClient


async def test_root_serves_index_without_cache(client: AsyncClient):
    resp = await client.get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert resp.headers["cache-control"] == "no-cache, no-store, must-revalidate"
    assert "Popular stays" in resp.text
    assert "travelhub_session" in resp.cookies


async def test_assets_are_cacheable(client: AsyncClient):
    resp = await client.get("/css/site.css")

    assert resp.status_code == 200
    assert resp.headers["cache-control"] == "public, max-age=86400"


async def test_missing_page_is_404(client: AsyncClient):
    resp = await client.get("/missing.html")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Page not found: missing.html"


async def test_prices_rendered_in_default_currency(client: AsyncClient):
    resp = await client.get("/stays.html")
    assert "₹7896" in resp.text  # 95 USD


async def test_currency_choice_survives_reload(client: AsyncClient):
    await client.get("/")
    resp = await client.put("/api/currency", json={"currency": "USD"})
    assert resp.status_code == 200

    page = await client.get("/stays.html")
    assert "$95" in page.text
    assert "Currency changed to USD" in page.text


async def test_filter_query_on_page(client: AsyncClient):
    resp = await client.get("/stays.html", params=[("filter", "mountain"), ("sort", "rating")])
    assert resp.status_code == 200
    assert 'id="alpine"' in resp.text


async def test_unknown_sort_on_page(client: AsyncClient):
    resp = await client.get("/stays.html", params={"sort": "distance"})
    assert resp.status_code == 400


async def test_null_byte_path_is_404(client: AsyncClient):
    resp = await client.get("/a%00b.html")
    assert resp.status_code == 404
