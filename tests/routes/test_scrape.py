from unittest.mock import AsyncMock

from app.parsers import ExtractionResult, ScrapedData


def test_scrape_requires_url(api_client):
    response = api_client.post("/api/scrape", json={})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "URL is required", "code": "bad_request"}


def test_scrape_rejects_non_http_url(api_client):
    response = api_client.post("/api/scrape", json={"url": "javascript:alert(1)"})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid URL"


def test_scrape_success(api_client, monkeypatch):
    url = "https://www.musinsa.com/app/goods/789"
    data = ScrapedData(title="후드 집업", image="https://image.msscdn.net/h.jpg", price="59000", site_name="Musinsa", url=url)
    extract = AsyncMock(return_value=ExtractionResult(success=True, data=data))
    monkeypatch.setattr("routes.scrape.extract", extract)

    response = api_client.post("/api/scrape", json={"url": url})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["data"] == {
        "title": "후드 집업",
        "image": "https://image.msscdn.net/h.jpg",
        "price": "59000",
        "description": "",
        "siteName": "Musinsa",
        "url": url,
    }
    extract.assert_awaited_once_with(url)


def test_scrape_failure_is_structured_and_keeps_url(api_client, monkeypatch):
    url = "https://ohou.se/productions/1/selling"
    fallback = ScrapedData(title="selling", site_name="ohou.se", url=url)
    monkeypatch.setattr(
        "routes.scrape.extract",
        AsyncMock(return_value=ExtractionResult(success=False, data=fallback, error="Failed to fetch external URL")),
    )

    response = api_client.post("/api/scrape", json={"url": url})

    assert response.status_code == 502
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Failed to fetch external URL"
    assert body["data"]["url"] == url
