"""Tests for the REST API with stubbed store and completion clients."""
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

import services
from ai import CompletionClient, ContentGenerator, RateLimiter, GenerationError
from main import app
from pages import PageManager
from sheets import SheetsClient, SiteSettings, NavItem


class TestPagesAPI:

    @pytest.fixture
    def store(self):
        store = AsyncMock(spec=SheetsClient)
        store.create_page.return_value = None
        store.update_page.return_value = None
        store.delete_page.return_value = True
        return store

    @pytest.fixture
    def completion(self):
        completion = AsyncMock(spec=CompletionClient)
        completion.complete.return_value = "Fresh coffee\n\n## Beans\n\n**Roast** matters."
        return completion

    @pytest.fixture
    def client(self, store, completion):
        services.initialize_services(
            client=store,
            manager=PageManager(store),
            generator=ContentGenerator(completion, RateLimiter(limit=1)),
        )
        yield TestClient(app)
        services.sheets_client = None
        services.page_manager = None
        services.content_generator = None

    def create_page(self, client, template="landing"):
        response = client.post("/api/pages/", json={"title": "My Page", "site_id": "site1", "template": template})
        assert response.status_code == 200
        return response.json()["page"]

    def test_health(self, client):
        assert client.get("/health").json()["status"] == "healthy"

    def test_create_and_get(self, client):
        page = self.create_page(client)
        assert page["slug"] == "my-page"
        assert [s["id"] for s in page["sections"]] == ["hero", "features", "cta"]

        fetched = client.get(f"/api/pages/{page['id']}").json()["page"]
        assert fetched == page
        assert len(client.get("/api/pages/").json()["pages"]) == 1

    def test_get_missing_page(self, client):
        assert client.get("/api/pages/nope").status_code == 404

    def test_update_sections_and_history(self, client):
        page = self.create_page(client)
        sections = [{
            "id": "main",
            "name": "Main",
            "order": 0,
            "visible": True,
            "components": [{"id": "h1", "type": "heading", "props": {"text": "Hi", "level": 1}}],
        }]

        response = client.put(f"/api/pages/{page['id']}/sections", json={"sections": sections})

        assert response.status_code == 200
        assert response.json()["page"]["sections"][0]["components"][0]["props"] == {"text": "Hi", "level": 1}
        versions = client.get(f"/api/pages/{page['id']}/history").json()["versions"]
        assert len(versions) == 2

    def test_update_sections_invalid(self, client):
        page = self.create_page(client)
        bad = [{"id": "main", "components": [{"id": "x", "type": "marquee"}]}]
        assert client.put(f"/api/pages/{page['id']}/sections", json={"sections": bad}).status_code == 422

    def test_update_sections_missing_page(self, client):
        assert client.put("/api/pages/nope/sections", json={"sections": []}).status_code == 404

    def test_publish_archive_delete(self, client, store):
        page = self.create_page(client)

        assert client.post(f"/api/pages/{page['id']}/publish").json()["page"]["visibility"] == "published"
        assert client.post(f"/api/pages/{page['id']}/archive").json()["page"]["visibility"] == "archived"

        response = client.delete(f"/api/pages/{page['id']}", params={"site_id": "site1"})
        assert response.json() == {"success": True}
        store.delete_page.assert_awaited_once_with(page["id"], site_id="site1")
        assert client.get(f"/api/pages/{page['id']}").status_code == 404

    def test_revert(self, client):
        page = self.create_page(client)
        client.put(f"/api/pages/{page['id']}/sections", json={"sections": []})

        response = client.post(f"/api/pages/{page['id']}/revert", json={"index": 0})

        assert response.status_code == 200
        assert [s["id"] for s in response.json()["page"]["sections"]] == ["hero", "features", "cta"]
        assert client.post(f"/api/pages/{page['id']}/revert", json={"index": 9}).status_code == 404

    def test_export(self, client):
        page = self.create_page(client)

        response = client.get(f"/api/pages/{page['id']}/export", params={"framework": "next"})

        assert response.status_code == 200
        assert "NextPage" in response.json()["code"]
        assert client.get(f"/api/pages/{page['id']}/export", params={"framework": "svelte"}).status_code == 400

    def test_generate_content(self, client):
        response = client.post("/api/content/generate", json={"title": "Coffee", "tone": "friendly"})

        assert response.status_code == 200
        content = response.json()["content"]
        assert content["description"] == "Fresh coffee"
        assert content["seoScore"] == 70

        # Limiter allows one request
        assert client.post("/api/content/generate", json={"title": "Again"}).status_code == 429

    def test_generate_content_invalid_length(self, client):
        assert client.post("/api/content/generate", json={"title": "x", "length": "epic"}).status_code == 422

    def test_generate_content_service_failure(self, client, completion):
        completion.complete.side_effect = GenerationError("down")
        assert client.post("/api/content/generate", json={"title": "Coffee"}).status_code == 502

    def test_generate_metadata_parse_failure(self, client):
        response = client.post("/api/content/metadata", json={"content": "text", "title": "Coffee"})
        assert response.status_code == 502

    def test_site_settings(self, client, store):
        store.get_settings.return_value = SiteSettings()
        assert client.get("/api/site/settings").json()["settings"]["theme"]["name"] == "default"

        store.get_settings.return_value = None
        assert client.get("/api/site/settings").status_code == 404

    def test_site_navigation(self, client, store):
        store.update_navigation.return_value = [NavItem(id="1", label="Home", href="/")]
        response = client.put("/api/site/navigation", json={"navigation": [{"id": "1", "label": "Home", "href": "/"}]})
        assert response.json()["navigation"] == [{"id": "1", "label": "Home", "href": "/"}]

    def test_site_sync_failure(self, client, store):
        store.sync_data.return_value = False
        assert client.post("/api/site/sync", json={}).status_code == 502
