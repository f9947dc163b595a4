"""Tests for the spreadsheet store client against a mocked endpoint."""
import json
import logging

import httpx
import pytest

from pages import Visibility
from sheets import SheetsClient, NavItem, SiteSettings, SheetData

API_URL = "https://sheets.test/exec"

PAGE = {
    "id": "page_1",
    "title": "Home",
    "slug": "home",
    "description": "",
    "sections": [],
    "metadata": {"createdAt": "2026-01-01T00:00:00.000Z", "updatedAt": "2026-01-01T00:00:00.000Z"},
    "seo": {"title": "Home", "description": "", "keywords": []},
    "visibility": "published",
}


class Recorder:
    """MockTransport handler that records request bodies and replays canned responses"""

    def __init__(self, response=None, status_code=200, raise_error=None):
        self.requests = []
        self.response = response if response is not None else {}
        self.status_code = status_code
        self.raise_error = raise_error

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error:
            raise self.raise_error
        if isinstance(self.response, str):
            return httpx.Response(self.status_code, text=self.response)
        return httpx.Response(self.status_code, json=self.response)

    @property
    def last_body(self):
        return json.loads(self.requests[-1].content)


def make_client(recorder: Recorder) -> SheetsClient:
    return SheetsClient(API_URL, "secret", transport=httpx.MockTransport(recorder))


class TestProtocol:
    """Every action is a POST to the single endpoint with an action field"""

    @pytest.mark.asyncio
    async def test_request_shape(self):
        recorder = Recorder({"pages": []})
        await make_client(recorder).get_pages()

        request = recorder.requests[0]
        assert request.method == "POST"
        assert str(request.url) == API_URL
        assert request.headers["Authorization"] == "Bearer secret"
        assert request.headers["Content-Type"] == "application/json"
        assert recorder.last_body == {"action": "getPages"}

    @pytest.mark.asyncio
    async def test_get_page_sends_slug(self):
        recorder = Recorder({"page": PAGE})
        page = await make_client(recorder).get_page("home")

        assert recorder.last_body == {"action": "getPage", "slug": "home"}
        assert page.id == "page_1"
        assert page.visibility == Visibility.PUBLISHED


class TestPages:

    @pytest.mark.asyncio
    async def test_get_pages(self):
        pages = await make_client(Recorder({"pages": [PAGE, {**PAGE, "id": "page_2"}]})).get_pages()
        assert [p.id for p in pages] == ["page_1", "page_2"]

    @pytest.mark.asyncio
    async def test_get_page_missing(self):
        assert await make_client(Recorder({})).get_page("nope") is None

    @pytest.mark.asyncio
    async def test_create_page_assigns_id_and_timestamps(self):
        recorder = Recorder({"page": PAGE})
        fields = {k: v for k, v in PAGE.items() if k != "id"}

        created = await make_client(recorder).create_page(fields, site_id="site1")

        body = recorder.last_body
        assert body["action"] == "createPage"
        assert body["siteId"] == "site1"
        assert body["page"]["id"].startswith("page_")
        assert body["page"]["createdAt"] == body["page"]["updatedAt"]
        assert body["page"]["createdAt"].endswith("Z")
        assert created.id == "page_1"

    @pytest.mark.asyncio
    async def test_create_page_keeps_existing_id(self):
        recorder = Recorder({"page": PAGE})
        await make_client(recorder).create_page({**PAGE, "id": "page_local"})
        assert recorder.last_body["page"]["id"] == "page_local"
        assert "siteId" not in recorder.last_body

    @pytest.mark.asyncio
    async def test_update_page_stamps_updated_at(self):
        recorder = Recorder({"page": PAGE})
        await make_client(recorder).update_page("page_1", {"visibility": "published"})

        body = recorder.last_body
        assert body["action"] == "updatePage"
        assert body["id"] == "page_1"
        assert body["updates"]["visibility"] == "published"
        assert "updatedAt" in body["updates"]

    @pytest.mark.asyncio
    async def test_delete_page(self):
        recorder = Recorder({"success": True})
        assert await make_client(recorder).delete_page("page_1", site_id="site1") is True
        assert recorder.last_body == {"action": "deletePage", "id": "page_1", "siteId": "site1"}


class TestSiteData:

    @pytest.mark.asyncio
    async def test_navigation_round_trip(self):
        nav = [{"id": "1", "label": "Home", "href": "/", "children": [{"id": "2", "label": "Team", "href": "/team"}]}]
        items = await make_client(Recorder({"navigation": nav})).get_navigation()
        assert items[0].children[0].label == "Team"

    @pytest.mark.asyncio
    async def test_update_navigation_echoes_input_when_store_is_silent(self):
        recorder = Recorder({"success": True})
        items = [NavItem(id="1", label="Home", href="/")]

        saved = await make_client(recorder).update_navigation(items)

        assert saved == items
        assert recorder.last_body["navigation"] == [{"id": "1", "label": "Home", "href": "/"}]

    @pytest.mark.asyncio
    async def test_settings(self):
        recorder = Recorder({"settings": {"theme": {"name": "ocean", "mode": "dark"}}})
        client = make_client(recorder)

        settings = await client.get_settings()
        assert settings.theme.name == "ocean"

        await client.update_settings(SiteSettings())
        assert recorder.last_body["action"] == "updateSettings"
        assert recorder.last_body["settings"]["fonts"]["mono"] == "JetBrains Mono"

    @pytest.mark.asyncio
    async def test_get_all_data_reads_bundle_directly(self):
        bundle = {"pages": [PAGE], "navigation": [], "settings": {}}
        data = await make_client(Recorder(bundle)).get_all_data()
        assert isinstance(data, SheetData)
        assert data.pages[0].slug == "home"

    @pytest.mark.asyncio
    async def test_sync_data(self):
        recorder = Recorder({"success": True})
        assert await make_client(recorder).sync_data(SheetData()) is True
        assert recorder.last_body["action"] == "syncData"
        assert set(recorder.last_body["data"]) == {"pages", "navigation", "settings"}


class TestFailures:
    """Failures come back as empty values and a log line, never as exceptions"""

    @pytest.mark.asyncio
    async def test_server_error_status(self, caplog):
        client = make_client(Recorder({"error": "boom"}, status_code=500))
        with caplog.at_level(logging.ERROR, logger="sheets.client"):
            assert await client.get_pages() == []
        assert "Error fetching pages" in caplog.text

    @pytest.mark.asyncio
    async def test_transport_error(self):
        client = make_client(Recorder(raise_error=httpx.ConnectError("unreachable")))
        assert await client.get_page("home") is None
        assert await client.create_page({"title": "x"}) is None
        assert await client.update_page("page_1", {}) is None
        assert await client.delete_page("page_1") is False
        assert await client.get_navigation() == []
        assert await client.update_navigation([NavItem(id="1", label="a", href="/")]) == []
        assert await client.get_settings() is None
        assert await client.update_settings(SiteSettings()) is None
        assert await client.get_all_data() is None
        assert await client.sync_data(SheetData()) is False

    @pytest.mark.asyncio
    async def test_error_envelope(self):
        client = make_client(Recorder({"error": "Unauthorized"}))
        assert await client.delete_page("page_1") is False

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        client = make_client(Recorder("<html>Script error</html>"))
        assert await client.get_settings() is None

    @pytest.mark.asyncio
    async def test_undecodable_page(self):
        client = make_client(Recorder({"pages": [{**PAGE, "visibility": "hidden"}]}))
        assert await client.get_pages() == []
