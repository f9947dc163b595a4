"""
Client for the spreadsheet-backed content store.

The store exposes one endpoint. Every call is a POST whose JSON body carries
an ``action`` discriminator plus the action's fields, e.g.
``{"action": "getPage", "slug": "about"}``. The response envelope holds the
resource under the action's resource name (``pages``, ``page``,
``navigation``, ``settings``), or the bundle itself for ``getAllData``.

Failures never leave this module: every public method logs the problem and
returns an empty value (``None``, ``[]`` or ``False``).
"""

import logging
import uuid
from typing import Any, Dict, List, Optional

import httpx

from pages.models import Page
from utils import utc_now, to_iso
from .models import NavItem, SiteSettings, SheetData

logger = logging.getLogger(__name__)


class SheetsClientException(Exception):
    """Transport, server or decoding failure talking to the store."""
    pass


class SheetsClient:
    """Typed wrapper around the store's single action-dispatch endpoint."""

    def __init__(
        self,
        api_url: str,
        api_key: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            api_url: Store endpoint URL
            api_key: Bearer token sent with every request
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.api_url = api_url
        self.api_key = api_key
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def _post(self, action: str, **fields: Any) -> Dict[str, Any]:
        """
        Dispatch one action and return the decoded envelope.

        Raises:
            SheetsClientException: on transport errors, non-2xx status,
                non-JSON bodies or an ``error`` field in the envelope
        """
        payload = {"action": action, **fields}
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.api_url, json=payload, headers=self.headers)
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            raise SheetsClientException(f"{action} request failed: {e}") from e
        except ValueError as e:
            raise SheetsClientException(f"{action} returned invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise SheetsClientException(f"{action} returned unexpected payload type {type(data).__name__}")
        if data.get("error"):
            raise SheetsClientException(f"{action} failed on the server: {data['error']}")
        return data

    # ─────────────────────────────────────────────────────────────────────
    # Pages
    # ─────────────────────────────────────────────────────────────────────

    async def get_pages(self) -> List[Page]:
        try:
            data = await self._post("getPages")
            return [Page.from_dict(p) for p in data.get("pages") or []]
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error fetching pages: {e}")
            return []

    async def get_page(self, slug: str) -> Optional[Page]:
        try:
            data = await self._post("getPage", slug=slug)
            page = data.get("page")
            return Page.from_dict(page) if page else None
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error fetching page {slug}: {e}")
            return None

    async def create_page(self, fields: Dict[str, Any], site_id: Optional[str] = None) -> Optional[Page]:
        """
        Create a page row.

        Assigns an id when ``fields`` has none and stamps createdAt/updatedAt.
        """
        now = to_iso(utc_now())
        page = {
            **fields,
            "id": fields.get("id") or f"page_{uuid.uuid4().hex[:12]}",
            "createdAt": now,
            "updatedAt": now,
        }
        extra = {"siteId": site_id} if site_id else {}
        try:
            data = await self._post("createPage", page=page, **extra)
            created = data.get("page")
            return Page.from_dict(created) if created else None
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error creating page {page['id']}: {e}")
            return None

    async def update_page(self, page_id: str, updates: Dict[str, Any]) -> Optional[Page]:
        """Apply a partial update. ``updatedAt`` is stamped on the way out."""
        updates = {**updates, "updatedAt": to_iso(utc_now())}
        try:
            data = await self._post("updatePage", id=page_id, updates=updates)
            updated = data.get("page")
            return Page.from_dict(updated) if updated else None
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error updating page {page_id}: {e}")
            return None

    async def delete_page(self, page_id: str, site_id: Optional[str] = None) -> bool:
        extra = {"siteId": site_id} if site_id else {}
        try:
            await self._post("deletePage", id=page_id, **extra)
            return True
        except SheetsClientException as e:
            logger.error(f"Error deleting page {page_id}: {e}")
            return False

    # ─────────────────────────────────────────────────────────────────────
    # Navigation
    # ─────────────────────────────────────────────────────────────────────

    async def get_navigation(self) -> List[NavItem]:
        try:
            data = await self._post("getNavigation")
            return [NavItem.from_dict(n) for n in data.get("navigation") or []]
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error fetching navigation: {e}")
            return []

    async def update_navigation(self, navigation: List[NavItem]) -> List[NavItem]:
        """Replace the navigation. Echoes the items sent when the store returns none."""
        try:
            data = await self._post(
                "updateNavigation",
                navigation=[item.to_dict() for item in navigation],
            )
            saved = data.get("navigation")
            return [NavItem.from_dict(n) for n in saved] if saved else navigation
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error updating navigation: {e}")
            return []

    # ─────────────────────────────────────────────────────────────────────
    # Settings
    # ─────────────────────────────────────────────────────────────────────

    async def get_settings(self) -> Optional[SiteSettings]:
        try:
            data = await self._post("getSettings")
            settings = data.get("settings")
            return SiteSettings.from_dict(settings) if settings else None
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error fetching settings: {e}")
            return None

    async def update_settings(self, settings: SiteSettings) -> Optional[SiteSettings]:
        try:
            data = await self._post("updateSettings", settings=settings.to_dict())
            saved = data.get("settings")
            return SiteSettings.from_dict(saved) if saved else None
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error updating settings: {e}")
            return None

    # ─────────────────────────────────────────────────────────────────────
    # Bulk
    # ─────────────────────────────────────────────────────────────────────

    async def get_all_data(self) -> Optional[SheetData]:
        try:
            data = await self._post("getAllData")
            return SheetData.from_dict(data)
        except (SheetsClientException, KeyError, TypeError, ValueError) as e:
            logger.error(f"Error fetching all data: {e}")
            return None

    async def sync_data(self, data: SheetData) -> bool:
        try:
            await self._post("syncData", data=data.to_dict())
            return True
        except SheetsClientException as e:
            logger.error(f"Error syncing data: {e}")
            return False
