"""
Page lifecycle manager.

Owns the in-process view of every page and a bounded history of snapshots
per page. Local state is authoritative: each mutation is applied locally
first and then mirrored to the sheet store, and a failed mirror does not
roll anything back. History lives only in memory and is lost on restart.

Lifecycle: draft -> published -> archived. Deleting drops the page and its
history.
"""

import logging
import re
import time
import uuid
from typing import Dict, List, Optional, TYPE_CHECKING

from config import MAX_PAGE_VERSIONS
from utils import utc_now
from .models import Page, PageMetadata, PageSection, SEOMetadata, Visibility

if TYPE_CHECKING:
    from sheets import SheetsClient

logger = logging.getLogger(__name__)


# Section layout for each page template: (section id, display name)
PAGE_TEMPLATES = {
    "landing": [
        ("hero", "Hero Section"),
        ("features", "Features"),
        ("cta", "Call to Action"),
    ],
    "blog": [
        ("header", "Header"),
        ("content", "Content"),
        ("sidebar", "Sidebar"),
    ],
    "product": [
        ("showcase", "Product Showcase"),
        ("features", "Features"),
        ("pricing", "Pricing"),
    ],
}


class PageManagerException(Exception):
    """Base exception for page lifecycle operations"""
    pass


class PageNotFoundException(PageManagerException):
    """Raised when a page id is not known locally"""
    pass


class VersionNotFoundException(PageManagerException):
    """Raised when a history index does not exist"""
    pass


class PageManager:
    """
    Create, edit, publish, delete and revert pages.

    Two concurrent updates to the same page are last-write-wins. Ordering of
    versions comes from history append order, never from timestamps.
    """

    def __init__(
        self,
        sheets_client: 'SheetsClient',
        pages: Optional[Dict[str, Page]] = None,
        history: Optional[Dict[str, List[Page]]] = None,
        max_versions: int = MAX_PAGE_VERSIONS,
    ):
        """
        Args:
            sheets_client: Store that mutations are mirrored to
            pages: Live page map (created if not given)
            history: Snapshot map, oldest first per page (created if not given)
            max_versions: Snapshots kept per page
        """
        self.sheets_client = sheets_client
        self.pages: Dict[str, Page] = pages if pages is not None else {}
        self.page_history: Dict[str, List[Page]] = history if history is not None else {}
        self.max_versions = max_versions

    @staticmethod
    def generate_slug(title: str) -> str:
        """
        Convert a page title to a URL slug.

        "Hello, World!" -> "hello-world"
        """
        slug = title.lower().strip()
        slug = re.sub(r'[^\w\s-]', '', slug)
        slug = re.sub(r'\s+', '-', slug)
        slug = re.sub(r'-+', '-', slug)
        return slug

    @staticmethod
    def get_template_structure(template_name: Optional[str]) -> List[PageSection]:
        """Fresh empty sections for a template. Unknown names give no sections."""
        layout = PAGE_TEMPLATES.get(template_name or "", [])
        return [
            PageSection(id=section_id, name=name, components=[], order=order, visible=True)
            for order, (section_id, name) in enumerate(layout)
        ]

    @staticmethod
    def _new_page_id() -> str:
        return f"page_{int(time.time() * 1000)}_{uuid.uuid4().hex[:12]}"

    @staticmethod
    def _touch(page: Page) -> None:
        """Refresh updated_at without letting it move backwards."""
        page.metadata.updated_at = max(utc_now(), page.metadata.updated_at)

    def _record_version(self, page: Page) -> None:
        history = self.page_history.setdefault(page.id, [])
        history.append(page.snapshot())
        if len(history) > self.max_versions:
            del history[:-self.max_versions]

    def _require_page(self, page_id: str) -> Page:
        page = self.pages.get(page_id)
        if page is None:
            raise PageNotFoundException(f"Page not found: {page_id}")
        return page

    def get_page(self, page_id: str) -> Page:
        return self._require_page(page_id)

    def list_pages(self) -> List[Page]:
        return list(self.pages.values())

    async def generate_page(self, title: str, site_id: str, template: Optional[str] = None) -> Page:
        """
        Create a draft page, optionally laid out from a template.

        Args:
            title: Page title, also used for the slug and SEO title
            site_id: Site the page belongs to in the store
            template: "landing", "blog" or "product"; anything else means no sections

        Returns:
            The new page (version 0 of its history)
        """
        now = utc_now()
        page = Page(
            id=self._new_page_id(),
            title=title,
            slug=self.generate_slug(title),
            description="",
            sections=self.get_template_structure(template),
            metadata=PageMetadata(created_at=now, updated_at=now, author="system"),
            seo=SEOMetadata(title=title, description="", keywords=[]),
            visibility=Visibility.DRAFT,
        )

        self.pages[page.id] = page
        self.page_history[page.id] = [page.snapshot()]
        logger.info(f"Created page {page.id} ({page.slug}) from template {template or 'none'}")

        await self.sheets_client.create_page(page.to_dict(), site_id=site_id)
        return page

    async def update_page_content(self, page_id: str, sections: List[PageSection]) -> Page:
        """
        Replace a page's sections wholesale and record the result as a new version.

        Raises:
            PageNotFoundException: If the page is unknown
        """
        page = self._require_page(page_id)

        page.sections = list(sections)
        self._touch(page)
        self._record_version(page)

        await self.sheets_client.update_page(page_id, {
            "sections": [s.to_dict() for s in page.sections],
            "metadata": page.metadata.to_dict(),
        })
        return page

    async def _set_visibility(self, page_id: str, visibility: Visibility) -> Page:
        page = self._require_page(page_id)

        page.visibility = visibility
        self._touch(page)
        logger.info(f"Page {page_id} is now {visibility.value}")

        await self.sheets_client.update_page(page_id, {
            "visibility": visibility.value,
            "metadata": page.metadata.to_dict(),
        })
        return page

    async def publish_page(self, page_id: str) -> Page:
        """Mark a page published. Section content is not checked."""
        return await self._set_visibility(page_id, Visibility.PUBLISHED)

    async def archive_page(self, page_id: str) -> Page:
        return await self._set_visibility(page_id, Visibility.ARCHIVED)

    async def delete_page(self, page_id: str, site_id: str) -> None:
        """Drop a page and its history. Unknown ids are ignored locally."""
        self.pages.pop(page_id, None)
        self.page_history.pop(page_id, None)
        logger.info(f"Deleted page {page_id}")

        await self.sheets_client.delete_page(page_id, site_id=site_id)

    def get_page_history(self, page_id: str) -> List[Page]:
        """Snapshots oldest to newest, or an empty list for unknown pages."""
        return list(self.page_history.get(page_id, []))

    async def revert_to_version(self, page_id: str, version_index: int) -> Page:
        """
        Make a stored snapshot the live page again.

        The revert is itself recorded as the newest version; history is
        never cut back. The live page keeps its current visibility.

        Raises:
            VersionNotFoundException: If there is no history or the index is out of range
        """
        history = self.page_history.get(page_id)
        if not history or not 0 <= version_index < len(history):
            raise VersionNotFoundException(f"Version {version_index} not found for page {page_id}")

        version = history[version_index].snapshot()
        current = self.pages.get(page_id)
        if current is not None:
            version.visibility = current.visibility
            version.metadata.updated_at = current.metadata.updated_at
        self._touch(version)

        self.pages[page_id] = version
        self._record_version(version)
        logger.info(f"Reverted page {page_id} to version {version_index}")

        await self.sheets_client.update_page(page_id, version.to_dict())
        return version
