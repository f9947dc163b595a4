"""
Process-wide service instances.

The app creates one of each at startup; routers reach them through the
getters below so tests can install fakes with initialize_services().
"""
from typing import Optional

from fastapi import HTTPException

from ai import CompletionClient, ContentGenerator, RateLimiter
from config import SHEETS_API_URL, SHEETS_API_KEY
from pages import PageManager
from sheets import SheetsClient

sheets_client: Optional[SheetsClient] = None
page_manager: Optional[PageManager] = None
content_generator: Optional[ContentGenerator] = None


def initialize_services(
    client: Optional[SheetsClient] = None,
    manager: Optional[PageManager] = None,
    generator: Optional[ContentGenerator] = None,
) -> None:
    """Create (or install) the shared store client, page manager and generator."""
    global sheets_client, page_manager, content_generator

    sheets_client = client or SheetsClient(SHEETS_API_URL, SHEETS_API_KEY)
    page_manager = manager or PageManager(sheets_client)
    content_generator = generator or ContentGenerator(CompletionClient(), RateLimiter())


def get_sheets_client() -> SheetsClient:
    if sheets_client is None:
        raise HTTPException(status_code=503, detail="Sheets client not initialized")
    return sheets_client


def get_page_manager() -> PageManager:
    if page_manager is None:
        raise HTTPException(status_code=503, detail="Page manager not initialized")
    return page_manager


def get_content_generator() -> ContentGenerator:
    if content_generator is None:
        raise HTTPException(status_code=503, detail="Content generator not initialized")
    return content_generator
