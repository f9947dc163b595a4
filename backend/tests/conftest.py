import pytest
import sys
import os
from unittest.mock import AsyncMock

# Add the parent directory to Python path so we can import backend modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pages import PageManager  # noqa: E402
from sheets import SheetsClient  # noqa: E402


@pytest.fixture
def sheets_client():
    """Store client double: every call succeeds without touching the network"""
    client = AsyncMock(spec=SheetsClient)
    client.create_page.return_value = None
    client.update_page.return_value = None
    client.delete_page.return_value = True
    return client


@pytest.fixture
def page_manager(sheets_client):
    return PageManager(sheets_client)
