"""Spreadsheet-backed content store client"""
from .client import SheetsClient, SheetsClientException
from .models import NavItem, SiteSettings, SheetData

__all__ = ["SheetsClient", "SheetsClientException", "NavItem", "SiteSettings", "SheetData"]
