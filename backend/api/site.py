"""
REST API endpoints for site-wide data: navigation, settings and bulk
export/import. These go straight to the sheet store.
"""

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import List, Dict, Any

from sheets import SheetsClient, NavItem, SiteSettings, SheetData
from services import get_sheets_client


router = APIRouter(prefix="/api/site", tags=["site"])


class NavigationUpdate(BaseModel):
    navigation: List[Dict[str, Any]]


class SettingsUpdate(BaseModel):
    settings: Dict[str, Any]


class SyncRequest(BaseModel):
    pages: List[Dict[str, Any]] = []
    navigation: List[Dict[str, Any]] = []
    settings: Dict[str, Any] = {}


@router.get("/navigation")
async def get_navigation(client: SheetsClient = Depends(get_sheets_client)):
    items = await client.get_navigation()
    return {"navigation": [i.to_dict() for i in items]}


@router.put("/navigation")
async def update_navigation(data: NavigationUpdate, client: SheetsClient = Depends(get_sheets_client)):
    try:
        items = [NavItem.from_dict(n) for n in data.navigation]
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid navigation data: {e}")

    saved = await client.update_navigation(items)
    return {"navigation": [i.to_dict() for i in saved]}


@router.get("/settings")
async def get_settings(client: SheetsClient = Depends(get_sheets_client)):
    settings = await client.get_settings()
    if settings is None:
        raise HTTPException(status_code=404, detail="Settings not available")
    return {"settings": settings.to_dict()}


@router.put("/settings")
async def update_settings(data: SettingsUpdate, client: SheetsClient = Depends(get_sheets_client)):
    saved = await client.update_settings(SiteSettings.from_dict(data.settings))
    if saved is None:
        raise HTTPException(status_code=502, detail="Failed to update settings")
    return {"settings": saved.to_dict()}


@router.get("/data")
async def get_all_data(client: SheetsClient = Depends(get_sheets_client)):
    data = await client.get_all_data()
    if data is None:
        raise HTTPException(status_code=502, detail="Failed to fetch site data")
    return data.to_dict()


@router.post("/sync")
async def sync_data(data: SyncRequest, client: SheetsClient = Depends(get_sheets_client)):
    try:
        bundle = SheetData.from_dict(data.model_dump())
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid site data: {e}")

    if not await client.sync_data(bundle):
        raise HTTPException(status_code=502, detail="Failed to sync site data")
    return {"success": True}
