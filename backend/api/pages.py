"""
REST API endpoints for pages.

Thin layer over PageManager: create, edit sections, publish, archive,
delete, history, revert and framework export.
"""

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import Optional, List, Dict, Any

from frameworks import FrameworkAdapter, FrameworkType, ExportConfig
from pages import PageManager, PageSection, PageNotFoundException, VersionNotFoundException
from services import get_page_manager


router = APIRouter(prefix="/api/pages", tags=["pages"])


# ─────────────────────────────────────────────────────────────────────────────
# Pydantic Models
# ─────────────────────────────────────────────────────────────────────────────

class PageCreate(BaseModel):
    title: str
    site_id: str
    template: Optional[str] = None  # "landing", "blog" or "product"


class SectionsUpdate(BaseModel):
    sections: List[Dict[str, Any]]


class RevertRequest(BaseModel):
    index: int


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────

@router.get("/")
async def list_pages(manager: PageManager = Depends(get_page_manager)):
    return {"pages": [p.to_dict() for p in manager.list_pages()]}


@router.post("/")
async def create_page(data: PageCreate, manager: PageManager = Depends(get_page_manager)):
    page = await manager.generate_page(data.title, data.site_id, data.template)
    return {"page": page.to_dict()}


@router.get("/{page_id}")
async def get_page(page_id: str, manager: PageManager = Depends(get_page_manager)):
    try:
        page = manager.get_page(page_id)
    except PageNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"page": page.to_dict()}


@router.put("/{page_id}/sections")
async def update_sections(
    page_id: str,
    data: SectionsUpdate,
    manager: PageManager = Depends(get_page_manager)
):
    """Replace all sections of a page. Records a new version."""
    try:
        sections = [PageSection.from_dict(s) for s in data.sections]
    except (KeyError, TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid section data: {e}")

    try:
        page = await manager.update_page_content(page_id, sections)
    except PageNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"page": page.to_dict()}


@router.post("/{page_id}/publish")
async def publish_page(page_id: str, manager: PageManager = Depends(get_page_manager)):
    try:
        page = await manager.publish_page(page_id)
    except PageNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"page": page.to_dict()}


@router.post("/{page_id}/archive")
async def archive_page(page_id: str, manager: PageManager = Depends(get_page_manager)):
    try:
        page = await manager.archive_page(page_id)
    except PageNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"page": page.to_dict()}


@router.delete("/{page_id}")
async def delete_page(page_id: str, site_id: str, manager: PageManager = Depends(get_page_manager)):
    await manager.delete_page(page_id, site_id)
    return {"success": True}


@router.get("/{page_id}/history")
async def get_history(page_id: str, manager: PageManager = Depends(get_page_manager)):
    history = manager.get_page_history(page_id)
    return {"versions": [p.to_dict() for p in history]}


@router.post("/{page_id}/revert")
async def revert_page(
    page_id: str,
    data: RevertRequest,
    manager: PageManager = Depends(get_page_manager)
):
    try:
        page = await manager.revert_to_version(page_id, data.index)
    except VersionNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"page": page.to_dict()}


@router.get("/{page_id}/export")
async def export_page(
    page_id: str,
    framework: str = "react",
    format: str = "tsx",
    manager: PageManager = Depends(get_page_manager)
):
    """Placeholder component source for the page in the chosen framework."""
    try:
        manager.get_page(page_id)
    except PageNotFoundException as e:
        raise HTTPException(status_code=404, detail=str(e))

    try:
        adapter = FrameworkAdapter(FrameworkType(framework))
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unsupported framework: {framework}")

    code = adapter.export_page_as_component(page_id, ExportConfig(format=format))
    return {"framework": framework, "format": format, "code": code}
