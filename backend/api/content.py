"""
REST API endpoints for AI content drafting.
"""

from fastapi import APIRouter, HTTPException, Depends
from pydantic import BaseModel
from typing import Optional, List

from ai import (
    ContentGenerator,
    GenerationRequest,
    RateLimitExceeded,
    GenerationError,
    ParseError,
)
from services import get_content_generator


router = APIRouter(prefix="/api/content", tags=["content"])


class GenerateRequest(BaseModel):
    title: str
    topic: Optional[str] = None
    keywords: List[str] = []
    tone: Optional[str] = None
    length: Optional[str] = None
    format: Optional[str] = None


class MetadataRequest(BaseModel):
    content: str
    title: str


@router.post("/generate")
async def generate_content(
    data: GenerateRequest,
    generator: ContentGenerator = Depends(get_content_generator)
):
    try:
        request = GenerationRequest(**data.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    try:
        result = await generator.generate_content(request)
    except RateLimitExceeded as e:
        raise HTTPException(status_code=429, detail=str(e))
    except GenerationError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"content": result.to_dict()}


@router.post("/metadata")
async def generate_metadata(
    data: MetadataRequest,
    generator: ContentGenerator = Depends(get_content_generator)
):
    try:
        metadata = await generator.generate_metadata(data.content, data.title)
    except (GenerationError, ParseError) as e:
        raise HTTPException(status_code=502, detail=str(e))
    return {"metadata": metadata}
