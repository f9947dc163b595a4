"""
SEO content drafting.

Wraps the completion client with prompt building, a rate limit and a few
heuristics (description, SEO score, reading time) computed on the result.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from utils import utc_now, to_iso
from .client import CompletionClient
from .exceptions import GenerationError, ParseError
from .prompts import build_content_prompt, build_metadata_prompt
from .rate_limit import RateLimiter

logger = logging.getLogger(__name__)

WORDS_PER_MINUTE = 200
DESCRIPTION_MAX_CHARS = 160

TONES = ("professional", "casual", "friendly", "technical")
LENGTHS = ("short", "medium", "long")
FORMATS = ("markdown", "html", "plain")


@dataclass
class GenerationRequest:
    """What to draft. Only the title is required."""
    title: str
    topic: Optional[str] = None
    keywords: List[str] = field(default_factory=list)
    tone: Optional[str] = None    # one of TONES
    length: Optional[str] = None  # one of LENGTHS
    format: Optional[str] = None  # one of FORMATS

    def __post_init__(self):
        self.keywords = list(self.keywords or [])
        for value, allowed, name in (
            (self.tone, TONES, "tone"),
            (self.length, LENGTHS, "length"),
            (self.format, FORMATS, "format"),
        ):
            if value is not None and value not in allowed:
                raise ValueError(f"Invalid {name} '{value}', expected one of {', '.join(allowed)}")


@dataclass
class GeneratedContent:
    title: str
    description: str
    content: str
    keywords: List[str]
    seo_score: int
    reading_time: int  # minutes
    generated_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "content": self.content,
            "keywords": self.keywords,
            "seoScore": self.seo_score,
            "readingTime": self.reading_time,
            "generatedAt": to_iso(self.generated_at),
        }


def extract_description(content: str) -> str:
    """First non-blank line, cut to 160 characters."""
    for line in content.split("\n"):
        if line.strip():
            return line[:DESCRIPTION_MAX_CHARS]
    return content[:DESCRIPTION_MAX_CHARS]


def count_words(content: str) -> int:
    return len(content.split())


def calculate_seo_score(content: str) -> int:
    """Heuristic score between 50 and 100."""
    score = 50
    if len(content) > 300:
        score += 10
    if "##" in content or "<h2>" in content:
        score += 10
    if "**" in content or "<strong>" in content:
        score += 10
    if count_words(content) > 300:
        score += 10
    return min(score, 100)


def calculate_reading_time(content: str) -> int:
    return math.ceil(count_words(content) / WORDS_PER_MINUTE)


class ContentGenerator:
    """
    Drafts page copy and SEO metadata.

    One instance (and one rate limiter) is shared across the process.
    """

    def __init__(self, client: CompletionClient, rate_limiter: Optional[RateLimiter] = None):
        self.client = client
        self.rate_limiter = rate_limiter or RateLimiter()

    async def generate_content(self, request: GenerationRequest) -> GeneratedContent:
        """
        Draft content for a page.

        Raises:
            RateLimitExceeded: If the hourly quota is used up
            GenerationError: If the completion service fails
        """
        self.rate_limiter.check()

        prompt = build_content_prompt(
            title=request.title,
            topic=request.topic,
            keywords=request.keywords,
            tone=request.tone,
            length=request.length,
            format=request.format,
        )
        try:
            text = await self.client.complete(prompt, temperature=0.7, max_tokens=1500)
        except GenerationError as e:
            raise GenerationError(f"Content generation failed: {e}") from e

        logger.info(f"Generated {count_words(text)} words for '{request.title}'")
        return GeneratedContent(
            title=request.title,
            description=extract_description(text),
            content=text,
            keywords=list(request.keywords),
            seo_score=calculate_seo_score(text),
            reading_time=calculate_reading_time(text),
            generated_at=utc_now(),
        )

    async def generate_metadata(self, content: str, title: str) -> Dict[str, Any]:
        """
        Draft SEO metadata (meta title, meta description, keywords) as a JSON object.

        Raises:
            GenerationError: If the completion service fails
            ParseError: If the reply is not a JSON object
        """
        prompt = build_metadata_prompt(content, title)
        try:
            text = await self.client.complete(prompt, temperature=0.5, max_tokens=500)
        except GenerationError as e:
            raise GenerationError(f"Metadata generation failed: {e}") from e

        try:
            metadata = json.loads(text)
        except json.JSONDecodeError as e:
            logger.warning(f"Metadata reply for '{title}' is not JSON: {text[:80]!r}")
            raise ParseError(f"Metadata reply is not valid JSON: {e}") from e

        if not isinstance(metadata, dict):
            raise ParseError(f"Metadata reply is a JSON {type(metadata).__name__}, expected an object")
        return metadata
