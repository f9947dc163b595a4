"""
AI drafting module.

- CompletionClient: OpenAI-compatible chat completions wrapper
- ContentGenerator: page copy and SEO metadata drafts
- RateLimiter: sliding-window quota shared by all generation requests
"""

from .client import CompletionClient
from .exceptions import ContentGenerationException, RateLimitExceeded, GenerationError, ParseError
from .generator import ContentGenerator, GenerationRequest, GeneratedContent
from .rate_limit import RateLimiter

__all__ = [
    "CompletionClient",
    "ContentGenerator",
    "GenerationRequest",
    "GeneratedContent",
    "RateLimiter",
    "ContentGenerationException",
    "RateLimitExceeded",
    "GenerationError",
    "ParseError",
]
