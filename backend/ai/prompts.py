"""
Prompt templates for content drafting.
"""

# Word-count band for each requested length
LENGTH_GUIDES = {
    "short": "150-300 words",
    "medium": "300-600 words",
    "long": "600-1200 words",
}

CONTENT_PROMPT = """Generate {format} content with the following:
Title: {title}
Topic: {topic}
Tone: {tone}
Length: {length}
Keywords to include: {keywords}

Content should be engaging, SEO-optimized, and structured well."""

# Characters of page content sent along for metadata drafting
METADATA_CONTENT_CHARS = 500

METADATA_PROMPT = """Generate SEO metadata for this content. Return as JSON:
- meta title (60 chars max)
- meta description (160 chars max)
- keywords (comma separated)

Title: {title}
Content: {content}"""


def build_content_prompt(
    title: str,
    topic: str = None,
    keywords: list = None,
    tone: str = None,
    length: str = None,
    format: str = None,
) -> str:
    """Fill CONTENT_PROMPT, applying defaults for anything not given."""
    return CONTENT_PROMPT.format(
        format=format or "markdown",
        title=title,
        topic=topic or title,
        tone=tone or "professional",
        length=LENGTH_GUIDES[length or "medium"],
        keywords=", ".join(keywords) if keywords else "none",
    )


def build_metadata_prompt(content: str, title: str) -> str:
    return METADATA_PROMPT.format(title=title, content=content[:METADATA_CONTENT_CHARS])
