"""Page model and lifecycle management"""
from .manager import (
    PageManager,
    PageManagerException,
    PageNotFoundException,
    VersionNotFoundException,
    PAGE_TEMPLATES,
)
from .models import (
    Page,
    PageSection,
    PageComponent,
    ComponentType,
    ComponentProps,
    ComponentStyles,
    PageMetadata,
    SEOMetadata,
    Visibility,
)

__all__ = [
    "PageManager",
    "PageManagerException",
    "PageNotFoundException",
    "VersionNotFoundException",
    "PAGE_TEMPLATES",
    "Page",
    "PageSection",
    "PageComponent",
    "ComponentType",
    "ComponentProps",
    "ComponentStyles",
    "PageMetadata",
    "SEOMetadata",
    "Visibility",
]
