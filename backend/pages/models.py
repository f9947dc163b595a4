"""
Page models for the page builder.

A Page is an ordered list of sections, each holding a tree of components.
Every model converts to and from the camelCase shape stored in the sheet.
"""

import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from utils import utc_now, to_iso, from_iso


class Visibility(Enum):
    """Publication state of a page."""
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ComponentType(Enum):
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    IMAGE = "image"
    BUTTON = "button"
    FORM = "form"
    GALLERY = "gallery"
    VIDEO = "video"
    CUSTOM = "custom"


class _KeyedBag:
    """
    Known keys as typed attributes plus an ``extra`` dict for everything else.

    Subclasses map wire keys to attribute names in WIRE_KEYS. Unknown keys
    survive a from_dict/to_dict round trip through ``extra``.
    """

    WIRE_KEYS: ClassVar[Dict[str, str]] = {}

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self.extra)
        for wire_key, attr in self.WIRE_KEYS.items():
            value = getattr(self, attr)
            if value is not None:
                data[wire_key] = value
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        data = data or {}
        known = {attr: data[key] for key, attr in cls.WIRE_KEYS.items() if key in data}
        extra = {k: v for k, v in data.items() if k not in cls.WIRE_KEYS}
        return cls(extra=extra, **known)


@dataclass
class ComponentStyles(_KeyedBag):
    """Per-instance style overrides (CSS properties in camelCase on the wire)."""
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    line_height: Optional[str] = None
    margin_bottom: Optional[str] = None
    color: Optional[str] = None
    padding: Optional[str] = None
    background_color: Optional[str] = None
    border: Optional[str] = None
    border_radius: Optional[str] = None
    cursor: Optional[str] = None
    extra: Dict[str, str] = field(default_factory=dict)

    WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "fontSize": "font_size",
        "fontWeight": "font_weight",
        "lineHeight": "line_height",
        "marginBottom": "margin_bottom",
        "color": "color",
        "padding": "padding",
        "backgroundColor": "background_color",
        "border": "border",
        "borderRadius": "border_radius",
        "cursor": "cursor",
    }


@dataclass
class ComponentProps(_KeyedBag):
    """Component properties. Which keys matter depends on the component type."""
    text: Optional[str] = None
    level: Optional[int] = None        # heading level
    src: Optional[str] = None          # image / video source
    alt: Optional[str] = None
    href: Optional[str] = None         # button / link target
    label: Optional[str] = None
    placeholder: Optional[str] = None  # form fields
    action: Optional[str] = None       # form submit URL
    extra: Dict[str, Any] = field(default_factory=dict)

    WIRE_KEYS: ClassVar[Dict[str, str]] = {
        "text": "text",
        "level": "level",
        "src": "src",
        "alt": "alt",
        "href": "href",
        "label": "label",
        "placeholder": "placeholder",
        "action": "action",
    }


DEFAULT_COMPONENT_STYLES: Dict[ComponentType, Dict[str, str]] = {
    ComponentType.HEADING: {
        "fontSize": "32px",
        "fontWeight": "700",
        "marginBottom": "24px",
        "color": "#000",
    },
    ComponentType.PARAGRAPH: {
        "fontSize": "16px",
        "lineHeight": "1.6",
        "marginBottom": "16px",
        "color": "#333",
    },
    ComponentType.BUTTON: {
        "padding": "12px 24px",
        "backgroundColor": "#3366cc",
        "color": "#fff",
        "border": "none",
        "borderRadius": "4px",
        "cursor": "pointer",
    },
}


@dataclass
class PageComponent:
    """A content block. Components nest through ``children``."""
    id: str
    type: ComponentType
    props: ComponentProps = field(default_factory=ComponentProps)
    children: Optional[List['PageComponent']] = None
    styles: Optional[ComponentStyles] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "type": self.type.value,
            "props": self.props.to_dict(),
        }
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        if self.styles is not None:
            data["styles"] = self.styles.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PageComponent':
        children = data.get("children")
        styles = data.get("styles")
        return cls(
            id=data["id"],
            type=ComponentType(data["type"]),
            props=ComponentProps.from_dict(data.get("props")),
            children=[cls.from_dict(c) for c in children] if children is not None else None,
            styles=ComponentStyles.from_dict(styles) if styles is not None else None,
        )

    @classmethod
    def create(
        cls,
        type: ComponentType,
        props: Optional[ComponentProps] = None,
        children: Optional[List['PageComponent']] = None,
        styles: Optional[ComponentStyles] = None,
    ) -> 'PageComponent':
        """New component with a fresh id. Falls back to the type's default styles."""
        if styles is None and type in DEFAULT_COMPONENT_STYLES:
            styles = ComponentStyles.from_dict(DEFAULT_COMPONENT_STYLES[type])
        return cls(
            id=f"{type.value}_{uuid.uuid4().hex[:8]}",
            type=type,
            props=props or ComponentProps(),
            children=children,
            styles=styles,
        )


@dataclass
class PageSection:
    id: str
    name: str
    components: List[PageComponent] = field(default_factory=list)
    order: int = 0
    visible: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "components": [c.to_dict() for c in self.components],
            "order": self.order,
            "visible": self.visible,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'PageSection':
        return cls(
            id=data["id"],
            name=data.get("name", ""),
            components=[PageComponent.from_dict(c) for c in data.get("components") or []],
            order=int(data.get("order", 0)),
            visible=bool(data.get("visible", True)),
        )


@dataclass
class PageMetadata:
    created_at: datetime
    updated_at: datetime
    author: Optional[str] = None
    keywords: List[str] = field(default_factory=list)
    og_image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
            "keywords": list(self.keywords),
        }
        if self.author is not None:
            data["author"] = self.author
        if self.og_image is not None:
            data["ogImage"] = self.og_image
        return data

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'PageMetadata':
        data = data or {}
        created_at = from_iso(data.get("createdAt")) or utc_now()
        return cls(
            created_at=created_at,
            updated_at=from_iso(data.get("updatedAt")) or created_at,
            author=data.get("author"),
            keywords=list(data.get("keywords") or []),
            og_image=data.get("ogImage"),
        )


@dataclass
class SEOMetadata:
    title: str = ""
    description: str = ""
    keywords: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "keywords": list(self.keywords),
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'SEOMetadata':
        data = data or {}
        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            keywords=list(data.get("keywords") or []),
        )


@dataclass
class Page:
    """
    A content document: sections, SEO metadata and a publication state.

    ``metadata.updated_at`` never moves backwards over the page's lifetime.
    """
    id: str
    title: str
    slug: str
    metadata: PageMetadata
    description: str = ""
    sections: List[PageSection] = field(default_factory=list)
    seo: SEOMetadata = field(default_factory=SEOMetadata)
    visibility: Visibility = Visibility.DRAFT
    thumbnail: Optional[str] = None

    def snapshot(self) -> 'Page':
        """Independent deep copy, safe to keep in history."""
        return copy.deepcopy(self)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "id": self.id,
            "title": self.title,
            "slug": self.slug,
            "description": self.description,
            "sections": [s.to_dict() for s in self.sections],
            "metadata": self.metadata.to_dict(),
            "seo": self.seo.to_dict(),
            "visibility": self.visibility.value,
        }
        if self.thumbnail is not None:
            data["thumbnail"] = self.thumbnail
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Page':
        return cls(
            id=data["id"],
            title=data.get("title", ""),
            slug=data.get("slug", ""),
            description=data.get("description") or "",
            sections=[PageSection.from_dict(s) for s in data.get("sections") or []],
            metadata=PageMetadata.from_dict(data.get("metadata")),
            seo=SEOMetadata.from_dict(data.get("seo")),
            visibility=Visibility(data.get("visibility", "draft")),
            thumbnail=data.get("thumbnail"),
        )
