"""
Site-level records kept in the spreadsheet: navigation, settings and the
bulk export bundle.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from pages.models import Page


@dataclass
class NavItem:
    id: str
    label: str
    href: str
    children: Optional[List['NavItem']] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"id": self.id, "label": self.label, "href": self.href}
        if self.children is not None:
            data["children"] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'NavItem':
        children = data.get("children")
        return cls(
            id=str(data["id"]),
            label=data.get("label", ""),
            href=data.get("href", ""),
            children=[cls.from_dict(c) for c in children] if children is not None else None,
        )


@dataclass
class ThemeConfig:
    name: str = "default"
    mode: str = "light"  # "light", "dark", "auto"
    primary_color: str = "#3366cc"
    secondary_color: str = "#6c757d"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "mode": self.mode,
            "primaryColor": self.primary_color,
            "secondaryColor": self.secondary_color,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ThemeConfig':
        data = data or {}
        defaults = cls()
        return cls(
            name=data.get("name", defaults.name),
            mode=data.get("mode", defaults.mode),
            primary_color=data.get("primaryColor", defaults.primary_color),
            secondary_color=data.get("secondaryColor", defaults.secondary_color),
        )


@dataclass
class ColorScheme:
    primary: str = "#3366cc"
    secondary: str = "#6c757d"
    accent: str = "#ff9900"
    background: str = "#ffffff"
    text: str = "#333333"
    border: str = "#dddddd"

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.__dict__)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'ColorScheme':
        data = data or {}
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class FontConfig:
    heading: str = "Inter"
    body: str = "Inter"
    mono: str = "JetBrains Mono"

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.__dict__)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'FontConfig':
        data = data or {}
        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})


@dataclass
class NavigationConfig:
    items: List[NavItem] = field(default_factory=list)
    position: str = "top"  # "top" or "side"
    sticky: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "items": [item.to_dict() for item in self.items],
            "position": self.position,
            "sticky": self.sticky,
        }

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'NavigationConfig':
        data = data or {}
        return cls(
            items=[NavItem.from_dict(i) for i in data.get("items") or []],
            position=data.get("position", "top"),
            sticky=bool(data.get("sticky", False)),
        )


@dataclass
class SiteSettings:
    theme: ThemeConfig = field(default_factory=ThemeConfig)
    colors: ColorScheme = field(default_factory=ColorScheme)
    fonts: FontConfig = field(default_factory=FontConfig)
    navigation: NavigationConfig = field(default_factory=NavigationConfig)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme": self.theme.to_dict(),
            "colors": self.colors.to_dict(),
            "fonts": self.fonts.to_dict(),
            "navigation": self.navigation.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SiteSettings':
        return cls(
            theme=ThemeConfig.from_dict(data.get("theme")),
            colors=ColorScheme.from_dict(data.get("colors")),
            fonts=FontConfig.from_dict(data.get("fonts")),
            navigation=NavigationConfig.from_dict(data.get("navigation")),
        )


@dataclass
class SheetData:
    """The full exportable/importable site snapshot."""
    pages: List[Page] = field(default_factory=list)
    navigation: List[NavItem] = field(default_factory=list)
    settings: SiteSettings = field(default_factory=SiteSettings)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pages": [p.to_dict() for p in self.pages],
            "navigation": [n.to_dict() for n in self.navigation],
            "settings": self.settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SheetData':
        return cls(
            pages=[Page.from_dict(p) for p in data.get("pages") or []],
            navigation=[NavItem.from_dict(n) for n in data.get("navigation") or []],
            settings=SiteSettings.from_dict(data.get("settings") or {}),
        )
