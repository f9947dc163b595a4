"""Framework-specific export of pages as component source"""
from .adapter import FrameworkAdapter, FrameworkType, FrameworkConfig, ExportConfig, to_pascal_case

__all__ = ["FrameworkAdapter", "FrameworkType", "FrameworkConfig", "ExportConfig", "to_pascal_case"]
