"""Concrete service implementations: parsing, rendering, printing and persistence."""

from .file_service import FileService
from .markdown_renderer import MarkdownRenderer
from .render_orchestrator import RenderOrchestrator
from .settings_service import ExportSettingsStore, SettingsService

__all__ = [
    "ExportSettingsStore",
    "FileService",
    "MarkdownRenderer",
    "RenderOrchestrator",
    "SettingsService",
]
