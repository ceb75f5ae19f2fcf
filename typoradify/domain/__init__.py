"""Domain layer: interfaces, error taxonomy and simple models (dataclasses)."""

from .errors import (
    ExportError,
    FileReadError,
    NoActiveDocument,
    RenderError,
    SaveCancelled,
    ThemeReadError,
    WriteError,
)
from .interfaces import (
    IConfigService,
    IFileService,
    IMarkdownRenderer,
    IPdfPrinter,
    ISettingsService,
)
from .models import (
    CodeRendererOptions,
    ExportMode,
    ExportResult,
    ExportSettings,
    FileFilter,
    ImageReference,
    MarginsType,
    MathRendererOptions,
    PageSize,
    PrintOptions,
    RenderConfiguration,
    SourceDocument,
)

__all__ = [
    "IMarkdownRenderer",
    "IPdfPrinter",
    "IFileService",
    "ISettingsService",
    "IConfigService",
    "ExportError",
    "NoActiveDocument",
    "FileReadError",
    "ThemeReadError",
    "SaveCancelled",
    "WriteError",
    "RenderError",
    "CodeRendererOptions",
    "MathRendererOptions",
    "RenderConfiguration",
    "ExportSettings",
    "PrintOptions",
    "ExportMode",
    "ExportResult",
    "FileFilter",
    "ImageReference",
    "MarginsType",
    "PageSize",
    "SourceDocument",
]
