from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from pathlib import Path

# scheme://... targets are remote (or already absolute URIs) and never rewritten
URI_SCHEME_RE = re.compile(r"[A-Za-z0-9_-]+://")


class PageSize(str, Enum):
    A3 = "A3"
    A4 = "A4"
    A5 = "A5"
    LEGAL = "Legal"
    LETTER = "Letter"
    TABLOID = "Tabloid"


class MarginsType(IntEnum):
    DEFAULT = 0
    MINIMUM = 1
    MAXIMUM = 2


class ExportMode(Enum):
    STYLED_HTML = "html"
    RAW_HTML = "raw-html"
    PDF = "pdf"


@dataclass(frozen=True)
class SourceDocument:
    path: Path
    text: str

    @property
    def directory(self) -> Path:
        return self.path.parent

    @property
    def title(self) -> str:
        return self.path.stem


@dataclass(frozen=True)
class ImageReference:
    """One `![display](target)` occurrence; `start`/`end` are offsets of the whole match."""

    display: str
    target: str
    start: int
    end: int

    @property
    def is_remote(self) -> bool:
        return URI_SCHEME_RE.match(self.target) is not None


@dataclass(frozen=True)
class CodeRendererOptions:
    display_line_numbers: bool = False


@dataclass(frozen=True)
class MathRendererOptions:
    auto_numbering: bool = True
    apply_line_breaks: bool = False


@dataclass(frozen=True)
class RenderConfiguration:
    vanilla_html: bool
    include_head: bool
    title: str
    extra_head_tags: str | None = None
    code_renderer_options: CodeRendererOptions | None = None
    math_renderer_options: MathRendererOptions | None = None


@dataclass(frozen=True)
class ExportSettings:
    custom_css: str = ""
    theme: str = ""  # path to a CSS file, may be empty
    display_line_numbers: bool = False
    apply_line_breaks: bool = False
    auto_numbering: bool = True
    landscape: bool = False
    margins_type: MarginsType = MarginsType.DEFAULT
    page_size: PageSize = PageSize.A4
    print_background: bool = False


@dataclass(frozen=True)
class PrintOptions:
    landscape: bool = False
    margins_type: MarginsType = MarginsType.DEFAULT
    print_background: bool = False
    page_size: PageSize = PageSize.A4
    print_selection_only: bool = False

    @classmethod
    def from_settings(cls, settings: ExportSettings) -> PrintOptions:
        return cls(
            landscape=settings.landscape,
            margins_type=settings.margins_type,
            print_background=settings.print_background,
            page_size=settings.page_size,
            print_selection_only=False,
        )


@dataclass(frozen=True)
class FileFilter:
    name: str
    extensions: tuple[str, ...]

    def to_qt(self) -> str:
        """Qt dialog filter string, e.g. ``HTML (*.html *.htm)``."""
        patterns = " ".join(f"*.{ext}" for ext in self.extensions)
        return f"{self.name} ({patterns})"


@dataclass(frozen=True)
class ExportResult:
    mode: ExportMode
    data: bytes
    caption: str
    default_name: str
    default_dir: Path
    filters: tuple[FileFilter, ...]
