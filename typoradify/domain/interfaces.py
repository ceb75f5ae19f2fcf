from __future__ import annotations

from pathlib import Path
from typing import Protocol

from .models import PrintOptions, RenderConfiguration


class IMarkdownRenderer(Protocol):
    """Convert Markdown text to HTML according to a render configuration."""

    def render(self, markdown_text: str, config: RenderConfiguration) -> str: ...


class IPdfPrinter(Protocol):
    """Rasterize a full HTML document to PDF bytes."""

    def print_to_pdf(
        self, html: str, options: PrintOptions, base_dir: Path | None = None
    ) -> bytes: ...


class IFileService(Protocol):
    """Read/write files. Writes should be atomic when possible."""

    def read_text(self, path: Path) -> str: ...
    def write_bytes_atomic(self, path: Path, data: bytes) -> None: ...


class ISettingsService(Protocol):
    """Persist and retrieve lightweight host state as raw key/values."""

    def get_raw(self, key: str, default: str | None = None) -> str | None: ...
    def set_raw(self, key: str, value: str) -> None: ...
    def remove_raw(self, key: str) -> None: ...
    def get_recent(self) -> list[str]: ...
    def set_recent(self, recent: list[str]) -> None: ...


class IConfigService(Protocol):
    """Read-only operational configuration (INI)."""

    def get(self, section: str, key: str, default: str | None = None) -> str | None: ...
    def get_int(self, section: str, key: str, default: int | None = None) -> int | None: ...
    def get_bool(self, section: str, key: str, default: bool | None = None) -> bool | None: ...
