from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from typoradify.core.assembler import assemble, document_title
from typoradify.domain.errors import ExportError, FileReadError, RenderError, ThemeReadError
from typoradify.domain.interfaces import IFileService, IMarkdownRenderer, IPdfPrinter
from typoradify.domain.models import (
    CodeRendererOptions,
    ExportMode,
    ExportResult,
    ExportSettings,
    FileFilter,
    MathRendererOptions,
    PrintOptions,
    RenderConfiguration,
    SourceDocument,
)
from typoradify.resources import read_default_css

logger = logging.getLogger(__name__)

HTML_FILTERS = (FileFilter("HTML", ("html", "htm")),)
PDF_FILTERS = (FileFilter("PDF", ("pdf",)),)


class RenderOrchestrator:
    """
    Turns a Markdown file plus ExportSettings into bytes for one of the three
    export modes. Reads the source (and theme CSS) on every call; never writes.
    """

    def __init__(
        self,
        *,
        renderer: IMarkdownRenderer,
        files: IFileService,
        printer: IPdfPrinter,
        default_css: Callable[[], str] = read_default_css,
    ) -> None:
        self._renderer = renderer
        self._files = files
        self._printer = printer
        self._default_css = default_css

    # ----------------------------- configuration -----------------------------

    def build_head_tags(self, settings: ExportSettings) -> str:
        parts = [self._default_css()]
        if settings.theme:
            try:
                parts.append(self._files.read_text(Path(settings.theme)))
            except (OSError, UnicodeDecodeError) as e:
                raise ThemeReadError(settings.theme, e) from e
        parts.append(settings.custom_css)
        css = "\n".join(p for p in parts if p)
        return f"<style>{css}</style>"

    def build_config(
        self, mode: ExportMode, settings: ExportSettings, title: str
    ) -> RenderConfiguration:
        if mode is ExportMode.RAW_HTML:
            return RenderConfiguration(vanilla_html=True, include_head=False, title=title)

        return RenderConfiguration(
            vanilla_html=False,
            include_head=True,
            title=title,
            extra_head_tags=self.build_head_tags(settings),
            code_renderer_options=CodeRendererOptions(
                display_line_numbers=settings.display_line_numbers,
            ),
            math_renderer_options=MathRendererOptions(
                auto_numbering=settings.auto_numbering,
                apply_line_breaks=settings.apply_line_breaks,
            ),
        )

    # ----------------------------- rendering -----------------------------

    def read_source(self, filepath: Path) -> SourceDocument:
        try:
            text = self._files.read_text(filepath)
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(filepath, e) from e
        return SourceDocument(path=Path(filepath), text=text)

    def render_html(self, filepath: Path, config: RenderConfiguration) -> str:
        doc = self.read_source(filepath)
        try:
            return self._renderer.render(assemble(doc.text, doc.path), config)
        except ExportError:
            raise
        except Exception as e:
            raise RenderError(f"Failed to render {doc.path.name}:\n{e}") from e

    def export_styled_html(self, filepath: Path, settings: ExportSettings) -> ExportResult:
        filepath = Path(filepath)
        title = document_title(filepath)
        config = self.build_config(ExportMode.STYLED_HTML, settings, title)
        html = self.render_html(filepath, config)
        return ExportResult(
            mode=ExportMode.STYLED_HTML,
            data=html.encode("utf-8"),
            caption="Save to HTML",
            default_name=f"{title}.html",
            default_dir=filepath.parent,
            filters=HTML_FILTERS,
        )

    def export_raw_html(self, filepath: Path, settings: ExportSettings) -> ExportResult:
        filepath = Path(filepath)
        title = document_title(filepath)
        config = self.build_config(ExportMode.RAW_HTML, settings, title)
        html = self.render_html(filepath, config)
        return ExportResult(
            mode=ExportMode.RAW_HTML,
            data=html.encode("utf-8"),
            caption="Save to HTML (without style)",
            default_name=f"{title}.html",
            default_dir=filepath.parent,
            filters=HTML_FILTERS,
        )

    def export_pdf(self, filepath: Path, settings: ExportSettings) -> ExportResult:
        filepath = Path(filepath)
        title = document_title(filepath)
        config = self.build_config(ExportMode.PDF, settings, title)
        html = self.render_html(filepath, config)

        options = PrintOptions.from_settings(settings)
        logger.debug("Printing %s to PDF with %s", filepath, options)
        try:
            data = self._printer.print_to_pdf(html, options, base_dir=filepath.parent)
        except ExportError:
            raise
        except Exception as e:
            raise RenderError(f"Failed to print {filepath.name} to PDF:\n{e}") from e

        return ExportResult(
            mode=ExportMode.PDF,
            data=bytes(data),
            caption="Save to PDF",
            default_name=f"{title}.pdf",
            default_dir=filepath.parent,
            filters=PDF_FILTERS,
        )

    def export(self, mode: ExportMode, filepath: Path, settings: ExportSettings) -> ExportResult:
        handlers = {
            ExportMode.STYLED_HTML: self.export_styled_html,
            ExportMode.RAW_HTML: self.export_raw_html,
            ExportMode.PDF: self.export_pdf,
        }
        return handlers[mode](filepath, settings)
