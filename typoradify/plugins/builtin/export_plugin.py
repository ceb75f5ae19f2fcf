from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from typoradify import __version__
from typoradify.domain.errors import ExportError, NoActiveDocument, SaveCancelled, WriteError
from typoradify.domain.interfaces import IFileService, IMarkdownRenderer, IPdfPrinter
from typoradify.domain.models import ExportMode
from typoradify.plugins.api import ActionSpec, BasePlugin, IAppAPI, IPluginRegistry, PluginMeta
from typoradify.services.file_service import FileService
from typoradify.services.markdown_renderer import MarkdownRenderer
from typoradify.services.render_orchestrator import RenderOrchestrator
from typoradify.services.settings_schema import build_settings_schema
from typoradify.services.settings_service import ExportSettingsStore
from typoradify.utils.constants import DEFAULT_PDF_SETTLE_MS, DEFAULT_PDF_TIMEOUT_MS, PLUGIN_ID

logger = logging.getLogger(__name__)

_COMMANDS: tuple[tuple[str, str, ExportMode, str], ...] = (
    ("render-html", "Export to HTML", ExportMode.STYLED_HTML, "Export the current note as styled HTML"),
    ("render-raw-html", "Export to HTML (without style)", ExportMode.RAW_HTML, "Export the current note as bare HTML"),
    ("render-pdf", "Export to PDF", ExportMode.PDF, "Export the current note as PDF"),
)


def _config_int(api: IAppAPI, key: str, default: int) -> int:
    raw = api.get_app_config("export", key, None)
    try:
        return int(raw) if raw is not None else default
    except ValueError:
        logger.warning("Invalid export.%s=%r in config; using %d", key, raw, default)
        return default


class TyporadifyPlugin(BasePlugin):
    """
    Export commands for the active note.

    Each command runs independently: any ExportError is reported once through the
    host and the command ends; nothing is retried and no other command is affected.
    """

    meta = PluginMeta(
        id=PLUGIN_ID,
        name="Typoradify",
        version=__version__,
        description="Export the current note to HTML (styled or raw) or PDF.",
        license="MIT",
    )

    def __init__(
        self,
        *,
        renderer: IMarkdownRenderer | None = None,
        files: IFileService | None = None,
        printer: IPdfPrinter | None = None,
        default_css: Callable[[], str] | None = None,
    ) -> None:
        self._api: IAppAPI | None = None
        self._renderer = renderer or MarkdownRenderer()
        self._files = files or FileService()
        self._printer = printer
        self._default_css = default_css
        self._orchestrator: RenderOrchestrator | None = None

    # -----------------------------
    # Lifecycle
    # -----------------------------

    def on_load(self, api: IAppAPI) -> None:
        if self._printer is None:
            # WebEngine needs a live QApplication; built here, not at import time.
            from typoradify.services.pdf.web_pdf_printer import WebEnginePdfPrinter

            self._printer = WebEnginePdfPrinter(
                timeout_ms=_config_int(api, "pdf_timeout_ms", DEFAULT_PDF_TIMEOUT_MS),
                settle_ms=_config_int(api, "pdf_settle_ms", DEFAULT_PDF_SETTLE_MS),
            )

    def activate(self, api: IAppAPI) -> None:
        self._api = api

    def deactivate(self) -> None:
        self._api = None

    @property
    def orchestrator(self) -> RenderOrchestrator:
        if self._orchestrator is None:
            if self._printer is None:
                raise RuntimeError("PDF printer not configured; on_load() has not run")
            kwargs = {"default_css": self._default_css} if self._default_css else {}
            self._orchestrator = RenderOrchestrator(
                renderer=self._renderer,
                files=self._files,
                printer=self._printer,
                **kwargs,
            )
        return self._orchestrator

    # -----------------------------
    # Actions
    # -----------------------------

    def register_actions(self) -> Sequence[tuple[ActionSpec, Callable[[IAppAPI], None]]]:
        acts: list[tuple[ActionSpec, Callable[[IAppAPI], None]]] = []
        for command_id, title, mode, tip in _COMMANDS:
            acts.append(
                (
                    ActionSpec(id=command_id, title=title, menu="Export", status_tip=tip),
                    (lambda api, m=mode: self.run_export(api, m)),
                )
            )
        acts.append(
            (
                ActionSpec(
                    id="settings",
                    title="Export Settings…",
                    menu="Tools",
                    status_tip="Configure HTML and PDF export",
                ),
                self.open_settings,
            )
        )
        return acts

    def open_settings(self, api: IAppAPI) -> None:
        store = ExportSettingsStore(api, self.meta.id)
        fields = build_settings_schema(store.load(), store.update)
        api.show_settings_form(self.meta.name, fields)

    # -----------------------------
    # Export command boundary
    # -----------------------------

    def run_export(self, api: IAppAPI, mode: ExportMode) -> Path | None:
        """Run one export; returns the written path or None if it ended early."""
        try:
            return self._export(api, mode)
        except SaveCancelled:
            logger.info("%s export cancelled", mode.value)
            return None
        except ExportError as e:
            logger.warning("%s export failed: %s", mode.value, e)
            api.show_error(e.title, e.user_message)
            return None
        except Exception as e:
            logger.exception("Unexpected failure during %s export", mode.value)
            api.show_error("Export Error", f"Export failed:\n{e}")
            return None

    def _export(self, api: IAppAPI, mode: ExportMode) -> Path:
        current = api.get_current_path()
        if not current:
            raise NoActiveDocument()
        filepath = Path(current)

        settings = ExportSettingsStore(api, self.meta.id).load()
        api.notify(f"Exporting {filepath.name}…")
        logger.info("Exporting %s as %s", filepath, mode.value)

        result = self.orchestrator.export(mode, filepath, settings)

        dest = api.ask_save_path(
            result.caption, str(result.default_dir / result.default_name), result.filters
        )
        if not dest:
            raise SaveCancelled()

        out = Path(dest)
        try:
            self._files.write_bytes_atomic(out, result.data)
        except OSError as e:
            raise WriteError(out, e) from e

        logger.info("Saved %s (%d bytes)", out, len(result.data))
        api.notify(f"File saved: {out}")
        return out


def register(registry: IPluginRegistry) -> None:
    registry.register(TyporadifyPlugin())
