# typoradify/services/pdf/web_pdf_printer.py
from __future__ import annotations

try:
    from PyQt6.QtWebEngineCore import QWebEngineSettings  # type: ignore
    from PyQt6.QtWebEngineWidgets import QWebEngineView  # type: ignore
except ImportError as e:
    raise RuntimeError(
        "Qt WebEngine is not available. Install PyQt6-WebEngine to enable PDF export."
    ) from e

import logging
import os
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from PyQt6.QtCore import QEventLoop, QMarginsF, QTimer, QUrl
from PyQt6.QtGui import QPageLayout, QPageSize

from typoradify.domain.errors import RenderError
from typoradify.domain.interfaces import IPdfPrinter
from typoradify.domain.models import MarginsType, PageSize, PrintOptions
from typoradify.utils.constants import DEFAULT_PDF_SETTLE_MS, DEFAULT_PDF_TIMEOUT_MS

logger = logging.getLogger(__name__)

MARGINS_MM: dict[MarginsType, float] = {
    MarginsType.DEFAULT: 12.7,
    MarginsType.MINIMUM: 0.0,
    MarginsType.MAXIMUM: 25.4,
}

PAGE_SIZE_IDS: dict[PageSize, QPageSize.PageSizeId] = {
    PageSize.A3: QPageSize.PageSizeId.A3,
    PageSize.A4: QPageSize.PageSizeId.A4,
    PageSize.A5: QPageSize.PageSizeId.A5,
    PageSize.LEGAL: QPageSize.PageSizeId.Legal,
    PageSize.LETTER: QPageSize.PageSizeId.Letter,
    PageSize.TABLOID: QPageSize.PageSizeId.Tabloid,
}


def build_page_layout(options: PrintOptions) -> QPageLayout:
    m = MARGINS_MM[options.margins_type]
    orientation = (
        QPageLayout.Orientation.Landscape if options.landscape else QPageLayout.Orientation.Portrait
    )
    return QPageLayout(
        QPageSize(PAGE_SIZE_IDS[options.page_size]),
        orientation,
        QMarginsF(m, m, m, m),
        QPageLayout.Unit.Millimeter,
    )


class WebEnginePdfPrinter(IPdfPrinter):
    """
    Render HTML to PDF via a hidden Qt WebEngine view, so exported pages match what
    the browser engine shows (CSS, MathJax, local images).

    The view is created per call and always closed, success or failure. A timeout
    guards against an engine that never reports loadFinished or never delivers bytes.
    """

    def __init__(
        self,
        timeout_ms: int = DEFAULT_PDF_TIMEOUT_MS,
        settle_ms: int = DEFAULT_PDF_SETTLE_MS,
        view_factory: Callable[[], Any] | None = None,
    ) -> None:
        self._timeout_ms = timeout_ms
        self._settle_ms = settle_ms
        self._view_factory = view_factory or QWebEngineView

    @contextmanager
    def _render_surface(self, options: PrintOptions) -> Iterator[Any]:
        view = self._view_factory()
        try:
            s = view.settings()
            s.setAttribute(
                QWebEngineSettings.WebAttribute.PrintElementBackgrounds, options.print_background
            )
            # local images are referenced by absolute file paths
            s.setAttribute(QWebEngineSettings.WebAttribute.LocalContentCanAccessFileUrls, True)
            s.setAttribute(QWebEngineSettings.WebAttribute.LocalContentCanAccessRemoteUrls, True)
            yield view
        finally:
            view.close()
            view.deleteLater()

    def print_to_pdf(
        self, html: str, options: PrintOptions, base_dir: Path | None = None
    ) -> bytes:
        layout = build_page_layout(options)
        base_url = QUrl.fromLocalFile(str(base_dir) + os.sep) if base_dir else QUrl()
        with self._render_surface(options) as view:
            return self._print(view, html, base_url, layout)

    def _print(self, view: Any, html: str, base_url: QUrl, layout: QPageLayout) -> bytes:
        loop = QEventLoop()
        state: dict[str, Any] = {"done": False, "data": None, "error": None}

        def finish(data: bytes | None = None, error: Exception | None = None) -> None:
            if state["done"]:
                return
            state.update(done=True, data=data, error=error)
            if loop.isRunning():
                loop.quit()

        def on_timeout() -> None:
            finish(error=RenderError(f"Timed out after {self._timeout_ms} ms while rendering PDF"))

        timer = QTimer()
        timer.setSingleShot(True)
        timer.timeout.connect(on_timeout)

        def on_pdf_ready(data) -> None:
            raw = bytes(data) if data is not None else b""
            if not raw:
                finish(error=RenderError("The PDF engine returned no data"))
            else:
                finish(data=raw)

        def print_now() -> None:
            if state["done"]:
                return
            try:
                view.page().printToPdf(on_pdf_ready, layout)
            except Exception as e:
                finish(error=RenderError(f"Failed to print PDF:\n{e}"))

        def on_load_finished(ok: bool) -> None:
            if not ok:
                finish(error=RenderError("Failed to load HTML into the render surface"))
                return
            # give client-side scripts (MathJax) a moment to typeset
            if self._settle_ms > 0:
                QTimer.singleShot(self._settle_ms, print_now)
            else:
                print_now()

        # connect before setHtml so a synchronous load is not missed
        view.loadFinished.connect(on_load_finished)
        timer.start(self._timeout_ms)
        view.setHtml(html, base_url)
        if not state["done"]:
            loop.exec()
        timer.stop()

        if state["error"] is not None:
            logger.error("PDF rendering failed: %s", state["error"])
            raise state["error"]
        logger.debug("PDF rendered (%d bytes)", len(state["data"]))
        return state["data"]
