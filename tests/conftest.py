from __future__ import annotations

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path

import pytest

# QtWebEngine must be imported before any QApplication is created.
import typoradify.services.pdf.web_pdf_printer  # noqa: F401
from PyQt6.QtCore import QSettings
from PyQt6.QtWidgets import QApplication

from tests.fakes import DEFAULT_CSS, FakeApi, FakeFiles, FakePrinter, FakeRenderer
from typoradify.services.file_service import FileService
from typoradify.services.markdown_renderer import MarkdownRenderer
from typoradify.services.render_orchestrator import RenderOrchestrator
from typoradify.services.settings_service import SettingsService

# --- Fallback QApplication fixture (works with or without pytest-qt) ---
@pytest.fixture(scope="session")
def qapp():
    """Provide a QApplication for tests that need Qt.
    Creates one if not present; reuses existing otherwise.
    """
    app = QApplication.instance()
    created = False
    if app is None:
        app = QApplication([])
        created = True
    try:
        yield app
    finally:
        # Don't forcibly quit a shared app; only close if we created it here.
        if created:
            app.quit()

# --- Common fixtures ---

@pytest.fixture()
def tmp_settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.ini"

@pytest.fixture()
def qsettings(tmp_settings_path: Path) -> QSettings:
    # Use an INI file so we don't touch system registry / platform stores
    s = QSettings(str(tmp_settings_path), QSettings.Format.IniFormat)
    s.clear()
    return s

@pytest.fixture()
def settings_service(qsettings: QSettings) -> SettingsService:
    return SettingsService(qsettings)

@pytest.fixture()
def file_service() -> FileService:
    return FileService()

@pytest.fixture()
def renderer() -> MarkdownRenderer:
    return MarkdownRenderer()

@pytest.fixture()
def fake_files() -> FakeFiles:
    return FakeFiles()

@pytest.fixture()
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()

@pytest.fixture()
def fake_printer() -> FakePrinter:
    return FakePrinter()

@pytest.fixture()
def fake_api() -> FakeApi:
    return FakeApi()

@pytest.fixture()
def orchestrator(fake_renderer, fake_files, fake_printer) -> RenderOrchestrator:
    return RenderOrchestrator(
        renderer=fake_renderer,
        files=fake_files,
        printer=fake_printer,
        default_css=lambda: DEFAULT_CSS,
    )
