from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

# QtWebEngine must be imported before the QApplication exists.
import typoradify.services.pdf.web_pdf_printer  # noqa: F401
from PyQt6.QtWidgets import QApplication

from typoradify.di.container import Container
from typoradify.services.config.app_config import build_app_config
from typoradify.utils.constants import APP_NAME, APP_ORG
from typoradify.utils.logger import configure_logging

logger = logging.getLogger(__name__)


def run_app(argv: Sequence[str]) -> int:
    """
    Bootstraps logging and Qt, composes the host via the DI container,
    and launches the window with the export plugin loaded.
    """
    config = build_app_config()
    configure_logging(config.log_level)
    if config.loaded_from:
        logger.info("Loaded config from %s", config.loaded_from)

    QApplication.setOrganizationName(APP_ORG)
    QApplication.setApplicationName(APP_NAME)
    app = QApplication(list(argv))

    container = Container.default(config=config)

    # Optional note to open passed as first CLI argument
    start_path = Path(argv[1]) if len(argv) > 1 else None

    win = container.build_main_window(start_path=start_path, app_title=APP_NAME)
    win.show()

    code = app.exec()
    container.plugin_manager.shutdown()
    return code
