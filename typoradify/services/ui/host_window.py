from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QMenu, QPlainTextEdit, QStatusBar

from typoradify.domain.interfaces import IFileService, ISettingsService
from typoradify.plugins.api import ActionSpec, IAppAPI
from typoradify.services.ui.ports.dialogs import IFileDialogService
from typoradify.services.ui.ports.messages import IMessageService
from typoradify.utils.constants import APP_NAME, MAX_RECENTS

logger = logging.getLogger(__name__)

MENU_ORDER = ("File", "Export", "Tools", "Help")


class HostWindow(QMainWindow):
    """
    Minimal note host: holds the active document, shows it read-only and surfaces
    plugin commands in menus. Export work happens in plugins, not here.
    """

    def __init__(
        self,
        *,
        file_service: IFileService,
        settings: ISettingsService,
        dialogs: IFileDialogService,
        messages: IMessageService,
        app_title: str = APP_NAME,
    ) -> None:
        super().__init__()
        self._app_title = app_title
        self.setWindowTitle(app_title)
        self.resize(900, 650)

        self.file_service = file_service
        self.settings = settings
        self.dialogs = dialogs
        self.messages = messages

        self.current_path: Path | None = None
        self.recents: list[str] = self.settings.get_recent()

        self.viewer = QPlainTextEdit(self)
        self.viewer.setReadOnly(True)
        self.setCentralWidget(self.viewer)
        self.setStatusBar(QStatusBar(self))

        self._menus: dict[str, QMenu] = {}
        self.plugin_actions: dict[str, QAction] = {}

        self._build_actions()
        self._build_menu()
        self.setAcceptDrops(True)

    # ---------- UI creation ----------
    def _build_actions(self) -> None:
        self.act_open = QAction(
            "Open…",
            self,
            shortcut=QKeySequence.StandardKey.Open,
            triggered=self._open_dialog,
        )
        self.act_exit = QAction(
            "Exit", self, shortcut=QKeySequence.StandardKey.Quit, triggered=self.close
        )
        self.recent_menu = QMenu("Open Recent", self)

    def _build_menu(self) -> None:
        for name in MENU_ORDER:
            self._menus[name] = self.menuBar().addMenu(f"&{name}")
        filem = self._menus["File"]
        filem.addAction(self.act_open)
        filem.addMenu(self.recent_menu)
        filem.addSeparator()
        filem.addAction(self.act_exit)
        self._refresh_recent_menu()

    def _menu(self, name: str) -> QMenu:
        menu = self._menus.get(name)
        if menu is None:
            menu = self.menuBar().addMenu(f"&{name}")
            self._menus[name] = menu
        return menu

    def install_plugin_actions(
        self,
        actions: Sequence[tuple[ActionSpec, Callable[[IAppAPI], None]]],
        api: IAppAPI,
    ) -> None:
        """Replace previously installed plugin actions with `actions`."""
        for act in self.plugin_actions.values():
            for menu in self._menus.values():
                menu.removeAction(act)
        self.plugin_actions.clear()

        for spec, handler in actions:
            act = QAction(
                spec.title,
                self,
                triggered=lambda chk=False, h=handler: h(api),
            )
            if spec.shortcut:
                act.setShortcut(QKeySequence(spec.shortcut))
            if spec.status_tip:
                act.setStatusTip(spec.status_tip)
            self._menu(str(spec.menu)).addAction(act)
            self.plugin_actions[spec.id] = act

    def _refresh_recent_menu(self) -> None:
        self.recent_menu.clear()
        if not self.recents:
            na = QAction("(empty)", self)
            na.setEnabled(False)
            self.recent_menu.addAction(na)
            return
        for p in self.recents[:MAX_RECENTS]:
            self.recent_menu.addAction(
                QAction(p, self, triggered=lambda chk=False, x=p: self.open_path(Path(x)))
            )

    # ---------- Document ----------
    def _open_dialog(self) -> None:
        path = self.dialogs.get_open_file(
            self,
            "Open Markdown",
            str(self.current_path.parent) if self.current_path else None,
            "Markdown (*.md *.markdown *.mdown);;All files (*)",
        )
        if path:
            self.open_path(path)

    def open_path(self, path: Path) -> bool:
        try:
            text = self.file_service.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Failed to open %s: %s", path, e)
            self.messages.error(self, "Open Error", f"Failed to open file:\n{e}")
            return False
        self.current_path = Path(path).resolve()
        self.viewer.setPlainText(text)
        self.setWindowTitle(f"{self.current_path.name} — {self._app_title}")
        self._add_recent(self.current_path)
        self.statusBar().showMessage(f"Opened: {self.current_path}", 3000)
        return True

    def _add_recent(self, path: Path) -> None:
        s = str(path)
        if s in self.recents:
            self.recents.remove(s)
        self.recents.insert(0, s)
        self.recents = self.recents[:MAX_RECENTS]
        self.settings.set_recent(self.recents)
        self._refresh_recent_menu()

    # ---------- DnD ----------
    def dragEnterEvent(self, e):
        if e.mimeData().hasUrls():
            e.acceptProposedAction()

    def dropEvent(self, e):
        urls = e.mimeData().urls()
        if not urls:
            return
        local = urls[0].toLocalFile()
        if local:
            self.open_path(Path(local))
