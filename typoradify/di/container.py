from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QSettings

from typoradify.domain.interfaces import IFileService
from typoradify.plugins.builtin import builtin_registrations
from typoradify.plugins.manager import PluginManager
from typoradify.services.config.app_config import AppConfig, build_app_config
from typoradify.services.file_service import FileService
from typoradify.services.settings_service import SettingsService
from typoradify.services.ui.adapters import QtFileDialogService, QtMessageService
from typoradify.services.ui.adapters.plugin_app_api import PluginAppAPI
from typoradify.services.ui.host_window import HostWindow
from typoradify.services.ui.ports.dialogs import IFileDialogService
from typoradify.services.ui.ports.messages import IMessageService
from typoradify.utils.constants import APP_NAME, APP_ORG


class Container:
    """
    Lightweight DI container:
      - Wires default services if not provided
      - Owns the plugin manager; built-in plugins register themselves into it
      - Builds the host window with its plugin API attached
    """

    def __init__(
        self,
        *,
        config: AppConfig | None = None,
        qsettings: QSettings | None = None,
        files: IFileService | None = None,
        dialogs: IFileDialogService | None = None,
        messages: IMessageService | None = None,
    ) -> None:
        self.config: AppConfig = config or build_app_config()
        self.file_service: IFileService = files or FileService()
        self.settings_service = SettingsService(qsettings or QSettings())
        self.dialogs: IFileDialogService = dialogs or QtFileDialogService()
        self.messages: IMessageService = messages or QtMessageService()

        self.plugin_manager = PluginManager()
        for register in builtin_registrations():
            register(self.plugin_manager)

    @staticmethod
    def default(
        qsettings: QSettings | None = None,
        *,
        config: AppConfig | None = None,
        organization: str = APP_ORG,
        application: str = APP_NAME,
    ) -> Container:
        if qsettings is None:
            qsettings = QSettings(organization, application)
        return Container(config=config, qsettings=qsettings)

    def build_main_window(
        self,
        *,
        start_path: Path | None = None,
        app_title: str = APP_NAME,
    ) -> HostWindow:
        """
        Create the host window, activate the registered plugins against its API and surface
        their actions. Plugins are loaded before the start document opens.
        """
        window = HostWindow(
            file_service=self.file_service,
            settings=self.settings_service,
            dialogs=self.dialogs,
            messages=self.messages,
            app_title=app_title,
        )
        api = PluginAppAPI(
            window=window,
            settings=self.settings_service,
            config=self.config,
            dialogs=self.dialogs,
            messages=self.messages,
        )
        window.app_api = api

        self.plugin_manager.set_api(api)
        self.plugin_manager.activate_all()
        window.install_plugin_actions(self.plugin_manager.iter_actions(), api)

        if start_path:
            window.open_path(start_path)
        return window
