from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from typoradify.domain.interfaces import IConfigService, ISettingsService
from typoradify.domain.models import FileFilter
from typoradify.plugins.api import IAppAPI
from typoradify.services.settings_schema import SettingField
from typoradify.services.ui.ports.dialogs import IFileDialogService
from typoradify.services.ui.ports.messages import IMessageService
from typoradify.services.ui.settings_dialog import SettingsDialog

if TYPE_CHECKING:
    from typoradify.services.ui.host_window import HostWindow


def plugin_setting_key(plugin_id: str, key: str) -> str:
    return f"plugins/{plugin_id}/{key}"


class PluginAppAPI(IAppAPI):
    """IAppAPI over the host window, its settings store and the app config."""

    def __init__(
        self,
        *,
        window: HostWindow,
        settings: ISettingsService,
        config: IConfigService,
        dialogs: IFileDialogService,
        messages: IMessageService,
    ) -> None:
        self._w = window
        self._settings = settings
        self._config = config
        self._dialogs = dialogs
        self._messages = messages

    def get_current_path(self) -> str | None:
        path = self._w.current_path
        return str(path) if path is not None else None

    def notify(self, message: str) -> None:
        self._w.statusBar().showMessage(message, 4000)

    def show_info(self, title: str, message: str) -> None:
        self._messages.info(self._w, title, message)

    def show_warning(self, title: str, message: str) -> None:
        self._messages.warning(self._w, title, message)

    def show_error(self, title: str, message: str) -> None:
        self._messages.error(self._w, title, message)

    def ask_save_path(
        self,
        caption: str,
        default_path: str,
        filters: Sequence[FileFilter],
    ) -> str | None:
        filter_str = ";;".join(f.to_qt() for f in filters)
        out = self._dialogs.get_save_file(self._w, caption, default_path, filter_str)
        return str(out) if out else None

    def get_plugin_setting(self, plugin_id: str, key: str, default: str | None = None) -> str | None:
        return self._settings.get_raw(plugin_setting_key(plugin_id, key), default)

    def set_plugin_setting(self, plugin_id: str, key: str, value: str) -> None:
        self._settings.set_raw(plugin_setting_key(plugin_id, key), value)

    def remove_plugin_setting(self, plugin_id: str, key: str) -> None:
        self._settings.remove_raw(plugin_setting_key(plugin_id, key))

    def get_app_config(self, section: str, key: str, default: str | None = None) -> str | None:
        return self._config.get(section, key, default)

    def show_settings_form(self, title: str, fields: Sequence[SettingField]) -> None:
        dlg = SettingsDialog(fields, title=title, parent=self._w)
        dlg.exec()
