from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Literal, Protocol, runtime_checkable

from typoradify.domain.models import FileFilter
from typoradify.services.settings_schema import SettingField

# -----------------------------------------------------------------------------
# Core metadata + action specs
# -----------------------------------------------------------------------------


@dataclass(frozen=True)
class PluginMeta:
    """
    Metadata describing a plugin.

    `id` must be globally unique and stable over time; plugin settings are keyed
    by it.
    """

    id: str  # e.g. "org.typoradify.export"
    name: str
    version: str
    description: str = ""
    author: str = ""
    license: str = ""


MenuName = Literal["File", "Export", "Tools", "Help"]


@dataclass(frozen=True)
class ActionSpec:
    """
    Declarative description of a command the host surfaces in a menu.

    `menu` is a suggested placement; the host may re-home actions.
    """

    id: str  # e.g. "render-pdf"
    title: str  # UI label
    menu: str | MenuName
    shortcut: str | None = None
    status_tip: str | None = None


# -----------------------------------------------------------------------------
# Host -> Plugin stable API (no Qt types)
# -----------------------------------------------------------------------------


class IAppAPI(Protocol):
    """
    Stable capabilities exposed to plugins.

    No Qt types appear here; values are plain data.
    """

    # Document context
    def get_current_path(self) -> str | None: ...

    # UX messaging; notify() is transient and non-modal
    def notify(self, message: str) -> None: ...
    def show_info(self, title: str, message: str) -> None: ...
    def show_warning(self, title: str, message: str) -> None: ...
    def show_error(self, title: str, message: str) -> None: ...

    # Save dialog: returns the chosen path, or None when the user cancels.
    def ask_save_path(
        self,
        caption: str,
        default_path: str,
        filters: Sequence[FileFilter],
    ) -> str | None: ...

    # Plugin-scoped settings (strings for backend stability)
    def get_plugin_setting(
        self,
        plugin_id: str,
        key: str,
        default: str | None = None,
    ) -> str | None: ...

    def set_plugin_setting(self, plugin_id: str, key: str, value: str) -> None: ...
    def remove_plugin_setting(self, plugin_id: str, key: str) -> None: ...

    # Operational config (INI), read-only
    def get_app_config(self, section: str, key: str, default: str | None = None) -> str | None: ...

    # Host renders a declarative settings form
    def show_settings_form(self, title: str, fields: Sequence[SettingField]) -> None: ...


# -----------------------------------------------------------------------------
# Plugin contract
# -----------------------------------------------------------------------------


@runtime_checkable
class IPlugin(Protocol):
    """
    Main plugin contract.

    Lifecycle:
      - activate(api) is called once the host API exists
      - deactivate() is called on shutdown
    """

    meta: PluginMeta

    def activate(self, api: IAppAPI) -> None: ...

    def deactivate(self) -> None: ...

    def register_actions(self) -> Sequence[tuple[ActionSpec, Callable[[IAppAPI], None]]]:
        """Return (ActionSpec, handler) tuples. Handlers receive the IAppAPI."""
        ...


@runtime_checkable
class IPluginOnLoad(Protocol):
    """Optional hook: called once, before activate(); build expensive collaborators here."""

    def on_load(self, api: IAppAPI) -> None: ...


class BasePlugin:
    """No-op lifecycle so plugins only implement what they need."""

    meta: PluginMeta

    def activate(self, api: IAppAPI) -> None:  # pragma: no cover
        self._api = api  # type: ignore[attr-defined]

    def deactivate(self) -> None:  # pragma: no cover
        pass

    def register_actions(
        self,
    ) -> Sequence[tuple[ActionSpec, Callable[[IAppAPI], None]]]:  # pragma: no cover
        return ()


class IPluginRegistry(Protocol):
    """What a registration function receives from the host at startup."""

    def register(self, plugin: IPlugin) -> None: ...


# A plugin module exposes one of these; the host calls it with its registry.
PluginRegistration = Callable[[IPluginRegistry], None]
