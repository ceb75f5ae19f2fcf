from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from typoradify.plugins.api import ActionSpec, IAppAPI, IPlugin, IPluginOnLoad

logger = logging.getLogger(__name__)

Handler = Callable[[IAppAPI], None]


class PluginManager:
    """
    Host-side plugin registry.

    Plugins are handed in through their registration functions at startup
    (`register`). Once the host API exists, `activate_all()` runs each plugin's
    optional `on_load(api)` hook and then `activate(api)`; the host then builds its
    menus from `iter_actions()`. A plugin that fails any step is logged and skipped
    so the remaining plugins keep working.
    """

    def __init__(self, *, api: IAppAPI | None = None) -> None:
        self._api: IAppAPI | None = api
        self._plugins: dict[str, IPlugin] = {}
        self._active: dict[str, IPlugin] = {}

    def set_api(self, api: IAppAPI) -> None:
        self._api = api

    def register(self, plugin: IPlugin) -> None:
        pid = str(plugin.meta.id)
        if pid in self._plugins:
            raise ValueError(f"Plugin already registered: {pid}")
        self._plugins[pid] = plugin
        logger.debug("Registered plugin %s", pid)

    def activate_all(self) -> None:
        api = self._api
        if api is None:
            raise RuntimeError("set_api() must be called before activating plugins")

        for pid, plugin in self._plugins.items():
            if pid in self._active:
                continue
            if isinstance(plugin, IPluginOnLoad):
                try:
                    plugin.on_load(api)
                except Exception:
                    logger.exception("Plugin %s failed in on_load", pid)
            try:
                plugin.activate(api)
            except Exception:
                logger.exception("Plugin %s failed to activate", pid)
                continue
            self._active[pid] = plugin
            logger.info("Activated plugin %s", pid)

    def iter_actions(self) -> Sequence[tuple[ActionSpec, Handler]]:
        """(ActionSpec, handler) pairs of active plugins, in registration order."""
        actions: list[tuple[ActionSpec, Handler]] = []
        for pid, plugin in self._active.items():
            try:
                actions.extend(plugin.register_actions())
            except Exception:
                logger.exception("Plugin %s failed to register actions", pid)
        return actions

    def shutdown(self) -> None:
        for pid, plugin in self._active.items():
            try:
                plugin.deactivate()
            except Exception:
                logger.exception("Plugin %s failed to deactivate", pid)
        self._active.clear()
