"""Plugin contract and the host-side registry."""

from .api import (
    ActionSpec,
    BasePlugin,
    IAppAPI,
    IPlugin,
    IPluginRegistry,
    PluginMeta,
    PluginRegistration,
)

__all__ = [
    "ActionSpec",
    "BasePlugin",
    "IAppAPI",
    "IPlugin",
    "IPluginRegistry",
    "PluginMeta",
    "PluginRegistration",
]
