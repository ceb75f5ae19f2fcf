"""Plugins shipped with the app."""

from __future__ import annotations

from typoradify.plugins.api import PluginRegistration


def builtin_registrations() -> tuple[PluginRegistration, ...]:
    """Registration functions the host calls at startup, in menu order."""
    from typoradify.plugins.builtin import export_plugin

    return (export_plugin.register,)
