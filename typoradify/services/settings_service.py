from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from typing import Any, Protocol

from PyQt6.QtCore import QSettings

from typoradify.domain.interfaces import ISettingsService
from typoradify.domain.models import ExportSettings, MarginsType, PageSize
from typoradify.utils.constants import SETTINGS_RECENTS

logger = logging.getLogger(__name__)


class SettingsService(ISettingsService):
    """Host-side key/value persistence on top of QSettings."""

    def __init__(self, qsettings: QSettings) -> None:
        self._s = qsettings

    def get_raw(self, key: str, default: str | None = None) -> str | None:
        v = self._s.value(key, default)
        return None if v is None else str(v)

    def set_raw(self, key: str, value: str) -> None:
        self._s.setValue(key, value)
        self._s.sync()

    def remove_raw(self, key: str) -> None:
        self._s.remove(key)
        self._s.sync()

    def get_recent(self) -> list[str]:
        v = self._s.value(SETTINGS_RECENTS, [])
        if isinstance(v, str):  # INI backends collapse single-item lists
            return [v] if v else []
        return [str(x) for x in v] if isinstance(v, list) else []

    def set_recent(self, recent: Iterable[str]) -> None:
        self._s.setValue(SETTINGS_RECENTS, list(recent))


class PluginSettingsAPI(Protocol):
    """The slice of the host API the export settings need (plain strings only)."""

    def get_plugin_setting(self, plugin_id: str, key: str, default: str | None = None) -> str | None: ...
    def set_plugin_setting(self, plugin_id: str, key: str, value: str) -> None: ...
    def remove_plugin_setting(self, plugin_id: str, key: str) -> None: ...


_FIELDS = {f.name: f for f in dataclasses.fields(ExportSettings)}
_DEFAULTS = ExportSettings()


def _parse_bool(raw: str) -> bool:
    s = raw.strip().lower()
    if s in {"1", "true", "yes", "on"}:
        return True
    if s in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"not a boolean: {raw!r}")


def _coerce(field_id: str, value: Any) -> Any:
    """Convert a persisted string (or UI value) to the ExportSettings field type."""
    default = getattr(_DEFAULTS, field_id)
    if isinstance(default, bool):
        return value if isinstance(value, bool) else _parse_bool(str(value))
    if isinstance(default, MarginsType):
        return MarginsType(int(value))
    if isinstance(default, PageSize):
        return value if isinstance(value, PageSize) else PageSize(str(value))
    return "" if value is None else str(value)


def _serialize(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, MarginsType):
        return str(int(value))
    if isinstance(value, PageSize):
        return value.value
    return str(value)


class ExportSettingsStore:
    """
    Reads and writes ExportSettings through the host's plugin-scoped string settings.

    Each field is stored under its own key (the dataclass field name). Missing or
    corrupt values fall back to the defaults; the export itself never fails on them.
    """

    def __init__(self, api: PluginSettingsAPI, plugin_id: str) -> None:
        self._api = api
        self._plugin_id = plugin_id

    def load(self) -> ExportSettings:
        values: dict[str, Any] = {}
        for name in _FIELDS:
            raw = self._api.get_plugin_setting(self._plugin_id, name, None)
            if raw is None:
                continue
            try:
                values[name] = _coerce(name, raw)
            except ValueError:
                logger.warning("Dropping invalid value for setting %s: %r", name, raw)
                self._api.remove_plugin_setting(self._plugin_id, name)
        return dataclasses.replace(_DEFAULTS, **values)

    def save(self, settings: ExportSettings) -> None:
        for name in _FIELDS:
            self._api.set_plugin_setting(self._plugin_id, name, _serialize(getattr(settings, name)))

    def update(self, field_id: str, value: Any) -> ExportSettings:
        if field_id not in _FIELDS:
            raise KeyError(field_id)
        coerced = _coerce(field_id, value)
        logger.info("[CONFIG] Change %s to %s", field_id, _serialize(coerced))
        self._api.set_plugin_setting(self._plugin_id, field_id, _serialize(coerced))
        return self.load()
