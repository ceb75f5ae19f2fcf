from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from typoradify.services.config.ini_config_service import IniConfigService
from typoradify.utils.constants import (
    DEFAULT_LOG_LEVEL,
    DEFAULT_PDF_SETTLE_MS,
    DEFAULT_PDF_TIMEOUT_MS,
)


def _project_root_fallback() -> Path:
    # app_config.py -> typoradify/services/config/app_config.py
    return Path(__file__).resolve().parents[3]


@dataclass(frozen=True)
class AppConfig:
    """Typed view over IniConfigService for the values the app actually reads."""

    ini: IniConfigService

    @property
    def pdf_timeout_ms(self) -> int:
        v = self.ini.get_int("export", "pdf_timeout_ms", DEFAULT_PDF_TIMEOUT_MS)
        return v if v and v > 0 else DEFAULT_PDF_TIMEOUT_MS

    @property
    def pdf_settle_ms(self) -> int:
        v = self.ini.get_int("export", "pdf_settle_ms", DEFAULT_PDF_SETTLE_MS)
        return v if v is not None and v >= 0 else DEFAULT_PDF_SETTLE_MS

    @property
    def log_level(self) -> int:
        name = (self.ini.get("logging", "level", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).strip().upper()
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO

    def get(self, section: str, key: str, default: str | None = None) -> str | None:
        return self.ini.get(section, key, default)

    @property
    def loaded_from(self) -> Path | None:
        return self.ini.loaded_from


def build_app_config(
    *, explicit_ini: Path | None = None, project_root: Path | None = None
) -> AppConfig:
    root = project_root or _project_root_fallback()
    return AppConfig(ini=IniConfigService(explicit_path=explicit_ini, project_root=root))
