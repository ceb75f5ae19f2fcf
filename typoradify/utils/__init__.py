"""App constants and utilities."""

from .constants import (
    APP_NAME,
    APP_ORG,
    HTML_DOCUMENT_TEMPLATE,
    MATHJAX_CONFIG,
    MAX_RECENTS,
    PLUGIN_ID,
    SETTINGS_RECENTS,
)

__all__ = [
    "APP_ORG",
    "APP_NAME",
    "PLUGIN_ID",
    "HTML_DOCUMENT_TEMPLATE",
    "MATHJAX_CONFIG",
    "SETTINGS_RECENTS",
    "MAX_RECENTS",
]
