"""Bundled assets shipped inside the package."""

from __future__ import annotations

from importlib.resources import files

DEFAULT_CSS_NAME = "default.css"


def read_default_css() -> str:
    return files(__name__).joinpath(DEFAULT_CSS_NAME).read_text(encoding="utf-8")
