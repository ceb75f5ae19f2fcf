from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IFileDialogService(Protocol):
    """
    File pickers used by the host: choosing a note to open and an export destination.
    `filter_str` uses Qt's ``Name (*.ext ...)`` syntax, entries joined by ``;;``.
    """

    def get_open_file(
        self,
        parent: Any | None,
        caption: str,
        start_dir: str | None,
        filter_str: str,
    ) -> Path | None:
        """Return the chosen note, or None if cancelled."""
        ...

    def get_save_file(
        self,
        parent: Any | None,
        caption: str,
        start_path: str | None,
        filter_str: str,
    ) -> Path | None:
        """Return the export destination (`start_path` pre-fills it), or None if cancelled."""
        ...
