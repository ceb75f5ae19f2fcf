from __future__ import annotations

from pathlib import Path


class ExportError(Exception):
    """Base for failures of a single export command. Caught once at the command boundary."""

    title = "Export Error"

    @property
    def user_message(self) -> str:
        return str(self)


class NoActiveDocument(ExportError):
    title = "No file open"

    def __init__(self) -> None:
        super().__init__("Open a Markdown note before exporting.")


class FileReadError(ExportError):
    title = "Read Error"
    what = "file"

    def __init__(self, path: Path | str, reason: object = None) -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"Failed to read {self.what}:\n{self.path}"
        if reason is not None:
            msg += f"\n{reason}"
        super().__init__(msg)


class ThemeReadError(FileReadError):
    title = "Theme Error"
    what = "theme stylesheet"


class SaveCancelled(ExportError):
    """User dismissed the save dialog. Ends the export silently."""

    def __init__(self) -> None:
        super().__init__("Save cancelled")


class WriteError(ExportError):
    title = "Save Error"

    def __init__(self, path: Path | str, reason: object = None) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to write file:\n{self.path}\n{reason}")


class RenderError(ExportError):
    title = "Render Error"
