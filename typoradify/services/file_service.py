from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from typoradify.domain.interfaces import IFileService


class FileService(IFileService):
    """UTF-8 note reads; export writes go through QSaveFile so a failed save never truncates."""

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_bytes_atomic(self, path: Path, data: bytes) -> None:
        sf = QSaveFile(str(path))
        if not sf.open(QIODevice.OpenModeFlag.WriteOnly):
            raise OSError(f"Cannot open for write: {path}: {sf.errorString()}")
        if sf.write(data) != len(data):
            sf.cancelWriting()
            raise OSError(f"Short write to: {path}")
        if not sf.commit():
            raise OSError(f"Commit failed for: {path}")
