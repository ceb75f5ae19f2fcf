from __future__ import annotations

import os
from pathlib import PurePath

from .image_paths import resolve_image_paths


def document_title(filepath: str | PurePath) -> str:
    """File name without its extension: ``/notes/MyDoc.md`` -> ``MyDoc``."""
    return PurePath(filepath).stem


def assemble(markdown: str, filepath: str | PurePath) -> str:
    """
    Prepend a level-1 title heading and resolve local image paths against the
    document's directory. Output is ready for the Markdown parser.
    """
    title = document_title(filepath)
    text = f"# {title}\n\n{markdown}"
    return resolve_image_paths(text, os.path.dirname(os.fspath(filepath)))
