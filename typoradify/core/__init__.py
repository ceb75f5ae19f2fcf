"""Pure text transforms applied before Markdown reaches the parser."""

from .assembler import assemble, document_title
from .image_paths import find_image_references, resolve_image_paths

__all__ = [
    "assemble",
    "document_title",
    "find_image_references",
    "resolve_image_paths",
]
