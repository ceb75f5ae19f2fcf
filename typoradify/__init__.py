"""Export Markdown notes to styled HTML, raw HTML or PDF."""

__version__ = "0.1.0"
