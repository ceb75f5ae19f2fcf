"""PDF rasterization through the host's embedded browser engine."""

from .web_pdf_printer import WebEnginePdfPrinter, build_page_layout

__all__ = ["WebEnginePdfPrinter", "build_page_layout"]
