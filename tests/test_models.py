from pathlib import Path

import pytest

from typoradify.domain.errors import FileReadError, NoActiveDocument, ThemeReadError, WriteError
from typoradify.domain.models import (
    ExportSettings,
    FileFilter,
    ImageReference,
    MarginsType,
    PageSize,
    PrintOptions,
    SourceDocument,
)


def test_source_document_title_and_directory():
    doc = SourceDocument(path=Path("/notes/project/MyDoc.md"), text="Hello")
    assert doc.title == "MyDoc"
    assert doc.directory == Path("/notes/project")


@pytest.mark.parametrize(
    "target, remote",
    [
        ("https://example.com/a.png", True),
        ("file:///tmp/a.png", True),
        ("my-app_2://x", True),
        ("img/a.png", False),
        ("/abs/a.png", False),
        ("img/https://a.png", False),
        ("", False),
    ],
)
def test_image_reference_remote_detection(target, remote):
    assert ImageReference("a", target, 0, 0).is_remote is remote


def test_print_options_from_settings_never_prints_selection_only():
    settings = ExportSettings(
        landscape=True,
        margins_type=MarginsType.MINIMUM,
        page_size=PageSize.LEGAL,
        print_background=True,
        custom_css="ignored",
    )
    opts = PrintOptions.from_settings(settings)
    assert opts == PrintOptions(
        landscape=True,
        margins_type=MarginsType.MINIMUM,
        print_background=True,
        page_size=PageSize.LEGAL,
        print_selection_only=False,
    )


def test_export_settings_defaults():
    s = ExportSettings()
    assert s.auto_numbering is True
    assert s.page_size is PageSize.A4
    assert s.margins_type is MarginsType.DEFAULT
    assert (s.theme, s.custom_css) == ("", "")


def test_file_filter_to_qt():
    assert FileFilter("HTML", ("html", "htm")).to_qt() == "HTML (*.html *.htm)"
    assert FileFilter("PDF", ("pdf",)).to_qt() == "PDF (*.pdf)"


def test_error_messages_for_dialogs():
    assert NoActiveDocument().user_message == "Open a Markdown note before exporting."

    read = FileReadError("/n/a.md", "boom")
    assert read.title == "Read Error"
    assert read.user_message.splitlines()[0] == "Failed to read file:"
    assert read.user_message.endswith("boom")

    theme = ThemeReadError("/t.css")
    assert theme.title == "Theme Error"
    assert theme.user_message.startswith("Failed to read theme stylesheet:")
    assert isinstance(theme, FileReadError)

    assert WriteError("/o.pdf", "denied").title == "Save Error"


def test_domain_package_exports_service_interfaces():
    import typoradify.domain as domain
    from typoradify.services.config.ini_config_service import IniConfigService

    for name in ("IConfigService", "IFileService", "IMarkdownRenderer", "IPdfPrinter", "ISettingsService"):
        assert name in domain.__all__
    assert issubclass(IniConfigService, domain.IConfigService)
