from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import DEFAULT_CSS, FakeApi, FakeFiles, FakePrinter, FakeRenderer
from typoradify.domain.models import ExportMode, MarginsType, PageSize
from typoradify.plugins.builtin.export_plugin import TyporadifyPlugin
from typoradify.utils.constants import PLUGIN_ID

DOC = Path("/notes/MyDoc.md")


@pytest.fixture()
def files() -> FakeFiles:
    return FakeFiles({str(DOC): "Hello"})


@pytest.fixture()
def plugin(files, fake_renderer, fake_printer) -> TyporadifyPlugin:
    return TyporadifyPlugin(
        renderer=fake_renderer,
        files=files,
        printer=fake_printer,
        default_css=lambda: DEFAULT_CSS,
    )


@pytest.fixture()
def api() -> FakeApi:
    return FakeApi(current_path=str(DOC), save_path="/out/MyDoc.html")


def test_meta_and_actions(plugin):
    assert plugin.meta.id == PLUGIN_ID

    actions = plugin.register_actions()
    ids = [spec.id for spec, _ in actions]
    assert ids == ["render-html", "render-raw-html", "render-pdf", "settings"]
    menus = {spec.id: spec.menu for spec, _ in actions}
    assert menus["render-pdf"] == "Export"
    assert menus["settings"] == "Tools"


def test_no_active_document_reports_and_touches_nothing(plugin, files, fake_renderer, fake_printer):
    api = FakeApi(current_path=None)

    for mode in ExportMode:
        assert plugin.run_export(api, mode) is None

    assert files.reads == []
    assert files.writes == {}
    assert fake_renderer.calls == []
    assert fake_printer.calls == []
    assert api.save_prompts == []
    assert api.errors == [("No file open", "Open a Markdown note before exporting.")] * 3


def test_styled_html_export_writes_chosen_path(plugin, api, files):
    out = plugin.run_export(api, ExportMode.STYLED_HTML)

    assert out == Path("/out/MyDoc.html")
    assert files.writes[out].startswith(b"<html># MyDoc")
    caption, default_path, filters = api.save_prompts[0]
    assert caption == "Save to HTML"
    assert Path(default_path) == DOC.parent / "MyDoc.html"
    assert filters[0].extensions == ("html", "htm")
    assert api.notices[0] == "Exporting MyDoc.md…"
    assert api.notices[-1] == f"File saved: {out}"
    assert api.errors == []


def test_pdf_export_uses_printer(plugin, api, files, fake_printer):
    api.save_path = "/out/MyDoc.pdf"
    out = plugin.run_export(api, ExportMode.PDF)

    assert files.writes[out] == b"%PDF-1.4 fake"
    assert api.save_prompts[0][0] == "Save to PDF"
    assert len(fake_printer.calls) == 1


def test_cancelled_save_writes_nothing_and_shows_no_error(plugin, api, files):
    api.save_path = None
    assert plugin.run_export(api, ExportMode.RAW_HTML) is None

    assert files.writes == {}
    assert api.errors == []
    assert len(api.save_prompts) == 1


def test_write_failure_reported_as_save_error(plugin, api, files):
    files.fail_write = PermissionError("read-only")
    assert plugin.run_export(api, ExportMode.STYLED_HTML) is None

    title, message = api.errors[0]
    assert title == "Save Error"
    assert "read-only" in message


def test_missing_theme_reported_before_save_prompt(plugin, api):
    api.set_plugin_setting(PLUGIN_ID, "theme", "/themes/missing.css")
    assert plugin.run_export(api, ExportMode.STYLED_HTML) is None

    assert api.errors[0][0] == "Theme Error"
    assert api.save_prompts == []


def test_unexpected_failure_is_reported_not_raised(files, fake_printer, api):
    plugin = TyporadifyPlugin(
        renderer=FakeRenderer(error=ZeroDivisionError("boom")),
        files=files,
        printer=fake_printer,
        default_css=lambda: DEFAULT_CSS,
    )
    assert plugin.run_export(api, ExportMode.STYLED_HTML) is None
    assert api.errors[0][0] == "Render Error"


def test_printer_failure_is_reported(files, fake_renderer, api):
    plugin = TyporadifyPlugin(
        renderer=fake_renderer,
        files=files,
        printer=FakePrinter(error=RuntimeError("Timed out")),
        default_css=lambda: DEFAULT_CSS,
    )
    assert plugin.run_export(api, ExportMode.PDF) is None
    assert api.errors[0][0] == "Render Error"
    assert files.writes == {}


def test_persisted_settings_apply_to_next_export(plugin, api, fake_renderer, fake_printer):
    api.set_plugin_setting(PLUGIN_ID, "custom_css", "body{color:red}")
    api.set_plugin_setting(PLUGIN_ID, "display_line_numbers", "true")
    api.set_plugin_setting(PLUGIN_ID, "page_size", "Letter")
    api.set_plugin_setting(PLUGIN_ID, "margins_type", "2")
    api.save_path = "/out/MyDoc.pdf"

    plugin.run_export(api, ExportMode.PDF)

    _text, cfg = fake_renderer.calls[0]
    assert cfg.extra_head_tags == f"<style>{DEFAULT_CSS}\nbody{{color:red}}</style>"
    assert cfg.code_renderer_options.display_line_numbers is True
    _html, options, _base = fake_printer.calls[0]
    assert options.page_size is PageSize.LETTER
    assert options.margins_type is MarginsType.MAXIMUM


def test_action_handlers_run_exports(plugin, api, files):
    handlers = {spec.id: fn for spec, fn in plugin.register_actions()}
    handlers["render-raw-html"](api)
    assert Path("/out/MyDoc.html") in files.writes


def test_open_settings_shows_form_and_persists_changes(plugin, api):
    plugin.open_settings(api)

    title, fields = api.forms[0]
    assert title == plugin.meta.name
    by_id = {f.id: f for f in fields}
    assert by_id["auto_numbering"].current_value is True

    by_id["landscape"].on_change(True)
    assert api.get_plugin_setting(PLUGIN_ID, "landscape") == "true"

    by_id["page_size"].on_change(PageSize.A3)
    assert api.get_plugin_setting(PLUGIN_ID, "page_size") == "A3"


def test_on_load_builds_printer_from_app_config(qapp, files, fake_renderer):
    from typoradify.services.pdf.web_pdf_printer import WebEnginePdfPrinter

    api = FakeApi()
    api.config[("export", "pdf_timeout_ms")] = "5000"
    api.config[("export", "pdf_settle_ms")] = "not-a-number"

    plugin = TyporadifyPlugin(renderer=fake_renderer, files=files)
    plugin.on_load(api)

    printer = plugin._printer
    assert isinstance(printer, WebEnginePdfPrinter)
    assert printer._timeout_ms == 5000
    assert printer._settle_ms == 300


def test_orchestrator_requires_printer(files, fake_renderer):
    plugin = TyporadifyPlugin(renderer=fake_renderer, files=files)
    with pytest.raises(RuntimeError):
        _ = plugin.orchestrator
