from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QCheckBox, QComboBox, QLineEdit, QPlainTextEdit

from typoradify.domain.models import ExportSettings, MarginsType, PageSize
from typoradify.services.settings_schema import SettingField, build_settings_schema
from typoradify.services.ui.settings_dialog import SettingsDialog


@pytest.fixture()
def changes() -> list:
    return []


@pytest.fixture()
def dialog(qapp, changes) -> SettingsDialog:
    settings = ExportSettings(
        theme="/t.css", custom_css="p{}", margins_type=MarginsType.MINIMUM, page_size=PageSize.A5
    )
    fields = build_settings_schema(settings, lambda fid, v: changes.append((fid, v)))
    dlg = SettingsDialog(fields, title="Export")
    yield dlg
    dlg.close()


def test_one_editor_per_field(dialog):
    assert isinstance(dialog.editors["auto_numbering"], QCheckBox)
    assert isinstance(dialog.editors["theme"], QLineEdit)
    assert isinstance(dialog.editors["custom_css"], QPlainTextEdit)
    assert isinstance(dialog.editors["page_size"], QComboBox)
    assert len(dialog.editors) == 9
    assert dialog.windowTitle() == "Export"


def test_editors_show_current_values(dialog):
    assert dialog.editors["auto_numbering"].isChecked() is True
    assert dialog.editors["landscape"].currentText() == "Portrait"
    assert dialog.editors["margins_type"].currentText() == "Minimum"
    assert dialog.editors["page_size"].currentText() == "A5"
    assert dialog.editors["theme"].text() == "/t.css"
    assert dialog.editors["custom_css"].toPlainText() == "p{}"


def test_toggle_reports_bool(dialog, changes):
    dialog.editors["print_background"].setChecked(True)
    assert changes == [("print_background", True)]


def test_text_reports_on_editing_finished(dialog, changes):
    le = dialog.editors["theme"]
    le.setText("/other.css")
    assert changes == []
    le.editingFinished.emit()
    assert changes == [("theme", "/other.css")]


def test_textarea_reports_text(dialog, changes):
    dialog.editors["custom_css"].setPlainText("h1{}")
    assert changes[-1] == ("custom_css", "h1{}")


def test_dropdown_reports_option_value(dialog, changes):
    dialog.editors["landscape"].setCurrentIndex(1)
    assert changes == [("landscape", True)]


def test_unknown_kind_rejected(qapp):
    bad = SettingField(
        id="x", label="X", description="", kind="slider", current_value=0, on_change=lambda v: None
    )
    with pytest.raises(ValueError, match="slider"):
        SettingsDialog([bad])
