from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtWidgets import (
    QCheckBox,
    QComboBox,
    QDialog,
    QFormLayout,
    QGroupBox,
    QHBoxLayout,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from typoradify.services.settings_schema import SettingField


class SettingsDialog(QDialog):
    """Renders a list of SettingField rows as a Qt form, one group box per section."""

    def __init__(self, fields: Sequence[SettingField], *, title: str = "Settings", parent=None):
        super().__init__(parent)
        self.setWindowTitle(title)
        self.setModal(True)
        self.resize(520, 560)

        # field id -> editor widget (tests and callers can reach them)
        self.editors: dict[str, QWidget] = {}

        root = QVBoxLayout(self)
        groups: dict[str, QFormLayout] = {}
        for f in fields:
            form = groups.get(f.section)
            if form is None:
                box = QGroupBox(f.section or "General", self)
                form = QFormLayout(box)
                groups[f.section] = form
                root.addWidget(box)

            editor = self._create_editor(f)
            editor.setToolTip(f.description)
            self.editors[f.id] = editor
            form.addRow(f.label, editor)

        buttons = QHBoxLayout()
        buttons.addStretch(1)
        self.close_btn = QPushButton("Close")
        self.close_btn.clicked.connect(self.accept)
        buttons.addWidget(self.close_btn)
        root.addLayout(buttons)

    def _create_editor(self, f: SettingField) -> QWidget:
        if f.kind == "toggle":
            cb = QCheckBox(self)
            cb.setChecked(bool(f.current_value))
            cb.toggled.connect(lambda checked, fn=f.on_change: fn(bool(checked)))
            return cb

        if f.kind == "text":
            le = QLineEdit(self)
            le.setPlaceholderText(f.placeholder)
            le.setText(str(f.current_value or ""))
            le.editingFinished.connect(lambda w=le, fn=f.on_change: fn(w.text()))
            return le

        if f.kind == "textarea":
            te = QPlainTextEdit(self)
            te.setPlaceholderText(f.placeholder)
            te.setPlainText(str(f.current_value or ""))
            te.textChanged.connect(lambda w=te, fn=f.on_change: fn(w.toPlainText()))
            return te

        if f.kind == "dropdown":
            combo = QComboBox(self)
            for value, label in f.options:
                combo.addItem(label, value)
            for i, (value, _label) in enumerate(f.options):
                if value == f.current_value:
                    combo.setCurrentIndex(i)
                    break
            combo.currentIndexChanged.connect(
                lambda i, w=combo, fn=f.on_change: fn(w.itemData(i))
            )
            return combo

        raise ValueError(f"Unknown setting kind: {f.kind}")
