from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Literal

from typoradify.domain.models import ExportSettings, MarginsType, PageSize

FieldKind = Literal["toggle", "text", "textarea", "dropdown"]


@dataclass(frozen=True)
class SettingField:
    """
    One row of the settings form.

    Renderers walk a list of these and call `on_change(value)` with a typed value:
    bool for toggles, str for text/textarea, the option value for dropdowns.
    """

    id: str
    label: str
    description: str
    kind: FieldKind
    current_value: Any
    on_change: Callable[[Any], None]
    section: str = ""
    options: Sequence[tuple[Any, str]] = ()
    placeholder: str = ""


def build_settings_schema(
    settings: ExportSettings,
    on_change: Callable[[str, Any], None],
) -> list[SettingField]:
    def bind(field_id: str) -> Callable[[Any], None]:
        return lambda value: on_change(field_id, value)

    parser = "Parser"
    printer = "Printer"
    return [
        SettingField(
            id="auto_numbering",
            label="Auto numbering",
            description="Number display equations automatically.",
            kind="toggle",
            current_value=settings.auto_numbering,
            on_change=bind("auto_numbering"),
            section=parser,
        ),
        SettingField(
            id="apply_line_breaks",
            label="Apply line breaks in math blocks",
            description="Treat new lines inside $$ blocks as TeX line breaks.",
            kind="toggle",
            current_value=settings.apply_line_breaks,
            on_change=bind("apply_line_breaks"),
            section=parser,
        ),
        SettingField(
            id="display_line_numbers",
            label="Display line numbers",
            description="Show line numbers in code blocks.",
            kind="toggle",
            current_value=settings.display_line_numbers,
            on_change=bind("display_line_numbers"),
            section=parser,
        ),
        SettingField(
            id="theme",
            label="Theme",
            description="Path to a CSS theme file appended after the default stylesheet.",
            kind="text",
            current_value=settings.theme,
            on_change=bind("theme"),
            section=parser,
            placeholder="/path/to/theme.css",
        ),
        SettingField(
            id="custom_css",
            label="Custom CSS",
            description="Extra CSS appended last.",
            kind="textarea",
            current_value=settings.custom_css,
            on_change=bind("custom_css"),
            section=parser,
            placeholder="body { font-size: 14px; }",
        ),
        SettingField(
            id="landscape",
            label="Orientation",
            description="Page orientation for PDF export.",
            kind="dropdown",
            current_value=settings.landscape,
            on_change=bind("landscape"),
            section=printer,
            options=((False, "Portrait"), (True, "Landscape")),
        ),
        SettingField(
            id="margins_type",
            label="Margins",
            description="Page margins for PDF export.",
            kind="dropdown",
            current_value=settings.margins_type,
            on_change=bind("margins_type"),
            section=printer,
            options=(
                (MarginsType.DEFAULT, "Default"),
                (MarginsType.MINIMUM, "Minimum"),
                (MarginsType.MAXIMUM, "Maximum"),
            ),
        ),
        SettingField(
            id="page_size",
            label="Page size",
            description="Paper size for PDF export.",
            kind="dropdown",
            current_value=settings.page_size,
            on_change=bind("page_size"),
            section=printer,
            options=tuple((p, p.value) for p in PageSize),
        ),
        SettingField(
            id="print_background",
            label="Print background",
            description="Include background colors and images in the PDF.",
            kind="toggle",
            current_value=settings.print_background,
            on_change=bind("print_background"),
            section=printer,
        ),
    ]
