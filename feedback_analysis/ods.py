# Feedback Analysis
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Spreadsheet building blocks for the `.ods` report.

Sheets are described as a list of `(key, title)` columns plus a list of row
dicts. Every sheet gets a bold header row, content-based column widths, a
frozen header and an autofilter. The cosmetic parts are best-effort: a viewer
specific setting that cannot be written never aborts the report.
"""

import re
from typing import Any, Sequence, cast

from odfdo import Document
from odfdo.cell import Cell
from odfdo.column import Column
from odfdo.config_elements import ConfigItem, ConfigItemMapEntry
from odfdo.element import Element
from odfdo.row import Row
from odfdo.style import Style
from odfdo.table import Table

from feedback_analysis.hash_utils import md5_text


Columns = Sequence[tuple[str, str]]

MAX_SHEET_NAME = 31
CM_PER_CHAR = 0.12
MIN_COLUMN_CM = 3.0
MAX_COLUMN_CM = 24.0

# (name, type, value) of the per-sheet view settings that freeze row 1.
FROZEN_HEADER_SETTINGS: tuple[tuple[str, str, int], ...] = (
    ("HorizontalSplitMode", "short", 0),
    ("HorizontalSplitPosition", "int", 0),
    ("VerticalSplitMode", "short", 2),
    ("VerticalSplitPosition", "int", 1),
)

# Control characters (except TAB, LF, CR), surrogates and the two
# noncharacters are not allowed in XML 1.0 and make lxml reject the document.
_INVALID_XML_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F]|[\uD800-\uDFFF]|[\uFFFE\uFFFF]")
_NAME_CHARS_RE = re.compile(r"[^A-Za-z0-9_]")


def xml_text(value: Any) -> str:
    """Convert a value to text that can be stored in a cell."""

    if value is None:
        return ""
    return _INVALID_XML_RE.sub("", str(value))


def style_name(prefix: str, scope: str, suffix: str = "") -> str:
    """Build a deterministic ASCII style name for a sheet-scoped style."""

    readable = _NAME_CHARS_RE.sub("_", scope).strip("_")[:40] or "x"
    name = f"{prefix}_{readable}_{md5_text(scope)[:8]}"
    if suffix:
        name += "_" + _NAME_CHARS_RE.sub("_", suffix)
    return name


def column_letters(number: int) -> str:
    """Return the spreadsheet column label of a 1-based column number."""

    letters = ""
    while number > 0:
        number, rem = divmod(number - 1, 26)
        letters = chr(ord("A") + rem) + letters
    return letters or "A"


def unique_sheet_name(preferred: str, used: set[str]) -> str:
    """
    Return a valid sheet name not contained in `used`.

    Sheet names are limited to 31 characters and may not contain slashes or
    line breaks. Clashes get a numeric suffix (`name_2`, `name_3`, ...).
    """

    name = xml_text(preferred)
    for char in "\r\n/\\":
        name = name.replace(char, " " if char in "\r\n" else "_")
    name = name.strip()[:MAX_SHEET_NAME] or "Sheet"

    candidate = name
    counter = 2
    while candidate in used:
        suffix = f"_{counter}"
        candidate = name[: MAX_SHEET_NAME - len(suffix)] + suffix
        counter += 1
    return candidate


def new_spreadsheet() -> Document:
    """Create an empty spreadsheet document without the default sheet."""

    doc = Document.new("spreadsheet")
    for table in list(doc.body.tables):
        doc.body.delete(table)
    return doc


def append_sheet(doc: Document, name: str, columns: Columns, rows: Sequence[dict[str, Any]]) -> tuple[str, int, int]:
    """
    Append a sheet with a header row and one row per dict.

    Integers become numeric cells, all other values text cells.

    Returns:
        `(name, column count, row count including the header)`, the input of
        `finish_spreadsheet()`.
    """

    table = Table(name)

    for number, width in enumerate(_column_widths(columns, rows), start=1):
        col_style = _automatic_style(
            doc,
            "table-column",
            name=style_name("col", name, str(number)),
            area="table-column",
            width=f"{width:.2f}cm",
        )
        if col_style is not None:
            table.append(Column(style=col_style.name))

    header_style = _automatic_style(doc, "table-cell", name=style_name("hdr", name), area="text", bold=True)
    header = Row()
    for _key, title in columns:
        cell = Cell(text=xml_text(title))
        if header_style is not None:
            cell.style = header_style.name
        header.append_cell(cell)

    # Spreadsheet applications repeat and freeze rows inside this group.
    header_rows = Element.from_tag("table:table-header-rows")
    header_rows.append(header)
    table.append(header_rows)

    for values in rows:
        row = Row()
        for key, _title in columns:
            value = values.get(key, "")
            if isinstance(value, int) and not isinstance(value, bool):
                row.append_cell(Cell(value=value))
            else:
                row.append_cell(Cell(text=xml_text(value)))
        table.append_row(row)

    doc.body.append(table)
    return name, len(columns), len(rows) + 1


def finish_spreadsheet(doc: Document, sheets: Sequence[tuple[str, int, int]]) -> None:
    """Freeze the header row and add an autofilter on every sheet."""

    _freeze_header_rows(doc)
    _add_autofilters(doc, sheets)


def _column_widths(columns: Columns, rows: Sequence[dict[str, Any]]) -> list[float]:
    widths: list[float] = []
    for key, title in columns:
        chars = max([len(title)] + [len(xml_text(r.get(key, ""))) for r in rows])
        widths.append(min(max(chars * CM_PER_CHAR, MIN_COLUMN_CM), MAX_COLUMN_CM))
    return widths


def _automatic_style(doc: Document, family: str, **kwargs: Any) -> Style | None:
    """Create a style and register it as automatic style, or return None."""

    try:
        style = Style(family, **kwargs)
        doc.insert_style(style, automatic=True)
    except Exception:  # noqa: BLE001
        return None
    return style


def _freeze_header_rows(doc: Document) -> None:
    """
    Write per-sheet view settings that freeze the first row.

    The settings live in `settings.xml` below ooo:view-settings / Views /
    Tables, one map entry per sheet. The template entry of the default sheet
    is cloned for each of our sheets.
    """

    try:
        view_settings = doc.settings.get_element('//config:config-item-set[@config:name="ooo:view-settings"]')
        view = view_settings.get_element('config:config-item-map-indexed[@config:name="Views"]').get_element(
            "config:config-item-map-entry"
        )
        tables = view.get_element('config:config-item-map-named[@config:name="Tables"]')
        template = cast(ConfigItemMapEntry, tables.get_element("config:config-item-map-entry"))
        names = [t.name for t in doc.body.tables if t.name]
        if template is None or not names:
            return

        for child in list(tables.children):
            tables.delete(child)

        for sheet in names:
            entry = cast(ConfigItemMapEntry, template.clone)
            entry.name = sheet
            for setting, config_type, value in FROZEN_HEADER_SETTINGS:
                _put_config_item(entry, setting, config_type, value)
            tables.append(entry)
    except Exception:  # noqa: BLE001
        # Missing view settings surface as AttributeError on None.
        return


def _put_config_item(entry: Element, name: str, config_type: str, value: int) -> None:
    existing = [
        item
        for item in entry.get_elements("config:config-item")
        if isinstance(item, ConfigItem) and item.name == name
    ]
    if not existing:
        entry.append(ConfigItem(name=name, config_type=config_type, value=value))
        return
    existing[0].config_type = config_type
    existing[0].value = value


def _add_autofilters(doc: Document, sheets: Sequence[tuple[str, int, int]]) -> None:
    """
    Add one database range with filter buttons per sheet.

    The range spans A1 to the last used cell and declares the first row as
    header, so the header cells show the filter dropdowns.
    """

    try:
        for old in doc.body.get_elements("table:database-ranges"):
            doc.body.delete(old)

        ranges = Element.from_tag("table:database-ranges")
        for name, width, height in sheets:
            if name and width > 0 and height > 0:
                ranges.append(_database_range(name, width, height))
        doc.body.append(ranges)
    except Exception:  # noqa: BLE001
        return


def _database_range(sheet: str, width: int, height: int) -> Element:
    quoted = "'{}'".format(sheet.replace("'", "''"))

    db_range = Element.from_tag("table:database-range")
    for attribute, value in (
        ("table:name", style_name("db", sheet)),
        ("table:target-range-address", f"{quoted}.A1:{column_letters(width)}{height}"),
        ("table:display-filter-buttons", "true"),
        ("table:contains-header", "true"),
    ):
        db_range.set_attribute(attribute, value)

    table_filter = Element.from_tag("table:filter")
    table_filter.set_attribute("table:display-filter-buttons", "true")
    db_range.append(table_filter)
    return db_range
