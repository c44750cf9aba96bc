"""Plain insertions offered by the toolbar: links, images, tables, slide markers."""

from __future__ import annotations

from markdown_engine.buffer.state import EditResult, Selection
from markdown_engine.buffer.validation import ensure_selection

from .text import splice

TABLE_CELL_WIDTH = 12
MAX_TABLE_COLUMNS = 10
MAX_TABLE_ROWS = 20
DEFAULT_TABLE_COLUMNS = 3
DEFAULT_TABLE_ROWS = 2

SLIDE_SEPARATOR = "\n---\n"
CONFETTI_MARKER = "\n<!-- confetti -->\n"


def insert_text(
    buffer: str,
    selection: Selection,
    before: str,
    after: str = "",
    placeholder: str = "",
) -> EditResult:
    """Replace the selection with ``before + (selection or placeholder) + after``."""

    ensure_selection(buffer, selection)
    body = selection.text_in(buffer) or placeholder
    inserted = before + body + after
    text = splice(buffer, selection.start, selection.end, inserted)
    return EditResult.with_caret(text, selection.start + len(inserted))


def _replace_selection(buffer: str, selection: Selection, inserted: str) -> EditResult:
    text = splice(buffer, selection.start, selection.end, inserted)
    return EditResult.with_caret(text, selection.start + len(inserted))


def insert_link(
    buffer: str, selection: Selection, url: str, label: str = ""
) -> EditResult:
    if not url.strip():
        raise ValueError("link url cannot be empty")
    ensure_selection(buffer, selection)
    text = selection.text_in(buffer).strip() or label.strip() or url.strip()
    return _replace_selection(buffer, selection, f"[{text}]({url.strip()})")


def insert_image(
    buffer: str, selection: Selection, url: str, alt: str = ""
) -> EditResult:
    if not url.strip():
        raise ValueError("image url cannot be empty")
    ensure_selection(buffer, selection)
    alt_text = selection.text_in(buffer).strip() or alt.strip() or "image"
    return _replace_selection(buffer, selection, f"![{alt_text}]({url.strip()})")


def markdown_table(columns: int, rows: int) -> str:
    if not 1 <= columns <= MAX_TABLE_COLUMNS:
        raise ValueError(f"columns must be 1..{MAX_TABLE_COLUMNS}, got {columns}")
    if not 1 <= rows <= MAX_TABLE_ROWS:
        raise ValueError(f"rows must be 1..{MAX_TABLE_ROWS}, got {rows}")

    def row(cells: list[str]) -> str:
        return "| " + " | ".join(cell.ljust(TABLE_CELL_WIDTH) for cell in cells) + " |"

    header = row([f"Header {i + 1}" for i in range(columns)])
    separator = "| " + " | ".join("-" * TABLE_CELL_WIDTH for _ in range(columns)) + " |"
    body = [
        row([f"Cell {r * columns + c + 1}" for c in range(columns)])
        for r in range(rows)
    ]
    return "\n".join(["", header, separator, *body])


def insert_table(
    buffer: str,
    selection: Selection,
    columns: int = DEFAULT_TABLE_COLUMNS,
    rows: int = DEFAULT_TABLE_ROWS,
) -> EditResult:
    return insert_text(buffer, selection, markdown_table(columns, rows))


def insert_slide_separator(buffer: str, selection: Selection) -> EditResult:
    return insert_text(buffer, selection, SLIDE_SEPARATOR)


def insert_confetti(buffer: str, selection: Selection) -> EditResult:
    return insert_text(buffer, selection, CONFETTI_MARKER)


__all__ = [
    "TABLE_CELL_WIDTH",
    "MAX_TABLE_COLUMNS",
    "MAX_TABLE_ROWS",
    "SLIDE_SEPARATOR",
    "CONFETTI_MARKER",
    "insert_text",
    "insert_link",
    "insert_image",
    "insert_table",
    "insert_slide_separator",
    "insert_confetti",
    "markdown_table",
]
