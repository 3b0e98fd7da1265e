# topmark:header:start
#
#   project      : OptBind
#   file         : report.py
#   file_relpath : src/optbind/report.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Renderers for the diagnostic option table.

The default encoding is the flat, tab-separated table:

    option\tdefault\ttype
    <name>\t<value>\t<type>
    ...

Machine (JSON, NDJSON) and Markdown encodings carry the same three fields per row.
All renderers are pure functions of a sequence of
[`OptionMeta`][optbind.registry.OptionMeta] snapshots.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

    from optbind.registry import OptionMeta

TABLE_HEADER: Final[tuple[str, str, str]] = ("option", "default", "type")


class OutputFormat(str, Enum):
    """Encoding of the diagnostic table.

    Members:
      DEFAULT: Tab-separated text table with a header row.
      JSON: A single JSON array of ``{"option", "default", "type"}`` objects.
      NDJSON: One JSON object per line.
      MARKDOWN: A Markdown table.
    """

    DEFAULT = "default"
    JSON = "json"
    NDJSON = "ndjson"
    MARKDOWN = "markdown"


def as_dict(meta: OptionMeta) -> dict[str, str]:
    """Return one row as an ``{"option", "default", "type"}`` mapping."""
    return dict(zip(TABLE_HEADER, (meta.name, meta.value, meta.type)))


def render_text(rows: Sequence[OptionMeta]) -> str:
    """Render the tab-separated table (header row included, newline-terminated rows)."""
    lines: list[str] = ["\t".join(TABLE_HEADER)]
    lines.extend(f"{m.name}\t{m.value}\t{m.type}" for m in rows)
    return "".join(f"{line}\n" for line in lines)


def render_json(rows: Sequence[OptionMeta]) -> str:
    """Render the table as a JSON array followed by a newline."""
    return json.dumps([as_dict(m) for m in rows], indent=2) + "\n"


def render_ndjson(rows: Sequence[OptionMeta]) -> str:
    """Render one JSON object per line."""
    return "".join(json.dumps(as_dict(m)) + "\n" for m in rows)


def _md_cell(text: str) -> str:
    # Pipes would split the cell; backticks keep values literal.
    escaped: str = text.replace("|", "\\|")
    return f"`{escaped}`" if escaped else ""


def render_markdown(rows: Sequence[OptionMeta]) -> str:
    """Render the table as a Markdown table."""
    lines: list[str] = [
        "| " + " | ".join(TABLE_HEADER) + " |",
        "| " + " | ".join("---" for _ in TABLE_HEADER) + " |",
    ]
    lines.extend(
        f"| {_md_cell(m.name)} | {_md_cell(m.value)} | {_md_cell(m.type)} |" for m in rows
    )
    return "".join(f"{line}\n" for line in lines)


def render(rows: Sequence[OptionMeta], fmt: OutputFormat = OutputFormat.DEFAULT) -> str:
    """Render ``rows`` in the requested format.

    Args:
        rows (Sequence[OptionMeta]): Option snapshots, in display order.
        fmt (OutputFormat): Requested encoding.

    Returns:
        str: The rendered table.
    """
    if fmt == OutputFormat.JSON:
        return render_json(rows)
    if fmt == OutputFormat.NDJSON:
        return render_ndjson(rows)
    if fmt == OutputFormat.MARKDOWN:
        return render_markdown(rows)
    return render_text(rows)
