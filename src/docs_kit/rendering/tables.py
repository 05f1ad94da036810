# src/docs_kit/rendering/tables.py

"""Pipe-delimited markdown tables.

A table is a header row, a separator row and any number of body rows,
every row wrapped in pipes::

    | Name | Type |
    |------|:----:|
    | id   | int  |

The separator only marks the table; alignment colons are dropped.
Each table collapses onto a single output line.
"""

import re

from .config import HtmlTheme
from .elements import element

_SEPARATOR_ROW = re.compile(r"^\|[\s:|-]*-[\s:|-]*\|$")


def is_table_row(line: str) -> bool:
    stripped = line.strip()
    return len(stripped) > 1 and stripped.startswith("|") and stripped.endswith("|")


def is_separator_row(line: str) -> bool:
    return bool(_SEPARATOR_ROW.match(line.strip()))


def split_row(line: str) -> list[str]:
    return [cell.strip() for cell in line.strip()[1:-1].split("|")]


def render_tables(text: str, theme: HtmlTheme) -> str:
    lines = text.split("\n")
    out: list[str] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if i + 1 < len(lines) and is_table_row(line) and is_separator_row(lines[i + 1]):
            header = split_row(line)
            i += 2
            rows: list[list[str]] = []
            while i < len(lines) and is_table_row(lines[i]):
                rows.append(split_row(lines[i]))
                i += 1
            out.append(render_table(header, rows, theme))
            continue
        out.append(line)
        i += 1
    return "\n".join(out)


def render_table(header: list[str], rows: list[list[str]], theme: HtmlTheme) -> str:
    head_cells = "".join(element("th", theme.table_header_cell, h) for h in header)
    body_rows = "".join(
        element(
            "tr",
            theme.table_row_even if idx % 2 == 0 else theme.table_row_odd,
            "".join(element("td", theme.table_cell, cell) for cell in row),
        )
        for idx, row in enumerate(rows)
    )
    head = element("thead", theme.table_head, element("tr", "", head_cells))
    return element("table", theme.table, head + element("tbody", "", body_rows))
