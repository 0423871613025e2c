"""
Output renderers. Each takes the transformed table and the configuration
(the aligned table also takes the column specs) and returns one string.
"""
from __future__ import annotations

import csv
import html
import json
from io import StringIO
from typing import Callable, Dict, List, Optional, Sequence

import yaml

from .config import Configuration, OutputFormat
from .errors import MissingHeaderForTitleColumn
from .sizing import ColumnSpec
from .table import Table
from .utils.width import display_width, pad, strip_ansi

BOX = {
    "h": "─", "v": "│",
    "tl": "┌", "tm": "┬", "tr": "┐",
    "lm": "├", "c": "┼", "rm": "┤",
    "bl": "└", "bm": "┴", "br": "┘",
}


# --------------------------
# Aligned table
# --------------------------
class _Frame:
    """Left edge, inner joint and right edge for content and rule lines."""

    def __init__(self, config: Configuration):
        p = " " * config.padding
        self.pad = config.padding
        self.pretty = config.pretty and not config.no_format
        if self.pretty:
            self.left, self.sep, self.right = BOX["v"] + p, p + BOX["v"] + p, p + BOX["v"]
            self.junction = None
        elif config.column_separator:
            glyph = config.column_separator_glyph
            self.left, self.sep, self.right = "", p + glyph + p, ""
            gw = display_width(glyph)
            self.junction = BOX["c"] if gw == 1 else BOX["h"] * gw
        else:
            self.left, self.sep, self.right = "", p, ""
            self.junction = ""

    def line(self, cells: Sequence[str]) -> str:
        return self.left + self.sep.join(cells) + self.right

    def rule(self, widths: Sequence[int], where: str = "mid") -> str:
        h, fill = BOX["h"], BOX["h"] * self.pad
        body = [h * w for w in widths]
        if not self.pretty:
            return (fill + self.junction + fill).join(body) if self.junction else fill.join(body)
        lcorner, cross, rcorner = {
            "top": (BOX["tl"], BOX["tm"], BOX["tr"]),
            "mid": (BOX["lm"], BOX["c"], BOX["rm"]),
            "bottom": (BOX["bl"], BOX["bm"], BOX["br"]),
        }[where]
        return lcorner + fill + (fill + cross + fill).join(body) + fill + rcorner


def render_table(table: Table, config: Configuration, specs: Optional[List[ColumnSpec]] = None) -> str:
    """Aligned text table.

    Lines, top to bottom: border, header, column numbers, title rule, data
    rows (footer rule before the last one), border. With ``no_format`` cells
    are emitted unpadded and no rules or borders are drawn.
    """
    if table.ncols == 0:
        return "\n" * len(table)

    frame = _Frame(config)
    numbers = [str(s + 1) for s in table.sources]

    if config.no_format or specs is None:
        out = []
        if table.header is not None:
            out.append(frame.line(table.header))
        if config.numbering:
            out.append(frame.line(numbers))
        out.extend(frame.line(r) for r in table.rows())
        return "".join(line + "\n" for line in out)

    widths = [s.width for s in specs]
    wopts = config.width_options

    def fmt(cells: Sequence[str]) -> str:
        return frame.line([pad(c, s.width, s.right, **wopts) for c, s in zip(cells, specs)])

    out = []
    if frame.pretty:
        out.append(frame.rule(widths, "top"))
    if table.header is not None:
        out.append(fmt(table.header))
    if config.numbering:
        out.append(fmt(numbers))
    if (table.header is not None or config.title_separator) and len(out) > int(frame.pretty):
        out.append(frame.rule(widths))

    rows = table.rows()
    for i, row in enumerate(rows):
        if config.footer_separator and i > 0 and i == len(rows) - 1:
            out.append(frame.rule(widths))
        out.append(fmt(row))

    if frame.pretty:
        out.append(frame.rule(widths, "bottom"))
    return "".join(line + "\n" for line in out)


# --------------------------
# Structured formats
# --------------------------
def render_csv(table: Table, config: Configuration, specs=None) -> str:
    buf = StringIO()
    writer = csv.writer(buf, delimiter=",", quotechar='"', doublequote=True,
                        lineterminator="\n", quoting=csv.QUOTE_MINIMAL)
    if table.header is not None:
        writer.writerow(table.header)
    for row in table.rows():
        writer.writerow(row)
    return buf.getvalue()


def _structured(table: Table, config: Configuration):
    """Plain data for JSON/YAML: list of mappings, title-column mapping, or list of lists."""
    rows = [[strip_ansi(v) for v in r] for r in table.rows()]
    if table.header is None:
        if config.json_title_column and rows:
            raise MissingHeaderForTitleColumn("Title-column output needs a header row", None)
        return rows
    labels = [strip_ansi(h) for h in table.header]
    if not config.json_title_column:
        return [dict(zip(labels, r)) for r in rows]
    keyed = {}
    for r in rows:
        if r:
            keyed[r[0]] = dict(zip(labels[1:], r[1:]))
    return keyed


def render_json(table: Table, config: Configuration, specs=None) -> str:
    return json.dumps(_structured(table, config), indent=2, ensure_ascii=False) + "\n"


def render_yaml(table: Table, config: Configuration, specs=None) -> str:
    return yaml.safe_dump(_structured(table, config), default_flow_style=False,
                          allow_unicode=True, sort_keys=False)


def _esc(value: str) -> str:
    return html.escape(strip_ansi(value), quote=True)


def render_html(table: Table, config: Configuration, specs=None) -> str:
    out = ["<table>"]
    if table.header is not None:
        out += ["  <thead>", "    <tr>"]
        out += [f"      <th>{_esc(h)}</th>" for h in table.header]
        out += ["    </tr>", "  </thead>"]
    out.append("  <tbody>")
    for row in table.rows():
        out.append("    <tr>")
        out += [f"      <td>{_esc(v)}</td>" for v in row]
        out.append("    </tr>")
    out += ["  </tbody>", "</table>"]
    return "\n".join(out) + "\n"


RENDERERS: Dict[OutputFormat, Callable[..., str]] = {
    OutputFormat.TABLE: render_table,
    OutputFormat.CSV: render_csv,
    OutputFormat.JSON: render_json,
    OutputFormat.HTML: render_html,
    OutputFormat.YAML: render_yaml,
}
