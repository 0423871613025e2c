"""Per-column width and alignment, measured over the transformed table."""
from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import List

from .config import Configuration
from .table import Table, is_numeric
from .utils.width import display_width, strip_ansi


@dataclass(frozen=True)
class ColumnSpec:
    width: int
    numeric: bool
    right: bool


def column_is_numeric(values) -> bool:
    """A single non-empty, non-numeric value demotes the column to text."""
    filled = [v for v in values if strip_ansi(v).strip()]
    return bool(filled) and all(is_numeric(v) for v in filled)


def size_columns(table: Table, config: Configuration) -> List[ColumnSpec]:
    measure = partial(display_width, **config.width_options)
    specs = []
    for i in range(table.ncols):
        series = table.frame[i]
        width = int(series.map(measure).max()) if len(series) else 0
        if table.header is not None:
            width = max(width, measure(table.header[i]))
        numeric = column_is_numeric(series.tolist())
        right = table.right_hint[i] or (numeric and not config.no_numeric_align)
        specs.append(ColumnSpec(width=width, numeric=numeric, right=right))
    return specs
