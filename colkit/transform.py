"""
Row and column transforms, applied in a fixed order:
filter -> column selection -> sort -> group.

The filter runs on the raw input lines, before the header is taken and
before tokenizing. Only the filter changes the row count. Sorting is
stable and grouping never moves rows, it only blanks repeated values.
"""
from __future__ import annotations

import re
from typing import List, Optional, Sequence

import numpy as np
import pandas as pd

from .config import Configuration
from .errors import InvalidPattern
from .table import Table, is_numeric, split_header, tokenize
from .utils.logging import get_logger
from .utils.width import strip_ansi

logger = get_logger(__name__)


def compile_filter(pattern: Optional[str]) -> Optional[re.Pattern]:
    if pattern is None:
        return None
    try:
        return re.compile(pattern)
    except re.error as e:
        raise InvalidPattern(f"Invalid filter regex '{pattern}': {e}", pattern) from e


def filter_lines(lines: Sequence[str], pattern: Optional[re.Pattern]) -> List[str]:
    """Keep the untokenized lines that match ``pattern`` anywhere."""
    lines = list(lines)
    if pattern is None:
        return lines
    mask = pd.Series(lines, dtype=object).map(pattern.search).notna()
    logger.debug("filter kept %d of %d lines", int(mask.sum()), len(lines))
    return [line for line, keep in zip(lines, mask) if keep]


def select_columns(table: Table, indices: List[int]) -> Table:
    """Rebuild every row from the given 0-based source columns.

    Indices refer to the tokenized source columns; out-of-range ones yield
    empty cells and repeats are allowed. An empty list keeps all columns.
    """
    if not indices:
        return table
    n = table.ncols
    frame = table.frame.reindex(columns=indices, fill_value="")
    frame.columns = range(len(indices))
    header = None
    if table.header is not None:
        header = [table.header[i] if i < n else "" for i in indices]
    hints = [table.right_hint[i] if i < n else False for i in indices]
    return Table(frame=frame, header=header, right_hint=hints, sources=list(indices))


def fit_header(table: Table, header_text: str, config: Configuration) -> Table:
    """Install an explicit header, truncated or padded to the output columns."""
    cells = tokenize(header_text, config.separator, config.collapse_blanks)
    cells = (cells + [""] * table.ncols)[:table.ncols]
    labels, hints = split_header(cells)
    return Table(frame=table.frame, header=labels, right_hint=hints, sources=table.sources)


def _numeric_key(series: pd.Series) -> pd.Series:
    return series.map(lambda v: float(strip_ansi(v).strip()) if is_numeric(v) else np.nan)


def sort_rows(table: Table, column: Optional[int], descending: bool = False) -> Table:
    """Stable sort on the 1-based output ``column``.

    Numeric when every non-empty value is numeric, otherwise by code point.
    Empty values sort lowest. A column beyond the table is all empty, so
    the order is left as is.
    """
    if column is None or column > table.ncols or len(table) < 2:
        return table
    idx = column - 1
    values = table.frame[idx]
    filled = values[values.map(lambda v: strip_ansi(v).strip() != "")]
    numeric = len(filled) > 0 and filled.map(is_numeric).all()
    logger.debug("sorting on column %d (%s)", column, "numeric" if numeric else "lexical")

    order = table.frame.sort_values(
        by=idx,
        ascending=not descending,
        kind="stable",
        na_position="last" if descending else "first",
        key=_numeric_key if numeric else None,
    ).index
    frame = table.frame.loc[order].reset_index(drop=True)
    return Table(frame=frame, header=table.header,
                 right_hint=table.right_hint, sources=table.sources)


def group_rows(table: Table, column: Optional[int], keep_values: bool = False) -> Table:
    """Blank the group cell of rows that repeat the previous row's value.

    Comparison uses the values before blanking and only looks at the row
    directly above, so A A B A blanks the second row only. Empty values
    never form a group.
    """
    if column is None or keep_values or column > table.ncols or len(table) < 2:
        return table
    idx = column - 1
    values = table.frame[idx]
    repeated = values.eq(values.shift()) & values.ne("")
    logger.debug("grouping on column %d blanked %d cells", column, int(repeated.sum()))
    frame = table.frame.copy()
    frame.loc[repeated, idx] = ""
    return Table(frame=frame, header=table.header,
                 right_hint=table.right_hint, sources=table.sources)


def apply_transforms(table: Table, config: Configuration, indices: List[int]) -> Table:
    """Column stages on a table built from the filtered lines."""
    table = select_columns(table, indices)
    if config.header is not None:
        table = fit_header(table, config.header, config)
    table = sort_rows(table, config.sort_column, config.sort_descending)
    table = group_rows(table, config.group_column, config.group_keep_values)
    return table
