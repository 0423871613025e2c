"""
Tokenizer and table model.

Rows are held in a DataFrame of strings whose column labels are 0-based
positions. Cells are never converted to numbers; ``is_numeric`` is a
lexical check so the original spelling ("007", "+1.50") survives.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import pandas as pd

from .config import Configuration
from .utils.width import strip_ansi

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

RIGHT_ALIGN_MARK = "-"


def is_numeric(value: str) -> bool:
    """True for a signed decimal (integer or one decimal point); '' is not numeric."""
    s = strip_ansi(value).strip()
    return bool(s) and _NUMBER_RE.fullmatch(s) is not None


def tokenize(line: str, separator: str = " ", collapse: bool = False) -> List[str]:
    """Split a line into cells.

    By default this is a literal split, so consecutive separators yield
    empty cells. With ``collapse`` a run of separators is one delimiter and
    leading or trailing separators produce nothing.
    """
    parts = line.split(separator)
    if collapse:
        return [p for p in parts if p]
    return parts


def _frame(rows: Sequence[Sequence[str]], ncols: int) -> pd.DataFrame:
    padded = [list(r) + [""] * (ncols - len(r)) for r in rows]
    return pd.DataFrame(padded, columns=range(ncols), dtype=object)


@dataclass
class Table:
    """Data rows plus an optional header.

    ``sources`` holds the 0-based source column each current column came
    from and ``right_hint`` the columns whose header label started with '-'.
    """
    frame: pd.DataFrame
    header: Optional[List[str]] = None
    right_hint: List[bool] = field(default_factory=list)
    sources: List[int] = field(default_factory=list)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]], header: Optional[Sequence[str]] = None) -> "Table":
        ncols = max([len(r) for r in rows] + [len(header) if header else 0])
        labels, hints = None, []
        if header is not None:
            labels, hints = split_header(list(header) + [""] * (ncols - len(header)))
        return cls(frame=_frame(rows, ncols), header=labels,
                   right_hint=hints or [False] * ncols, sources=list(range(ncols)))

    @property
    def ncols(self) -> int:
        return self.frame.shape[1]

    def __len__(self) -> int:
        return self.frame.shape[0]

    def rows(self) -> List[List[str]]:
        return [list(r) for r in self.frame.itertuples(index=False, name=None)]

    def column(self, index: int) -> List[str]:
        if index >= self.ncols:
            return [""] * len(self)
        return self.frame[index].tolist()


def split_header(cells: Sequence[str]):
    """Strip the right-align marker from header cells; returns (labels, hints)."""
    labels, hints = [], []
    for c in cells:
        marked = c.startswith(RIGHT_ALIGN_MARK)
        labels.append(c[len(RIGHT_ALIGN_MARK):] if marked else c)
        hints.append(marked)
    return labels, hints


def build_table(lines: Sequence[str], config: Configuration) -> Table:
    """Tokenize the (already filtered) line sequence into a Table.

    The first line is the header slot. ``discard_first_line`` drops it, so no
    header is read from the input. Otherwise it becomes the header unless an
    explicit header is configured (fitted to the output columns later) or
    ``no_auto_header`` is set.
    """
    lines = list(lines)
    header = None
    if lines and config.discard_first_line:
        lines = lines[1:]
    elif lines and config.header is None and not config.no_auto_header:
        header = tokenize(lines[0], config.separator, config.collapse_blanks)
        lines = lines[1:]

    rows = [tokenize(line, config.separator, config.collapse_blanks) for line in lines]
    return Table.from_rows(rows, header)
