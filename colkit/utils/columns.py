"""Column selector parsing: '4 1 7', '1:3', '3:1', '2,5:6'."""
from __future__ import annotations

import re
from typing import Iterable, List

from ..errors import InvalidColumnSelector

_COL_TOKEN_RE = re.compile(r"""
    ^
    (?:
      (?P<start>\d+):(?P<end>\d+)   # 1-based inclusive range, descending when start > end
      |
      (?P<pos>\d+)                  # 1-based position
    )
    $
""", re.X)


def _split_tokens(spec: Iterable[str]) -> List[str]:
    tokens = []
    for item in spec:
        tokens.extend(t for t in re.split(r"[,\s]+", str(item)) if t)
    return tokens


def parse_selector(spec: Iterable[str] | str | None) -> List[int]:
    """Resolve selector tokens into 0-based source column indices.

    Order is kept and repeats are allowed. An empty spec returns [], which
    the caller reads as "every column in source order".
    """
    if spec is None:
        return []
    if isinstance(spec, str):
        spec = [spec]
    indices: List[int] = []
    for tok in _split_tokens(spec):
        m = _COL_TOKEN_RE.match(tok)
        if not m:
            raise InvalidColumnSelector(f"Invalid column selector '{tok}': expected N or N:M", tok)
        if m.group("pos"):
            i = int(m.group("pos"))
            if i < 1:
                raise InvalidColumnSelector(f"Column numbers are 1-based, got '{tok}'", tok)
            indices.append(i - 1)
            continue
        a, b = int(m.group("start")), int(m.group("end"))
        if a < 1 or b < 1:
            raise InvalidColumnSelector(f"Column numbers are 1-based, got '{tok}'", tok)
        step = 1 if a <= b else -1
        indices.extend(i - 1 for i in range(a, b + step, step))
    return indices
