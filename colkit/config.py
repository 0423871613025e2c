"""Resolved, read-only options for one pipeline run."""
from __future__ import annotations

import argparse
import codecs
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .errors import ConfigurationError
from .utils.width import DEFAULT_WIDE_RANGES


def _decode_escapes(value: str) -> str:
    """Turn a typed "\\t" into a real tab; other text passes through."""
    if "\\" not in value:
        return value
    return codecs.decode(value.encode("utf-8"), "unicode_escape")


class OutputFormat(str, Enum):
    TABLE = "table"
    CSV = "csv"
    JSON = "json"
    HTML = "html"
    YAML = "yaml"


@dataclass(frozen=True)
class Configuration:
    # tokenizing
    separator: str = " "
    collapse_blanks: bool = False
    # header handling
    header: Optional[str] = None
    no_auto_header: bool = False
    discard_first_line: bool = False
    # table layout
    padding: int = 1
    pretty: bool = False
    title_separator: bool = False
    footer_separator: bool = False
    column_separator: bool = False
    column_separator_glyph: str = "|"
    numbering: bool = False
    no_format: bool = False
    no_numeric_align: bool = False
    # transforms
    filter_pattern: Optional[str] = None
    sort_column: Optional[int] = None
    sort_descending: bool = False
    group_column: Optional[int] = None
    group_keep_values: bool = False
    columns: Tuple[str, ...] = ()
    # output
    output_format: OutputFormat = OutputFormat.TABLE
    json_title_column: bool = False
    wide_ranges: Tuple[Tuple[int, int], ...] = field(default=DEFAULT_WIDE_RANGES)
    wide_width: int = 2

    def __post_init__(self):
        if not self.separator:
            raise ConfigurationError("Separator must not be empty", self.separator)
        if self.padding < 0:
            raise ConfigurationError(f"Padding width must be >= 0, got {self.padding}", self.padding)
        for name in ("sort_column", "group_column"):
            v = getattr(self, name)
            if v is not None and v < 1:
                raise ConfigurationError(f"{name.replace('_', ' ')} is 1-based, got {v}", v)
        if not isinstance(self.output_format, OutputFormat):
            try:
                object.__setattr__(self, "output_format", OutputFormat(self.output_format))
            except ValueError:
                raise ConfigurationError(f"Unknown output format '{self.output_format}'", self.output_format)
        # lists passed by callers are frozen into tuples; a lone string is one selector
        columns = (self.columns,) if isinstance(self.columns, str) else self.columns
        object.__setattr__(self, "columns", tuple(str(c) for c in columns))
        object.__setattr__(self, "wide_ranges", tuple(tuple(r) for r in self.wide_ranges))

    @property
    def width_options(self) -> dict:
        return {"wide_ranges": self.wide_ranges, "wide_width": self.wide_width}

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Configuration":
        """Build a Configuration from the command-line namespace."""
        fmt = OutputFormat.TABLE
        for candidate in (OutputFormat.CSV, OutputFormat.JSON, OutputFormat.HTML, OutputFormat.YAML):
            if getattr(args, candidate.value, False):
                fmt = candidate
                break
        return cls(
            separator=_decode_escapes(args.sep),
            collapse_blanks=args.mb,
            header=args.header,
            no_auto_header=args.nhl,
            discard_first_line=args.rh,
            padding=args.width,
            pretty=args.pp,
            title_separator=args.ts,
            footer_separator=args.fs,
            column_separator=args.cs,
            column_separator_glyph=args.colsep,
            numbering=args.num,
            no_format=args.nf,
            no_numeric_align=args.nn,
            filter_pattern=args.filter,
            sort_column=args.sortcol,
            sort_descending=args.desc,
            group_column=args.gcol,
            group_keep_values=args.gcolval,
            columns=tuple(args.columns or ()),
            output_format=fmt,
            json_title_column=args.jtc,
        )
