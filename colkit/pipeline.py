"""
The column pipeline: filter -> table -> transforms -> sizing -> renderer.

``format_lines`` is the whole core. It validates everything that can fail
before rendering starts and returns the finished output string,
so a failing run produces no output at all.
"""
from __future__ import annotations

from typing import Iterable

from .config import Configuration, OutputFormat
from .errors import MissingHeaderForTitleColumn
from .render import RENDERERS
from .sizing import size_columns
from .table import build_table
from .transform import apply_transforms, compile_filter, filter_lines
from .utils.columns import parse_selector
from .utils.logging import get_logger

logger = get_logger(__name__)

_KEYED_FORMATS = (OutputFormat.JSON, OutputFormat.YAML)


def format_lines(lines: Iterable[str], config: Configuration | None = None) -> str:
    config = config or Configuration()
    lines = list(lines)

    indices = parse_selector(config.columns)
    pattern = compile_filter(config.filter_pattern)
    lines = filter_lines(lines, pattern)
    table = build_table(lines, config)
    logger.debug("tokenized %d lines into %d rows x %d columns", len(lines), len(table), table.ncols)

    # an empty table renders as an empty list, header or not
    if (config.json_title_column and config.output_format in _KEYED_FORMATS
            and len(table) and table.header is None and config.header is None):
        flag = "--rh" if config.discard_first_line else "--nhl"
        raise MissingHeaderForTitleColumn(
            f"Title-column output needs a header: {flag} leaves none, pass --header", flag)

    table = apply_transforms(table, config, indices)

    specs = None
    if config.output_format is OutputFormat.TABLE and not config.no_format:
        specs = size_columns(table, config)
    return RENDERERS[config.output_format](table, config, specs)
