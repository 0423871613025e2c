# Line-sequence assembly and output writing for the command line.
from __future__ import annotations

import sys
from typing import List, Optional, TextIO


def _lines_of(stream: TextIO) -> List[str]:
    return [line.rstrip("\r\n") for line in stream]


def read_lines(path: Optional[str] = None, stdin: Optional[TextIO] = None,
               encoding: str = "utf-8") -> List[str]:
    """File lines followed by stdin lines.

    stdin is read when it is piped, or when no file was given (then a
    terminal is read until EOF, like cat).
    """
    lines: List[str] = []
    if path:
        with open(path, "r", encoding=encoding, errors="replace") as f:
            lines.extend(_lines_of(f))

    src = stdin if stdin is not None else sys.stdin
    if src is None or (path and src.isatty()):
        return lines
    if stdin is None:
        src = open(src.fileno(), mode="r", encoding=encoding, errors="replace", closefd=False)
    lines.extend(_lines_of(src))
    return lines


def write_output(text: str, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write(text)
    stream.flush()
