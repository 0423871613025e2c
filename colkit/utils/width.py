"""
Terminal display width of cell text.

Escape sequences are zero width: CSI sequences (colors, cursor movement),
OSC sequences such as OSC 8 hyperlinks, and two-byte Fe escapes. What is
left is measured glyph by glyph: code points inside the configured wide
ranges count as ``wide_width`` columns, everything else is measured with
wcwidth (combining marks 0, East Asian wide glyphs 2, most glyphs 1).
"""
from __future__ import annotations

import re
from functools import lru_cache
from typing import Sequence, Tuple

from wcwidth import wcwidth

ANSI_ESCAPE = re.compile(
    r"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)"   # OSC ... BEL | ST
    r"|\x1b\[[0-?]*[ -/]*[@-~]"            # CSI params intermediates final
    r"|\x1b[@-Z\\-_]"                      # two-byte Fe escapes
)

# Emoji and pictograph blocks. Icon fonts (e.g. Nerd Fonts in the private use
# area, 0xE000-0xF8FF) can be added through Configuration.wide_ranges.
DEFAULT_WIDE_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x1F300, 0x1F5FF),  # Misc Symbols and Pictographs
    (0x1F600, 0x1F64F),  # Emoticons
    (0x1F680, 0x1F6FF),  # Transport and Map
    (0x1F900, 0x1F9FF),  # Supplemental Symbols and Pictographs
    (0x1FA70, 0x1FAFF),  # Symbols and Pictographs Extended-A
)

WideRanges = Sequence[Tuple[int, int]]


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


@lru_cache(maxsize=4096)
def _glyph_width(char: str, wide_ranges: Tuple[Tuple[int, int], ...], wide_width: int) -> int:
    cp = ord(char)
    for lo, hi in wide_ranges:
        if lo <= cp <= hi:
            return wide_width
    w = wcwidth(char)
    # wcwidth reports -1 for control characters; they occupy no column.
    return w if w > 0 else 0


def display_width(text: str, wide_ranges: WideRanges = DEFAULT_WIDE_RANGES, wide_width: int = 2) -> int:
    """Number of terminal columns ``text`` occupies once escapes are removed."""
    if not text:
        return 0
    visible = strip_ansi(text)
    if visible.isascii() and visible.isprintable():
        return len(visible)
    ranges = tuple(wide_ranges)
    return sum(_glyph_width(ch, ranges, wide_width) for ch in visible)


def pad(text: str, width: int, right: bool = False, **kwargs) -> str:
    """Pad ``text`` with spaces to ``width`` visible columns.

    Longer text is returned unchanged; escape sequences are kept in place.
    """
    gap = width - display_width(text, **kwargs)
    if gap <= 0:
        return text
    return " " * gap + text if right else text + " " * gap
