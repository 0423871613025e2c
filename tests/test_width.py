import pytest

from colkit.utils.width import DEFAULT_WIDE_RANGES, display_width, pad, strip_ansi


@pytest.mark.parametrize("ansi_str", [
    '\033[38;5;208mthis is my text\033[0m',
    '\033[31mthis is my text\033[0m',
    '\033[97mthis is my text\033[0m',
    '\033[107mthis is my text\033[0m',
    '\033[1mthis is my text\033[0m',
    '\033[23mthis is my text\033[0m',
    'this is my text\033[0m',
    '\x1b[46m\x1b[23mthis is my text\x1b[0m',
    '\x1b]8;;file:///tmp/x.txt\x1b\\this is my text\x1b]8;;\x1b\\',
    '\x1b]8;;https://example.com\x07this is my text\x1b]8;;\x07',
    'this is my text',
])
def test_strip_ansi(ansi_str):
    assert strip_ansi(ansi_str) == 'this is my text'


@pytest.mark.parametrize("text, expected", [
    ("", 0),
    ("abc", 3),
    ("\x1b[31mabc\x1b[0m", 3),
    ("\x1b[1;32m12.5\x1b[0m", 4),
    ("日本", 4),
    ("😀", 2),
    ("a😀b", 4),
    ("é", 1),
])
def test_display_width(text, expected):
    assert display_width(text) == expected


def test_wide_ranges_are_configurable():
    icon = "\ue0b0"  # private use area, used by icon fonts
    nerd = DEFAULT_WIDE_RANGES + ((0xE000, 0xF8FF),)
    assert display_width(icon, wide_ranges=nerd) == 2
    assert display_width(icon + "x", wide_ranges=nerd, wide_width=3) == 4
    assert display_width("😀", wide_ranges=(), wide_width=3) == 2


def test_pad_keeps_escapes_and_aligns_visible_text():
    red = "\x1b[31mab\x1b[0m"
    assert pad(red, 4) == red + "  "
    assert pad(red, 4, right=True) == "  " + red
    assert pad("ab", 4, right=True) == "  ab"
    assert pad("abcdef", 3) == "abcdef"
    assert pad("日本", 5) == "日本 "
