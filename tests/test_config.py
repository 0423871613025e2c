import dataclasses

import pytest

from colkit import Configuration, ConfigurationError, OutputFormat, format_lines
from colkit.core import build_parser


def _from_cli(*argv):
    return Configuration.from_args(build_parser().parse_intermixed_args(list(argv)))


def test_defaults():
    config = _from_cli()
    assert config == Configuration()
    assert config.separator == " "
    assert config.padding == 1
    assert config.column_separator_glyph == "|"
    assert config.output_format is OutputFormat.TABLE
    assert config.columns == ()


def test_cli_flags_map_to_fields():
    config = _from_cli("-m", "-s", ",", "-w", "3", "-p", "--cs", "-n", "--nn", "--rh",
                       "-F", "ab+", "-S", "2", "--desc", "-g", "1", "--gcolval",
                       "--json", "--jtc", "4", "1:3")
    assert config.collapse_blanks and config.pretty and config.column_separator
    assert config.separator == ","
    assert config.padding == 3
    assert config.numbering and config.no_numeric_align and config.discard_first_line
    assert config.filter_pattern == "ab+"
    assert (config.sort_column, config.sort_descending) == (2, True)
    assert (config.group_column, config.group_keep_values) == (1, True)
    assert config.output_format is OutputFormat.JSON
    assert config.json_title_column
    assert config.columns == ("4", "1:3")


@pytest.mark.parametrize("flag, fmt", [
    ("--csv", OutputFormat.CSV),
    ("--json", OutputFormat.JSON),
    ("--html", OutputFormat.HTML),
    ("--yaml", OutputFormat.YAML),
])
def test_output_format_flags(flag, fmt):
    assert _from_cli(flag).output_format is fmt


def test_escaped_separator():
    assert _from_cli("-s", "\\t").separator == "\t"
    assert _from_cli("-s", "│").separator == "│"


def test_configuration_is_immutable():
    config = Configuration()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.padding = 4
    assert dataclasses.replace(config, padding=4).padding == 4


def test_sequences_are_frozen():
    config = Configuration(columns=["1", 2], wide_ranges=[[1, 2]])
    assert config.columns == ("1", "2")
    assert config.wide_ranges == ((1, 2),)


@pytest.mark.parametrize("columns, expected", [("12", ("12",)), ("3:1", ("3:1",)), ("", ("",))])
def test_single_string_selector_is_one_token(columns, expected):
    assert Configuration(columns=columns).columns == expected


def test_single_string_selector_reaches_the_pipeline():
    config = Configuration(columns="3:1", no_auto_header=True, output_format="csv")
    assert format_lines(["a b c"], config) == "c,b,a\n"


def test_format_given_as_text():
    assert Configuration(output_format="csv").output_format is OutputFormat.CSV


@pytest.mark.parametrize("options", [
    {"separator": ""},
    {"padding": -1},
    {"sort_column": 0},
    {"group_column": -2},
    {"output_format": "xml"},
])
def test_invalid_configuration(options):
    with pytest.raises(ConfigurationError):
        Configuration(**options)
