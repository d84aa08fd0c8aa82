from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. The two positional paths are captured.
2. Any other argument count is rejected with ArgumentCountError.
3. Option-looking words are paths, never flags.
"""

import pytest

from webui_jsmin.domain.errors import ArgumentCountError
from webui_jsmin.interface.cli.args import parse_command_line


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    return parse_command_line(arg_list)


def test_cli_path_arguments():
    """Verify input/output path arguments are captured."""
    args = parse_args(["src/helpers.js", "build/helpers.min.js"])

    assert args.input_path == "src/helpers.js"
    assert args.output_path == "build/helpers.min.js"


@pytest.mark.parametrize("arg_list", [
    [],
    ["only_input.js"],
    ["a.js", "b.js", "c.js"],
])
def test_cli_rejects_wrong_argument_count(arg_list):
    with pytest.raises(ArgumentCountError):
        parse_args(arg_list)


@pytest.mark.parametrize("arg_list", [
    ["-h"],
    ["--debug", "a.js", "b.js"],
])
def test_cli_has_no_flags(arg_list):
    with pytest.raises(ArgumentCountError):
        parse_args(arg_list)


@pytest.mark.parametrize("arg_list, expected", [
    (["-in.js", "out.js"], ("-in.js", "out.js")),
    (["in.js", "-out.js"], ("in.js", "-out.js")),
    (["-h", "--debug"], ("-h", "--debug")),
])
def test_cli_dash_prefixed_paths(arg_list, expected):
    """Paths that start with a dash are taken literally."""
    args = parse_args(arg_list)

    assert (args.input_path, args.output_path) == expected


def test_cli_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr("sys.argv", ["jsmin", "a.js", "b.js"])

    args = parse_command_line()

    assert args.input_path == "a.js"
    assert args.output_path == "b.js"
