from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Positional input/output paths and their defaults.
2. CSV string parsing logic.
3. Only explicit flags become overrides.
"""

from unitycodemap.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_no_arguments_produce_no_overrides():
    args = parse_args([])

    assert args.input_path is None
    assert args.output_path is None
    assert args_to_overrides(args) == {}


def test_positional_paths():
    overrides = args_to_overrides(parse_args(["/projects/Game", "out/structure.csv"]))

    assert overrides["input_path"] == "/projects/Game"
    assert overrides["output_path"] == "out/structure.csv"


def test_only_input_path():
    overrides = args_to_overrides(parse_args(["/projects/Game"]))

    assert overrides == {"input_path": "/projects/Game"}


def test_csv_list_parsing():
    overrides = args_to_overrides(parse_args([
        "--ext", ".cs, .csx",
        "--exclude-dir", "Library,Packages,,",
    ]))

    assert overrides["extensions"] == [".cs", ".csx"]
    assert overrides["excluded_dirs"] == ["Library", "Packages"]


def test_parsing_flags():
    args = parse_args(["--strict-parse", "--encoding", "latin-1", "--debug", "--json"])
    overrides = args_to_overrides(args)

    assert overrides["strict_parse"] is True
    assert overrides["encoding"] == "latin-1"
    assert args.debug is True
    assert args.json_output is True
    assert "debug" not in overrides


def test_define_symbols():
    overrides = args_to_overrides(parse_args(["--define", "UNITY_EDITOR, DEVELOPMENT_BUILD"]))

    assert overrides == {"define_symbols": ["UNITY_EDITOR", "DEVELOPMENT_BUILD"]}
