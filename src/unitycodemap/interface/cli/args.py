from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
argparse namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the unitycodemap CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="unitycodemap",
        description=(
            "Inventory the classes, structs, methods, properties, fields and "
            "constructors of a Unity C# project into a CSV report."
        ),
    )

    # --- Path Management ---
    p.add_argument(
        "input_path",
        nargs="?",
        default=None,
        help="Root directory to scan (default: current directory).",
    )
    p.add_argument(
        "output_path",
        nargs="?",
        default=None,
        help="CSV report path (default: unity_code_structure.csv).",
    )
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help="JSON file with configuration values.",
    )

    # --- Discovery Filters ---
    p.add_argument(
        "--ext",
        dest="extensions",
        default=None,
        help="Comma-separated source extensions (default: .cs).",
    )
    p.add_argument(
        "--exclude-dir",
        dest="excluded_dirs",
        default=None,
        help="Comma-separated directory names to skip; replaces the default set.",
    )

    # --- Parsing ---
    p.add_argument(
        "--strict-parse",
        action="store_true",
        help="Treat files with syntax errors as failed instead of analyzing them.",
    )
    p.add_argument(
        "--define",
        dest="define_symbols",
        default=None,
        help="Comma-separated preprocessor symbols to treat as defined (e.g. UNITY_EDITOR).",
    )
    p.add_argument(
        "--encoding",
        default=None,
        help="Encoding of the source files (default: utf-8).",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the run summary as JSON.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Only options actually given on the command line appear in the result,
    so values loaded from a config file are not masked by unset flags.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    if args.input_path:
        overrides["input_path"] = args.input_path
    if args.output_path:
        overrides["output_path"] = args.output_path

    if args.extensions:
        overrides["extensions"] = _split_csv(args.extensions)
    if args.excluded_dirs:
        overrides["excluded_dirs"] = _split_csv(args.excluded_dirs)

    if args.strict_parse:
        overrides["strict_parse"] = True
    if args.encoding:
        overrides["encoding"] = args.encoding
    if args.define_symbols:
        overrides["define_symbols"] = _split_csv(args.define_symbols)

    return overrides

# -----------------------------------------------------------------------------
# HELPERS
# -----------------------------------------------------------------------------

def _split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Convert a comma-separated string into a list of sanitized strings.
    """
    if value is None:
        return None
    parts = [x.strip() for x in value.split(",")]
    return [x for x in parts if x]
