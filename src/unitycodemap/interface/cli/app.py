from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: initialization of logging, loading and
merging of configuration sources (defaults, JSON file and CLI overrides),
analysis execution and result rendering.
"""

import argparse
import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from unitycodemap.core.pipeline.engine import run_analysis
from unitycodemap.core.pipeline.stages.validator import validate_config
from unitycodemap.domain.config import get_default_config, load_config
from unitycodemap.domain.pipeline_models import AnalysisResult
from unitycodemap.infra.fs import is_existing_dir, normalize_path
from unitycodemap.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from unitycodemap.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Per-file failures never change the exit code. Non-zero codes are
    reserved for an invalid input directory (2) and a run that could not
    write its report (1).

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "INFO"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    try:
        return _run(args)
    finally:
        shutdown_logging()


def _run(args: argparse.Namespace) -> int:
    logger.debug("CLI execution initiated. Resolving configuration hierarchy...")

    # 1. Resolve configuration (defaults -> JSON file -> CLI overrides)
    base_conf = get_default_config()
    if args.config_file:
        base_conf = _merge_config(base_conf, load_config(args.config_file))

    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))

    # 2. Schema validation and normalization
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    # 3. Pre-flight input verification
    input_path = normalize_path(clean_conf["input_path"], os.getcwd())
    if not is_existing_dir(input_path):
        logger.error(f"Input directory does not exist: {input_path}")
        return 2

    # 4. Analysis execution
    try:
        result = run_analysis(clean_conf)
    except KeyboardInterrupt:
        logger.warning("Analysis interrupted by user.")
        return 130
    except OSError as e:
        logger.critical(f"Failed to write report: {e}")
        return 1

    # 5. Output rendering
    if args.json_output:
        print(json.dumps(_result_to_json(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result)

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow merge of known keys from overrides into the base configuration.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for key in get_default_config():
        if key in overrides and overrides[key] is not None:
            out[key] = overrides[key]
    return out

# -----------------------------------------------------------------------------
# RENDERING
# -----------------------------------------------------------------------------

def _result_to_json(result: AnalysisResult) -> Dict[str, Any]:
    payload = asdict(result)
    # Records are already in the CSV; keep the JSON summary small
    payload.pop("records", None)
    return payload


def _print_human_summary(result: AnalysisResult) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    print(f"Report:          {result.output_path}")
    print(f"Files analyzed:  {result.files_processed}/{result.files_found}")
    print(f"Total entries:   {len(result.records)}")
    for kind, count in sorted(result.summary.get("by_kind", {}).items()):
        print(f"  {kind:<12} {count}")
    if result.errors:
        print(f"Failed files:    {len(result.errors)}")
        for err in result.errors:
            print(f"  {err.rel_path}: {err.error}")
