from __future__ import annotations

"""
Core orchestration pipeline.

This module coordinates the analysis workflow:
1. Validates configuration and paths.
2. Discovers the C# sources, pruning excluded directories.
3. Analyzes each file sequentially, absorbing per-file failures.
4. Writes the aggregated CSV report once, after all files.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from unitycodemap.core.pipeline.components.writer import write_report
from unitycodemap.core.pipeline.stages.analyzer import analyze_file_task
from unitycodemap.core.pipeline.stages.validator import validate_config
from unitycodemap.core.services.scanner import collect_source_files
from unitycodemap.domain.config import DEFAULT_OUTPUT_FILE
from unitycodemap.domain.errors import AnalysisError
from unitycodemap.domain.pipeline_models import (
    AnalysisResult,
    create_error_result,
    create_success_result,
)
from unitycodemap.domain.structure_models import StructuralRecord
from unitycodemap.infra.fs import is_existing_dir, normalize_path

logger = logging.getLogger(__name__)


def run_analysis(config: Optional[Dict[str, Any]]) -> AnalysisResult:
    """
    Execute the full analysis pipeline.

    Per-file read/parse failures are logged and recorded in the result.
    A failure to write the report is not recovered.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        AnalysisResult: Object containing status, records and summary.

    Raises:
        OSError: If the report cannot be written.
    """
    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)

    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg.get("input_path", ""), os.getcwd())
    output_path = normalize_path(cfg.get("output_path", ""), DEFAULT_OUTPUT_FILE)

    if not is_existing_dir(base_path):
        msg = f"Invalid input directory: {base_path}"
        logger.error(msg)
        return create_error_result(msg, base_path, output_path)

    logger.info(f"Analyzing Unity project at: {base_path}")

    # -------------------------------------------------------------------------
    # 2) Discovery
    # -------------------------------------------------------------------------
    files = collect_source_files(base_path, cfg["extensions"], cfg["excluded_dirs"])
    logger.info(f"Found {len(files)} C# files")

    # -------------------------------------------------------------------------
    # 3) Sequential Analysis
    # -------------------------------------------------------------------------
    records: List[StructuralRecord] = []
    errors: List[AnalysisError] = []

    for entry in files:
        logger.info(f"Processing: {entry['file_name']}")
        res = analyze_file_task(
            entry["file_path"],
            entry["rel_path"],
            encoding=cfg["encoding"],
            strict_parse=cfg["strict_parse"],
            define_symbols=cfg["define_symbols"],
        )
        if res["ok"]:
            records.extend(res["records"])
        else:
            errors.append(AnalysisError(rel_path=res["rel_path"], error=res["error"]))

    # -------------------------------------------------------------------------
    # 4) Report Persistence
    # -------------------------------------------------------------------------
    written = write_report(records, output_path)

    logger.info(f"Analysis complete! Results saved to {output_path}")
    logger.info(f"Total entries: {written}")

    summary = {
        "output_path": output_path,
        "files_found": len(files),
        "processed": len(files) - len(errors),
        "errors": len(errors),
        "total_entries": written,
        "by_kind": _count_by_kind(records),
    }

    return create_success_result(
        base_path, output_path, len(files), records, errors, summary
    )


def _count_by_kind(records: List[StructuralRecord]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for record in records:
        key = record.member_type.value
        counts[key] = counts.get(key, 0) + 1
    return counts
