from __future__ import annotations

"""
Analysis Run Data Models.

Defines the result object returned by the analysis engine to the interface
layer, together with factory functions for successful and failed runs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from unitycodemap.domain.errors import AnalysisError
from unitycodemap.domain.structure_models import StructuralRecord

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisResult:
    """
    Unified result object of a complete analysis run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Normalized root directory scanned.
        output_path: Absolute path of the CSV report.
        files_found: Number of source files selected by the filters.
        files_processed: Number of files analyzed without errors.
        records: Every structural record collected, in processing order.
        errors: Per-file failures absorbed during the run.
        summary: Execution metrics for rendering.
    """
    ok: bool
    error: str

    input_path: str
    output_path: str

    files_found: int = 0
    files_processed: int = 0

    records: List[StructuralRecord] = field(default_factory=list)
    errors: List[AnalysisError] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, input_path: str, output_path: str = "") -> AnalysisResult:
    """
    Create a failed analysis result instance.

    Args:
        error: Detailed error description.
        input_path: The target input directory.
        output_path: Calculated report path.

    Returns:
        AnalysisResult: An immutable error result object.
    """
    return AnalysisResult(
        ok=False,
        error=error,
        input_path=input_path,
        output_path=output_path,
    )


def create_success_result(
        input_path: str,
        output_path: str,
        files_found: int,
        records: List[StructuralRecord],
        errors: Optional[List[AnalysisError]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> AnalysisResult:
    """
    Create a successful analysis result instance.

    Args:
        input_path: Normalized input directory.
        output_path: Absolute path of the written report.
        files_found: Count of files selected for analysis.
        records: Aggregated structural records.
        errors: Files that failed and contributed no records.
        summary_extra: Final execution metrics.

    Returns:
        AnalysisResult: An immutable success result object.
    """
    errors = errors or []
    return AnalysisResult(
        ok=True,
        error="",
        input_path=input_path,
        output_path=output_path,
        files_found=files_found,
        files_processed=files_found - len(errors),
        records=records,
        errors=errors,
        summary=summary_extra or {},
    )
