from __future__ import annotations

"""
CSV Report Persistence.

Serializes the aggregated structural records into the report consumed by
spreadsheets and downstream tooling. The header row is written bare; every
data field is wrapped in double quotes. Embedded quotes are doubled so a
path or identifier containing '"' still produces a well-formed row.
"""

import csv
import os
from typing import Iterable

from unitycodemap.domain.structure_models import StructuralRecord

REPORT_HEADER = "FilePath,ClassName,MemberName,MemberType"

# -----------------------------------------------------------------------------
# FILE OUTPUT MANAGEMENT
# -----------------------------------------------------------------------------

def write_report(records: Iterable[StructuralRecord], output_path: str) -> int:
    """
    Write the CSV report, replacing any existing file.

    Output Format:
    FilePath,ClassName,MemberName,MemberType
    "<file>","<class>","<member>","<kind>"

    Args:
        records: Records in final report order.
        output_path: Target file path.

    Returns:
        int: Number of data rows written.

    Raises:
        OSError: If the file cannot be created or written.
    """
    _ensure_parent_dir(output_path)

    count = 0
    with open(output_path, "w", encoding="utf-8", newline="") as f:
        f.write(f"{REPORT_HEADER}\n")
        writer = csv.writer(f, quoting=csv.QUOTE_ALL, lineterminator="\n")
        for record in records:
            writer.writerow(record.as_row())
            count += 1

    return count


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
