from __future__ import annotations

"""
Atomic File Analysis Worker.

Encapsulates the processing of a single source file: reading, parsing and
structural walking. Read and parse failures are contained here so one bad
file never interrupts the run; the file then contributes no records.
"""

import logging
from typing import Any, Dict, Iterable

from unitycodemap.core.analysis.structure_walker import extract_records
from unitycodemap.core.analysis.syntax_provider import parse_file
from unitycodemap.domain.errors import CodeMapError

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def analyze_file_task(
        file_path: str,
        rel_path: str,
        encoding: str = "utf-8",
        strict_parse: bool = False,
        define_symbols: Iterable[str] = (),
) -> Dict[str, Any]:
    """
    Execute the full analysis lifecycle for a single file.

    Args:
        file_path: Absolute filesystem path.
        rel_path: Relative path written to the FilePath column.
        encoding: Codec of the file on disk.
        strict_parse: Treat syntax errors as a file failure.
        define_symbols: Preprocessor symbols considered defined.

    Returns:
        Dict[str, Any]: Task result with keys 'ok', 'rel_path', 'records'
                        and, on failure, 'error'.
    """
    try:
        root = parse_file(file_path, encoding=encoding, strict=strict_parse)
        records = extract_records(root, rel_path, define_symbols)
        logger.debug(f"{rel_path}: {len(records)} structural records")
        return {
            "ok": True,
            "rel_path": rel_path,
            "file_path": file_path,
            "records": records,
        }

    except (OSError, UnicodeError, LookupError, CodeMapError) as e:
        logger.error(f"Error processing {file_path}: {e}")
        return {
            "ok": False,
            "rel_path": rel_path,
            "file_path": file_path,
            "records": [],
            "error": str(e),
        }
