from __future__ import annotations

"""
File Discovery Service.

Traverses a Unity project directory and yields the C# sources eligible for
structural analysis, pruning excluded directories before they are entered.
"""

import logging
import os
from typing import Dict, Iterable, List

from unitycodemap.core.pipeline.components.filters import (
    is_excluded_dir,
    is_excluded_path,
    matches_extension,
)

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (DISCOVERY SERVICES)
# ==============================================================================

def yield_source_files(
        input_path: str,
        extensions: List[str],
        excluded_dirs: List[str],
) -> Iterable[Dict[str, str]]:
    """
    Traverse the filesystem and yield files that satisfy the filtering criteria.

    Directories whose name is excluded are pruned in place, so nothing below
    them is ever listed or opened. Listing order is made deterministic by
    sorting directory entries: files of a directory come before the contents
    of its subdirectories.

    Args:
        input_path: Path to the project root.
        extensions: Whitelist of allowed file extensions.
        excluded_dirs: Directory names that are never entered.

    Yields:
        Dict[str, str]: Metadata for each valid file found, including:
                        - file_path: Absolute path.
                        - rel_path: Relative path from root.
                        - file_name: Base filename.
    """
    input_path_abs = os.path.abspath(input_path)
    excluded = set(excluded_dirs)

    for root, dirs, files in os.walk(input_path_abs):
        # In-place directory pruning to optimize traversal
        pruned = [d for d in dirs if is_excluded_dir(d, excluded)]
        if pruned:
            logger.debug(f"Skipping excluded directories in {root}: {pruned}")
        dirs[:] = [d for d in dirs if not is_excluded_dir(d, excluded)]
        dirs.sort()
        files.sort()

        for file_name in files:
            if not matches_extension(file_name, extensions):
                continue

            file_path = os.path.join(root, file_name)
            rel_path = os.path.relpath(file_path, input_path_abs)

            if is_excluded_path(rel_path, excluded):
                continue

            yield {
                "file_path": file_path,
                "rel_path": rel_path,
                "file_name": file_name,
            }


def collect_source_files(
        input_path: str,
        extensions: List[str],
        excluded_dirs: List[str],
) -> List[Dict[str, str]]:
    """
    Materialize the discovery generator so the file count is known upfront.

    Args:
        input_path: Path to the project root.
        extensions: Whitelist of allowed file extensions.
        excluded_dirs: Directory names that are never entered.

    Returns:
        List[Dict[str, str]]: File metadata in processing order.
    """
    return list(yield_source_files(input_path, extensions, excluded_dirs))
