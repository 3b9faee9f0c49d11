from __future__ import annotations

"""
Source File Filtering Engine.

Implements the inclusion rule (file extension whitelist) and the exclusion
rule (exact directory-name match on any path segment) used to select the
C# sources of a Unity project.
"""

import os
from typing import Iterable, List, Set

from unitycodemap.domain.config import DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS

# -----------------------------------------------------------------------------
# CONFIGURATION DEFAULTS
# -----------------------------------------------------------------------------

def default_extensions() -> List[str]:
    """
    Get the default list of targeted file extensions.

    Returns:
        List[str]: List containing the C# source extension.
    """
    return list(DEFAULT_EXTENSIONS)


def default_excluded_dirs() -> List[str]:
    """
    Get the directory names skipped by default.

    Covers the Unity editor cache, build output and IDE/VCS metadata.

    Returns:
        List[str]: Directory names matched exactly against path segments.
    """
    return list(DEFAULT_EXCLUDED_DIRS)

# -----------------------------------------------------------------------------
# MATCHING
# -----------------------------------------------------------------------------

def matches_extension(file_name: str, extensions: Iterable[str]) -> bool:
    """
    Verify if a filename carries one of the whitelisted extensions.

    Comparison is case-insensitive.

    Args:
        file_name: Base filename to evaluate.
        extensions: Dot-prefixed extensions.

    Returns:
        bool: True if the extension is whitelisted.
    """
    _, ext = os.path.splitext(file_name)
    return ext.lower() in {e.lower() for e in extensions}


def is_excluded_dir(dir_name: str, excluded_dirs: Set[str]) -> bool:
    """Exact, case-sensitive directory name match."""
    return dir_name in excluded_dirs


def is_excluded_path(rel_path: str, excluded_dirs: Set[str]) -> bool:
    """
    Verify if any directory segment of a relative path is excluded.

    Only directory segments are considered; a file literally named 'bin'
    is not excluded. Substrings never match ('binary/' is kept).

    Args:
        rel_path: Path relative to the scanned root.
        excluded_dirs: Directory names to reject.

    Returns:
        bool: True if the path lies below an excluded directory.
    """
    normalized = rel_path.replace("\\", "/")
    segments = [s for s in normalized.split("/") if s]
    return any(is_excluded_dir(s, excluded_dirs) for s in segments[:-1])
