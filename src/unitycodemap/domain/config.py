from __future__ import annotations

"""
Configuration Domain Management.

Provides the default runtime configuration of an analysis run and loading
of optional JSON configuration files supplied by the user.
"""

import json
import logging
import os
from typing import Any, Dict, List

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_OUTPUT_FILE = "unity_code_structure.csv"
DEFAULT_EXTENSIONS: List[str] = [".cs"]

# Unity and .NET build/cache directories that never contain project sources
DEFAULT_EXCLUDED_DIRS: List[str] = ["Library", "Temp", "obj", "bin", ".vs", ".git"]

# Preprocessor symbols treated as defined; none by default, so `#if UNITY_EDITOR` branches are inactive
DEFAULT_DEFINE_SYMBOLS: List[str] = []


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the analysis engine.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_path": DEFAULT_OUTPUT_FILE,

        # Filtering
        "extensions": list(DEFAULT_EXTENSIONS),
        "excluded_dirs": list(DEFAULT_EXCLUDED_DIRS),

        # Parsing
        "strict_parse": False,
        "encoding": "utf-8",
        "define_symbols": list(DEFAULT_DEFINE_SYMBOLS),
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_path: str) -> Dict[str, Any]:
    """
    Load configuration overrides from a JSON file.

    Unknown keys are kept; they are filtered later by the merge step.
    A missing or corrupted file never aborts the run.

    Args:
        config_path: Path to a JSON document containing an object.

    Returns:
        Dict[str, Any]: The loaded overrides, or an empty dict on failure.
    """
    if not os.path.exists(config_path):
        logger.warning(f"Config file not found: {config_path}. Using defaults.")
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return {}

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return {}

    logger.debug(f"Configuration loaded from {config_path}")
    return data
