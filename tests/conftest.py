from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures: configuration dictionaries and a small Unity project.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Sample Sources
# -----------------------------------------------------------------------------
PLAYER_CS = """using UnityEngine;

namespace Game.Actors
{
    public class Player : MonoBehaviour
    {
        [SerializeField] private float speed = 5f;
        public int Health { get; private set; }

        public Player()
        {
        }

        void Update()
        {
        }
    }
}
"""

STATS_CS = """public struct Stats
{
    public int Strength, Agility;
}
"""

BUILD_ARTIFACT_CS = """public class Generated
{
    public void Ignored() { }
}
"""


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def mock_config_dict(tmp_path: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'unitycodemap.domain.config'.
    """
    return {
        "input_path": str(tmp_path / "project"),
        "output_path": str(tmp_path / "report.csv"),
        "extensions": [".cs"],
        "excluded_dirs": ["Library", "Temp", "obj", "bin", ".vs", ".git"],
        "strict_parse": False,
        "encoding": "utf-8",
        "define_symbols": [],
    }


@pytest.fixture
def unity_project(tmp_path: Path) -> Path:
    """
    Create a minimal Unity project tree.

    Structure:
    /project
      /Assets
        /Scripts
          Player.cs
          Stats.cs
          notes.txt
      /Library
        Cached.cs
      /bin
        /Debug
          Generated.cs
    """
    root = tmp_path / "project"
    scripts = root / "Assets" / "Scripts"
    scripts.mkdir(parents=True)
    (scripts / "Player.cs").write_text(PLAYER_CS, encoding="utf-8")
    (scripts / "Stats.cs").write_text(STATS_CS, encoding="utf-8")
    (scripts / "notes.txt").write_text("class NotCode {}", encoding="utf-8")

    library = root / "Library"
    library.mkdir()
    (library / "Cached.cs").write_text(BUILD_ARTIFACT_CS, encoding="utf-8")

    debug = root / "bin" / "Debug"
    debug.mkdir(parents=True)
    (debug / "Generated.cs").write_text(BUILD_ARTIFACT_CS, encoding="utf-8")

    return root
