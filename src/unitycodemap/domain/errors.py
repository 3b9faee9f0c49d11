from __future__ import annotations

"""
Domain Exceptions and Error Records.

Defines the exception hierarchy raised by the analysis layers and the DTO
used to report per-file failures without interrupting a run.
"""

from dataclasses import dataclass

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class CodeMapError(Exception):
    """Base class for all errors raised by unitycodemap."""


class SourceParseError(CodeMapError):
    """
    Raised when a source file cannot be turned into a usable syntax tree.

    Attributes:
        file_path: Path of the offending file.
        line: 1-based line of the first syntax error, or 0 when unknown.
    """

    def __init__(self, file_path: str, message: str, line: int = 0):
        self.file_path = file_path
        self.line = line
        location = f" (line {line})" if line else ""
        super().__init__(f"{message}{location}")


# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class AnalysisError:
    """
    Encapsulates technical failure details during file processing.

    Attributes:
        rel_path: File path identifier relative to project root.
        error: Descriptive exception or error message.
    """
    rel_path: str
    error: str
