from __future__ import annotations

"""
Structural Inventory Data Models.

Defines the immutable records emitted by the structural walker and the
closed set of member classifications that can appear in the report.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

# -----------------------------------------------------------------------------
# CLASSIFICATIONS
# -----------------------------------------------------------------------------

class MemberKind(str, Enum):
    """Classification written to the 'MemberType' column of the report."""
    CLASS = "Class"
    STRUCT = "Struct"
    METHOD = "Method"
    PROPERTY = "Property"
    FIELD = "Field"
    CONSTRUCTOR = "Constructor"

    def __str__(self) -> str:
        return self.value


# -----------------------------------------------------------------------------
# REPORT ROWS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class StructuralRecord:
    """
    A single named declaration found in a source file.

    Attributes:
        file_path: Source file identifier relative to the scanned root.
        class_name: Name of the nearest enclosing class or struct. For a
                    type's own record this is the type's name.
        member_name: Declared identifier of the member.
        member_type: Classification of the declaration.
    """
    file_path: str
    class_name: str
    member_name: str
    member_type: MemberKind

    def as_row(self) -> Tuple[str, str, str, str]:
        """Return the record as a tuple ordered like the report columns."""
        return (self.file_path, self.class_name, self.member_name, self.member_type.value)
