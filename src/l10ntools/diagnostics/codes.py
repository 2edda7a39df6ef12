"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for the generator.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Precondition errors (repository layout, dependency record)
        2000-2999: Input errors (missing directories, unreadable data files)
        3000-3999: Encoding errors (values without a Dart literal form)
        4000-4999: Output errors (generated file cannot be written)
    """

    # Precondition errors (1000-1999)
    NOT_REPOSITORY_ROOT = 1001
    DEPENDENCY_RECORD_MISSING = 1002
    DEPENDENCY_NOT_FOUND = 1003
    DEPENDENCY_RECORD_UNREADABLE = 1004

    # Input errors (2000-2999)
    DIRECTORY_NOT_FOUND = 2001
    INVALID_DATA_FILE = 2002

    # Encoding errors (3000-3999)
    UNSUPPORTED_TYPE = 3001

    # Output errors (4000-4999)
    OUTPUT_WRITE_FAILED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        path: File or directory the error refers to
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    path: str | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[DEPENDENCY_RECORD_MISSING]: Dependency record not found
              --> packages/flutter/.packages
              = help: Run "flutter update-packages" first

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.path is not None:
            lines.append(f"  --> {self.path}")
        if self.hint is not None:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
