"""Diagnostic system for l10ntools errors.

Provides structured error diagnostics with codes, paths and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    DataFileError,
    DirectoryNotFoundError,
    L10nToolsError,
    OutputWriteError,
    PreconditionError,
    UnsupportedTypeError,
)

__all__ = [
    "DataFileError",
    "Diagnostic",
    "DiagnosticCode",
    "DirectoryNotFoundError",
    "L10nToolsError",
    "OutputWriteError",
    "PreconditionError",
    "UnsupportedTypeError",
]
