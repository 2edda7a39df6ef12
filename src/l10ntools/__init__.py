"""l10ntools - Localization build tooling for a UI framework repository.

Generates the Dart date localization tables from the intl package's CLDR
date data, and models the semantics events the framework reports to the
platform accessibility layer.

Public API:
    generate - Build the date localizations document for a repository root
    encode - Encode a parsed JSON value as a Dart constant literal
    GeneratorConfig - Repository layout used by the generator

Exceptions:
    L10nToolsError - Base exception class
    PreconditionError - Not run from the repository root / dependency missing
    DirectoryNotFoundError - Data or resource directory missing
    DataFileError - Data file unreadable or not valid JSON
    OutputWriteError - Generated file cannot be written
    UnsupportedTypeError - Value has no Dart literal form

Submodules:
    l10ntools.dates - Date localization generator pipeline and CLI
    l10ntools.semantics - Semantics event records
    l10ntools.diagnostics - Error types and diagnostic codes
    l10ntools.locale_utils - Babel-backed locale checks
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .dates import GeneratorConfig, encode, generate
from .diagnostics import (
    DataFileError,
    DirectoryNotFoundError,
    L10nToolsError,
    OutputWriteError,
    PreconditionError,
    UnsupportedTypeError,
)

# Version information - Auto-populated from package metadata
try:
    __version__ = _get_version("l10ntools")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DataFileError",
    "DirectoryNotFoundError",
    "GeneratorConfig",
    "L10nToolsError",
    "OutputWriteError",
    "PreconditionError",
    "UnsupportedTypeError",
    "__version__",
    "encode",
    "generate",
]
