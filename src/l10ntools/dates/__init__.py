"""Date localization generator.

Scrapes the intl package's per-locale date data and emits a Dart source
file with two constant tables, ``dateSymbols`` and ``datePatterns``,
restricted to the locales flutter_localizations supports.

Submodules:
    types      - PEP 695 type aliases (LocaleCode, JsonValue, DartSource)
    config     - GeneratorConfig (repository layout)
    indexing   - DataFile, list_intl_data (per-locale JSON discovery)
    supported  - iter_supported_locales (locales from resource file names)
    encoder    - DartLiteralEncoder, encode (JSON to Dart literals)
    assembler  - assemble, write_document, run_formatter
    cli        - locate_intl_root, generate, main

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from l10ntools.dates.assembler import assemble, run_formatter, write_document
from l10ntools.dates.cli import generate, locate_intl_root, main
from l10ntools.dates.config import GeneratorConfig
from l10ntools.dates.encoder import (
    DartLiteralEncoder,
    encode,
    encode_entry,
    has_delimiter_collision,
    has_key_collision,
)
from l10ntools.dates.indexing import DataFile, list_intl_data
from l10ntools.dates.supported import iter_supported_locales, supported_locales
from l10ntools.dates.types import DartSource, JsonValue, LocaleCode

__all__ = [
    # Pipeline
    "list_intl_data",
    "iter_supported_locales",
    "supported_locales",
    "encode",
    "encode_entry",
    "assemble",
    # Side effects
    "write_document",
    "run_formatter",
    # Driver
    "generate",
    "locate_intl_root",
    "main",
    # Types
    "DataFile",
    "DartLiteralEncoder",
    "GeneratorConfig",
    "has_delimiter_collision",
    "has_key_collision",
    "DartSource",
    "JsonValue",
    "LocaleCode",
]
