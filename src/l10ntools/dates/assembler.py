"""Assemble the generated date localizations document.

The document is built entirely in memory; writing and formatting are
separate steps so a failure while encoding never leaves a partial file.

Python 3.13+.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Mapping, Sequence, Set
from pathlib import Path

from l10ntools.constants import GENERATED_HEADER
from l10ntools.dates.encoder import encode_entry
from l10ntools.dates.indexing import DataFile
from l10ntools.dates.types import DartSource, LocaleCode
from l10ntools.diagnostics import Diagnostic, DiagnosticCode, OutputWriteError
from l10ntools.enums import Corpus

__all__ = [
    "assemble",
    "run_formatter",
    "write_document",
]

logger = logging.getLogger(__name__)


def _write_table(
    corpus: Corpus,
    files: Mapping[LocaleCode, DataFile],
    supported_locales: Set[LocaleCode],
    output: list[str],
) -> None:
    """Write one ``const Map<String, dynamic>`` declaration to output."""
    output.append(
        f"const Map<String, dynamic> {corpus.table_name} = const <String, dynamic> {{\n"
    )
    written = 0
    for locale, data_file in files.items():
        if locale not in supported_locales:
            continue
        output.append(encode_entry(locale, data_file.read_json()))
        output.append("\n")
        written += 1
    output.append("};\n")
    logger.info("Generated %s with %d of %d locales", corpus.table_name, written, len(files))


def assemble(
    symbol_files: Mapping[LocaleCode, DataFile],
    pattern_files: Mapping[LocaleCode, DataFile],
    supported_locales: Set[LocaleCode],
) -> DartSource:
    """Build the generated Dart document.

    Emits the header, then ``dateSymbols`` and ``datePatterns``. Each table
    has one entry per locale present in its file index and in
    supported_locales, in index order.

    Args:
        symbol_files: Index of the symbols corpus
        pattern_files: Index of the patterns corpus
        supported_locales: Locales the localizations package supports

    Returns:
        Complete document text

    Raises:
        UnsupportedTypeError: If a data file holds a value with no Dart form
        DataFileError: If a data file cannot be read or parsed
    """
    output: list[str] = [GENERATED_HEADER, "\n"]
    _write_table(Corpus.SYMBOLS, symbol_files, supported_locales, output)
    _write_table(Corpus.PATTERNS, pattern_files, supported_locales, output)
    return "".join(output)


def write_document(document: DartSource, path: Path) -> None:
    """Overwrite path with the document (UTF-8).

    Raises:
        OutputWriteError: If the file cannot be written
    """
    try:
        path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise OutputWriteError(
            Diagnostic(
                code=DiagnosticCode.OUTPUT_WRITE_FAILED,
                message=f"Cannot write generated file: {e.strerror or e}",
                path=str(path),
            )
        ) from e
    logger.info("Wrote %s", path)


def run_formatter(formatter: Path | Sequence[str], path: Path) -> int | None:
    """Run the Dart formatter in place on path.

    Best-effort: a missing executable or a non-zero exit is logged, never
    raised, since the unformatted file is still valid Dart.

    Args:
        formatter: Formatter executable, optionally with leading arguments
        path: File to format

    Returns:
        Formatter exit code, or None if it could not be started
    """
    command = [str(formatter)] if isinstance(formatter, Path) else list(formatter)
    command += ["-w", str(path)]
    try:
        completed = subprocess.run(command, capture_output=True, text=True, check=False)
    except OSError as e:
        logger.warning("Could not run formatter %s: %s", command[0], e)
        return None

    if completed.returncode != 0:
        logger.warning(
            "Formatter exited with status %d: %s",
            completed.returncode,
            completed.stderr.strip(),
        )
    return completed.returncode
