"""Command-line driver for the date localization generator.

Extracts localized date symbols and patterns from the intl package for
the subset of locales supported by the flutter_localizations package.

Usage:
    Print the generated Dart code as a dry run:

        l10ntools-gen-dates

    If the output looks good, overwrite
    packages/flutter_localizations/lib/src/l10n/date_localizations.dart:

        l10ntools-gen-dates -w

Exit Codes:
    0: Document generated
    1: Precondition failure or processing error (diagnostic on stderr)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from l10ntools.constants import COMMAND_NAME
from l10ntools.dates.assembler import assemble, run_formatter, write_document
from l10ntools.dates.config import GeneratorConfig
from l10ntools.dates.indexing import list_intl_data
from l10ntools.dates.supported import supported_locales
from l10ntools.dates.types import DartSource
from l10ntools.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    L10nToolsError,
    PreconditionError,
)
from l10ntools.enums import Corpus

__all__ = [
    "generate",
    "locate_intl_root",
    "main",
]

logger = logging.getLogger(__name__)


def _parse_dependency_path(value: str, record_path: Path) -> Path:
    """Resolve the location part of a dependency record line.

    Entries are either file URIs (``file:///home/u/.pub-cache/intl/lib/``)
    or paths relative to the record's directory.

    Raises:
        PreconditionError: If a file URI is not absolute
    """
    if not value.startswith("file:"):
        return record_path.parent / value
    try:
        return Path.from_uri(value)
    except ValueError as e:
        raise PreconditionError(
            Diagnostic(
                code=DiagnosticCode.DEPENDENCY_NOT_FOUND,
                message=f"Unresolvable dependency location {value!r}: {e}",
                path=str(record_path),
            )
        ) from e


def locate_intl_root(repo_root: Path, config: GeneratorConfig | None = None) -> Path:
    """Find the intl package's lib directory through the dependency record.

    Args:
        repo_root: Repository root to run from
        config: Generator configuration (default: Flutter layout)

    Returns:
        Path to the intl package root holding src/data/dates

    Raises:
        PreconditionError: If repo_root is not the repository root, the
            dependency record is missing or unreadable, or it has no
            intl entry
    """
    config = config or GeneratorConfig()

    if not (repo_root / config.repo_root_marker).is_dir():
        raise PreconditionError(
            Diagnostic(
                code=DiagnosticCode.NOT_REPOSITORY_ROOT,
                message=f"{COMMAND_NAME} must be run from the root of the Flutter repository",
                path=str(repo_root.resolve()),
                hint="Change to the repository root or pass --repo-root",
            )
        )

    record_path = config.dependency_record_path(repo_root)
    if not record_path.is_file():
        raise PreconditionError(
            Diagnostic(
                code=DiagnosticCode.DEPENDENCY_RECORD_MISSING,
                message=f"File not found: {record_path}",
                path=str(record_path),
                hint=f'{COMMAND_NAME} must be run after a successful "flutter update-packages"',
            )
        )

    try:
        record = record_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise PreconditionError(
            Diagnostic(
                code=DiagnosticCode.DEPENDENCY_RECORD_UNREADABLE,
                message=f"Cannot read {record_path}: {e}",
                path=str(record_path),
            )
        ) from e

    prefix = f"{config.intl_package}:"
    for line in record.splitlines():
        if line.startswith(prefix):
            value = line.removeprefix(prefix).strip()
            if value:
                intl_root = _parse_dependency_path(value, record_path)
                logger.debug("Found %s at %s", config.intl_package, intl_root)
                return intl_root
            break

    raise PreconditionError(
        Diagnostic(
            code=DiagnosticCode.DEPENDENCY_NOT_FOUND,
            message=f"{config.intl_package} dependency not found in {record_path}",
            path=str(record_path),
        )
    )


def generate(repo_root: Path, config: GeneratorConfig | None = None) -> DartSource:
    """Run the whole pipeline and return the generated document.

    Raises:
        PreconditionError: See locate_intl_root()
        DirectoryNotFoundError: If a data or resource directory is missing
        DataFileError: If a supported locale's data file cannot be parsed
        UnsupportedTypeError: If a data file holds a value with no Dart form
    """
    config = config or GeneratorConfig()
    intl_root = locate_intl_root(repo_root, config)

    symbol_files = list_intl_data(config.corpus_dir(intl_root, Corpus.SYMBOLS))
    pattern_files = list_intl_data(config.corpus_dir(intl_root, Corpus.PATTERNS))
    locales = supported_locales(
        config.l10n_dir(repo_root), extension=config.resource_extension
    )
    logger.info("Found %d supported locales", len(locales))

    return assemble(symbol_files, pattern_files, locales)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog=COMMAND_NAME,
        description=(
            "Extract localized date symbols and patterns from the intl package "
            "for the locales supported by flutter_localizations."
        ),
    )
    parser.add_argument(
        "--overwrite", "-w",
        action="store_true",
        help="Overwrite the generated Dart file instead of printing it.",
    )
    parser.add_argument(
        "--repo-root",
        type=Path,
        default=Path(),
        help="Repository root (default: current directory).",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Generate the date localizations and print or write them."""
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    repo_root: Path = args.repo_root
    config = GeneratorConfig()
    output_path = config.output_path(repo_root)

    try:
        document = generate(repo_root, config)
        if args.overwrite:
            write_document(document, output_path)
    except L10nToolsError as e:
        print(e, file=sys.stderr)
        return 1

    if args.overwrite:
        run_formatter(config.formatter_path(repo_root), output_path)
    else:
        print(document)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
