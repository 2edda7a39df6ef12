"""Discovery of per-locale intl data files.

The intl package ships one JSON document per locale and corpus, e.g.
``src/data/dates/symbols/en.json``. This module maps locale codes to
those documents without reading them.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from l10ntools.constants import DATA_FILE_EXTENSION
from l10ntools.dates.types import JsonValue, LocaleCode
from l10ntools.diagnostics import (
    DataFileError,
    Diagnostic,
    DiagnosticCode,
    DirectoryNotFoundError,
)

__all__ = [
    "DataFile",
    "list_intl_data",
    "require_directory",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DataFile:
    """Handle to one locale's JSON document on disk.

    Attributes:
        locale: Locale code derived from the file name
        path: Location of the document
    """

    locale: LocaleCode
    path: Path

    def read_json(self) -> JsonValue:
        """Read and parse the whole document.

        Object key order is preserved (json.loads builds insertion-ordered dicts).

        Raises:
            DataFileError: If the file cannot be read, is not UTF-8, or is
                not valid JSON
        """
        try:
            return json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise DataFileError(
                Diagnostic(
                    code=DiagnosticCode.INVALID_DATA_FILE,
                    message=f"Cannot read {self.locale} data: {e}",
                    path=str(self.path),
                )
            ) from e


def require_directory(directory: Path) -> None:
    """Raise DirectoryNotFoundError unless directory is an existing directory."""
    if not directory.is_dir():
        raise DirectoryNotFoundError(
            Diagnostic(
                code=DiagnosticCode.DIRECTORY_NOT_FOUND,
                message="Directory not found",
                path=str(directory),
            )
        )


def list_intl_data(directory: Path) -> dict[LocaleCode, DataFile]:
    """Index the JSON documents directly inside a corpus directory.

    Subdirectories and files with other extensions are skipped. The result
    is ordered by locale code, so iteration order does not depend on the
    platform's directory listing order.

    Args:
        directory: Corpus directory (e.g. <intl>/src/data/dates/symbols)

    Returns:
        Mapping of locale code to data file handle

    Raises:
        DirectoryNotFoundError: If directory does not exist

    Example:
        >>> files = list_intl_data(Path("intl/src/data/dates/symbols"))
        >>> files["en"].path.name
        'en.json'
    """
    require_directory(directory)

    result: dict[LocaleCode, DataFile] = {}
    for entry in directory.iterdir():
        if not entry.is_file() or not entry.name.endswith(DATA_FILE_EXTENSION):
            continue
        locale = entry.name.removesuffix(DATA_FILE_EXTENSION)
        result[locale] = DataFile(locale=locale, path=entry)
        logger.debug("Indexed %s data for locale %s", directory.name, locale)

    logger.info("Indexed %d data files in %s", len(result), directory)
    return dict(sorted(result.items()))
