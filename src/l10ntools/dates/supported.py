"""Supported locale discovery from localization resource file names.

Resource files are named ``<prefix>_<locale>.<ext>``, e.g.
``material_en.arb`` or ``material_zh_Hant.arb``. The locale is everything
between the first underscore and the extension.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator
from functools import lru_cache
from pathlib import Path

from l10ntools.constants import RESOURCE_FILE_EXTENSION
from l10ntools.dates.indexing import require_directory
from l10ntools.dates.types import LocaleCode
from l10ntools.locale_utils import is_known_locale

__all__ = [
    "iter_supported_locales",
    "supported_locales",
]

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _file_name_pattern(extension: str) -> re.Pattern[str]:
    """Compile the file name pattern for one resource extension."""
    return re.compile(rf"^.*?_(\w+){re.escape(extension)}$")


def iter_supported_locales(
    directory: Path,
    *,
    extension: str = RESOURCE_FILE_EXTENSION,
) -> Iterator[LocaleCode]:
    """Yield the locale code of every resource file in directory.

    Lazy and single-use. Order follows the directory listing, which is
    platform-dependent; collect into a set before use.

    Only file names are matched, so underscores in parent directories
    (``flutter_localizations``) never leak into locale codes. Files that
    do not match are skipped.

    Args:
        directory: Directory of localization resource files
        extension: Resource file extension, including the dot

    Yields:
        Locale codes, e.g. "en", "zh_Hant"

    Raises:
        DirectoryNotFoundError: If directory does not exist (on first next())
    """
    require_directory(directory)
    pattern = _file_name_pattern(extension)

    for entry in directory.iterdir():
        if not entry.is_file():
            continue
        match = pattern.match(entry.name)
        if match is None:
            logger.debug("Skipping %s: not a localization resource", entry.name)
            continue
        locale = match[1]
        if not is_known_locale(locale):
            logger.warning("Locale '%s' from %s is not known to CLDR", locale, entry.name)
        yield locale


def supported_locales(
    directory: Path,
    *,
    extension: str = RESOURCE_FILE_EXTENSION,
) -> frozenset[LocaleCode]:
    """Collect iter_supported_locales() into a read-only set."""
    return frozenset(iter_supported_locales(directory, extension=extension))
