"""Enumerations for l10ntools type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class Corpus(StrEnum):
    """One of the two independent sets of intl date data files.

    StrEnum provides automatic string conversion: str(Corpus.SYMBOLS) == "symbols"
    The value doubles as the corpus directory name under src/data/dates.
    """

    SYMBOLS = "symbols"
    """Month/day names, eras, AM/PM markers: symbols/en.json"""

    PATTERNS = "patterns"
    """Skeleton to pattern mappings: patterns/en.json"""

    @property
    def table_name(self) -> str:
        """Name of the generated Dart constant holding this corpus."""
        return _TABLE_NAMES[self]


_TABLE_NAMES: dict[Corpus, str] = {
    Corpus.SYMBOLS: "dateSymbols",
    Corpus.PATTERNS: "datePatterns",
}


class TextDirection(StrEnum):
    """Reading direction of an announced message."""

    LTR = "ltr"
    RTL = "rtl"


class SemanticsEventType(StrEnum):
    """Wire name of a semantics event, emitted as the "type" map entry."""

    ANNOUNCE = "announce"
    TOOLTIP = "tooltip"
    LONG_PRESS = "longPress"
    TAP = "tap"


__all__ = [
    "Corpus",
    "SemanticsEventType",
    "TextDirection",
]
