"""Type aliases for the date localization generator.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DartSource",
    "JsonValue",
    "LocaleCode",
]

type LocaleCode = str
"""Locale code as spelled in file names (e.g., 'en', 'zh_Hant')."""

type JsonValue = (
    None | bool | int | float | str | list[JsonValue] | dict[str, JsonValue]
)
"""Parsed JSON document. Dict key order is the order found in the source file."""

type DartSource = str
"""Generated Dart source text."""
