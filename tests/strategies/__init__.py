"""Hypothesis strategies for l10ntools property-based testing.

Usage:
    from tests.strategies import json_values, locale_codes
"""

from .documents import json_scalars, json_values, locale_codes, safe_keys, safe_text

__all__ = [
    "json_scalars",
    "json_values",
    "locale_codes",
    "safe_keys",
    "safe_text",
]
