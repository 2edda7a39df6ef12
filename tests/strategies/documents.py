"""Hypothesis strategies for JSON documents and locale codes.

Text strategies exclude the characters the raw string rule cannot carry
(see has_delimiter_collision), so generated documents round-trip through
the Dart literal reader in tests.helpers.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from l10ntools.dates.types import JsonValue

# Quote-free text always uses the r'''...''' form.
safe_text = st.text(
    st.characters(exclude_categories=("Cs",), exclude_characters="'"),
    max_size=20,
)

# Map keys are emitted in plain single quotes.
safe_keys = st.text(
    st.characters(exclude_categories=("Cs",), exclude_characters="'\\$\r\n"),
    max_size=10,
)

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(2**53), max_value=2**53),
    st.floats(allow_nan=False, allow_infinity=False),
    safe_text,
)


def _containers(children: st.SearchStrategy[JsonValue]) -> st.SearchStrategy[JsonValue]:
    return st.lists(children, max_size=4) | st.dictionaries(safe_keys, children, max_size=4)


json_values: st.SearchStrategy[JsonValue] = st.recursive(
    json_scalars, _containers, max_leaves=20
)


@st.composite
def locale_codes(draw: st.DrawFn) -> str:
    """Locale codes as spelled in intl and .arb file names (en, en_GB, zh_Hant)."""
    language = draw(st.sampled_from(["de", "en", "es", "fr", "ja", "pt", "sr", "zh"]))
    suffix = draw(st.sampled_from(["", "_GB", "_US", "_BR", "_Hant", "_Latn"]))
    event(f"locale_suffix={suffix or 'none'}")
    return language + suffix
