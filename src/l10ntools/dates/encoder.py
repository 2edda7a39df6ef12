"""Encode parsed JSON values as Dart constant literals.

Converts the output of json.loads() into Dart source text that evaluates
to the same structure:

    None            -> null
    True / False    -> true / false
    int / float     -> 42 / 1.5
    str             -> r'''text''' or r\"\"\"text\"\"\" (raw, never escaped)
    list            -> const <dynamic>[...]
    dict            -> const <String, dynamic>{'key': value, ...}

Dict key order is kept as given; nothing is sorted, so generated code
diffs cleanly against the source data.

Known limitation: raw strings cannot escape their delimiter. Text that
contains a single quote is wrapped in triple double quotes; if it also
contains \"\"\" or ends with a double quote, the literal is cut short.
Map keys are emitted in plain single quotes and break on ', \\ or $.
The encoder emits such literals unchanged and logs a warning.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math

from l10ntools.dates.types import DartSource, JsonValue
from l10ntools.diagnostics import Diagnostic, DiagnosticCode, UnsupportedTypeError

__all__ = [
    "DartLiteralEncoder",
    "encode",
    "encode_entry",
    "has_delimiter_collision",
    "has_key_collision",
]

logger = logging.getLogger(__name__)

# Characters that change meaning inside a non-raw single-quoted Dart string.
_KEY_SPECIAL_CHARS: frozenset[str] = frozenset("'\\$\n\r")


def has_delimiter_collision(text: str) -> bool:
    """Check whether text cannot be represented by the raw string rule.

    Text without a single quote always fits in r'''...'''. Text with one
    is wrapped in r\"\"\"...\"\"\", which ends early at an embedded \"\"\" or
    merges with a trailing double quote.

    Example:
        >>> has_delimiter_collision("it's")
        False
        >>> has_delimiter_collision('it\\'s a \"quote\"')
        True
    """
    if "'" not in text:
        return False
    return '"""' in text or text.endswith('"')


def has_key_collision(key: str) -> bool:
    """Check whether a map key breaks its plain single-quoted literal."""
    return any(char in _KEY_SPECIAL_CHARS for char in key)


def _unsupported(value: object, what: str) -> UnsupportedTypeError:
    """Build the error for a value or map key outside the JSON model."""
    return UnsupportedTypeError(
        Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_TYPE,
            message=f"Unsupported JSON {what} {type(value).__name__} of value {value!r}",
            hint="Only null, booleans, finite numbers, strings, lists "
            "and objects with string keys can be encoded",
        ),
        value=value,
    )


class DartLiteralEncoder:
    """Converts JSON values to Dart constant literal source.

    Stateless: all output is local to each encode() call.

    Usage:
        >>> encoder = DartLiteralEncoder()
        >>> encoder.encode({"a": [1, None]})
        "const <String, dynamic>{'a': const <dynamic>[1,null],\\n}"
    """

    def encode(self, value: JsonValue) -> DartSource:
        """Encode a JSON value as a Dart literal.

        Args:
            value: Value produced by json.loads()

        Returns:
            Dart literal source

        Raises:
            UnsupportedTypeError: If value (or anything nested in it) is
                not a JSON type, or is a non-finite float
        """
        output: list[str] = []
        self._encode_value(value, output)
        return "".join(output)

    def encode_entry(self, key: str, value: JsonValue) -> DartSource:
        """Encode one map entry: ``'key': <literal>,`` without a newline."""
        output: list[str] = []
        self._encode_entry(key, value, output)
        return "".join(output)

    def _encode_entry(self, key: object, value: JsonValue, output: list[str]) -> None:
        """Encode map entry to output list.

        Raises:
            UnsupportedTypeError: If key is not a str
        """
        if not isinstance(key, str):
            raise _unsupported(key, "map key type")
        if has_key_collision(key):
            logger.warning("Map key %r cannot be quoted safely; literal will be invalid", key)
        output.append(f"'{key}': ")
        self._encode_value(value, output)
        output.append(",")

    def _encode_value(self, value: object, output: list[str]) -> None:
        """Encode value using structural pattern matching.

        bool is matched before int because bool subclasses int.
        """
        match value:
            case None:
                output.append("null")
            case bool():
                output.append("true" if value else "false")
            case int():
                output.append(str(value))
            case float() if math.isfinite(value):
                output.append(repr(value))
            case str():
                self._encode_string(value, output)
            case list():
                output.append("const <dynamic>[")
                for i, item in enumerate(value):
                    if i > 0:
                        output.append(",")
                    self._encode_value(item, output)
                output.append("]")
            case dict():
                output.append("const <String, dynamic>{")
                for key, item in value.items():
                    self._encode_entry(key, item, output)
                    output.append("\n")
                output.append("}")
            case _:
                raise _unsupported(value, "type")

    def _encode_string(self, text: str, output: list[str]) -> None:
        """Encode text as a raw Dart string, picking the delimiter that fits."""
        if has_delimiter_collision(text):
            logger.warning(
                "String %r contains both quote styles; raw literal will be invalid", text
            )
        if "'" in text:
            output.append(f'r"""{text}"""')
        else:
            output.append(f"r'''{text}'''")


_ENCODER = DartLiteralEncoder()


def encode(value: JsonValue) -> DartSource:
    """Encode a JSON value as a Dart literal.

    Convenience function for DartLiteralEncoder.encode().

    Example:
        >>> encode(None), encode(42), encode(True)
        ('null', '42', 'true')
        >>> encode("hello")
        "r'''hello'''"
        >>> encode("it's")
        'r\"\"\"it\\'s\"\"\"'
    """
    return _ENCODER.encode(value)


def encode_entry(key: str, value: JsonValue) -> DartSource:
    """Encode one map entry: ``'key': <literal>,``.

    Convenience function for DartLiteralEncoder.encode_entry().
    """
    return _ENCODER.encode_entry(key, value)
