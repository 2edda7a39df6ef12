"""l10ntools exception hierarchy with structured diagnostics.

All exceptions accept either a plain message or a Diagnostic object.
Every error is fatal for the generator run; nothing here is recoverable.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class L10nToolsError(Exception):
    """Base exception for all l10ntools errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize L10nToolsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class PreconditionError(L10nToolsError):
    """The generator was started in an environment it cannot run in.

    Raised before any data directory is touched:
    - Working directory is not the repository root
    - Dependency record is missing
    - Dependency record has no entry for the intl package
    """


class DirectoryNotFoundError(L10nToolsError, FileNotFoundError):
    """A required data or resource directory does not exist.

    Subclasses FileNotFoundError so callers handling OSError still see it.
    """


class DataFileError(L10nToolsError):
    """A data file exists but cannot be read or parsed.

    Covers read failures, invalid UTF-8 and malformed JSON. The original
    exception is chained as __cause__.
    """


class OutputWriteError(L10nToolsError, OSError):
    """The generated document could not be written."""


class UnsupportedTypeError(L10nToolsError, TypeError):
    """A value has no Dart literal representation.

    Cannot happen for values produced by json.loads() except for
    NaN and Infinity, which JSON itself does not allow.

    Attributes:
        value: The offending value
    """

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        """Initialize UnsupportedTypeError.

        Args:
            message: Error message string OR Diagnostic object
            value: The value that could not be encoded
        """
        super().__init__(message)
        self.value = value
