"""Generator configuration.

Provides a single frozen dataclass that encapsulates every path the
date localization generator reads or writes, relative to the repository
root. Defaults describe the Flutter repository layout.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from l10ntools.constants import (
    DATE_DATA_DIR_PARTS,
    DEPENDENCY_RECORD,
    FORMATTER_PARTS,
    FRAMEWORK_PACKAGE,
    INTL_PACKAGE,
    L10N_DIR_PARTS,
    LOCALIZATIONS_PACKAGE,
    OUTPUT_FILE_NAME,
    REPO_ROOT_MARKER,
    RESOURCE_FILE_EXTENSION,
)
from l10ntools.enums import Corpus

__all__ = ["GeneratorConfig"]


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable configuration for the date localization generator.

    All fields have sensible defaults; ``GeneratorConfig()`` describes the
    Flutter repository. Path helpers take the repository root so the same
    configuration works from any checkout.

    Attributes:
        framework_package: Package whose dependency record locates intl.
        localizations_package: Package holding .arb files and the output.
        dependency_record: File name of the dependency-lock record.
        intl_package: Name of the intl entry in the dependency record.
        resource_extension: Extension of localization resource files.
        output_file_name: Name of the generated Dart file.
        formatter: Formatter executable, relative to the repository root.
        repo_root_marker: Directory whose presence marks the repository root.

    Example:
        >>> config = GeneratorConfig()
        >>> config.output_path(Path("/src/flutter")).as_posix()
        '/src/flutter/packages/flutter_localizations/lib/src/l10n/date_localizations.dart'
    """

    framework_package: str = FRAMEWORK_PACKAGE
    localizations_package: str = LOCALIZATIONS_PACKAGE
    dependency_record: str = DEPENDENCY_RECORD
    intl_package: str = INTL_PACKAGE
    resource_extension: str = RESOURCE_FILE_EXTENSION
    output_file_name: str = OUTPUT_FILE_NAME
    formatter: tuple[str, ...] = FORMATTER_PARTS
    repo_root_marker: str = REPO_ROOT_MARKER

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If a name is empty, resource_extension does not
                start with a dot, or formatter is empty.
        """
        for name in (
            "framework_package",
            "localizations_package",
            "dependency_record",
            "intl_package",
            "output_file_name",
            "repo_root_marker",
        ):
            if not getattr(self, name):
                msg = f"{name} must not be empty"
                raise ValueError(msg)
        if not self.resource_extension.startswith(".") or len(self.resource_extension) < 2:
            msg = f"resource_extension must look like '.arb', got: {self.resource_extension!r}"
            raise ValueError(msg)
        if not self.formatter:
            msg = "formatter must not be empty"
            raise ValueError(msg)

    def dependency_record_path(self, repo_root: Path) -> Path:
        """Path of the dependency-lock record (packages/flutter/.packages)."""
        return repo_root / "packages" / self.framework_package / self.dependency_record

    def l10n_dir(self, repo_root: Path) -> Path:
        """Directory holding the .arb resources and the generated file."""
        return repo_root.joinpath("packages", self.localizations_package, *L10N_DIR_PARTS)

    def output_path(self, repo_root: Path) -> Path:
        """Path the generated document is written to."""
        return self.l10n_dir(repo_root) / self.output_file_name

    def formatter_path(self, repo_root: Path) -> Path:
        """Path of the formatter executable."""
        return repo_root.joinpath(*self.formatter)

    @staticmethod
    def corpus_dir(intl_root: Path, corpus: Corpus) -> Path:
        """Directory of one corpus inside the intl package."""
        return intl_root.joinpath(*DATE_DATA_DIR_PARTS, corpus.value)
