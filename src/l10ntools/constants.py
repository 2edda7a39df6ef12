"""Shared constants for l10ntools.

Centralized configuration constants used by the date localization generator
and its command-line driver. Placing them here keeps a single source of truth
for the repository layout the generator expects.

Constants are grouped by domain:
- Repository layout: Where the generator finds its inputs and writes output
- Intl data: Layout of the intl package's date data
- Dart literals: Fixed fragments of the generated source

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Repository layout
    "REPO_ROOT_MARKER",
    "FRAMEWORK_PACKAGE",
    "LOCALIZATIONS_PACKAGE",
    "DEPENDENCY_RECORD",
    "L10N_DIR_PARTS",
    "OUTPUT_FILE_NAME",
    "FORMATTER_PARTS",
    # Intl data
    "INTL_PACKAGE",
    "DATE_DATA_DIR_PARTS",
    "DATA_FILE_EXTENSION",
    "RESOURCE_FILE_EXTENSION",
    # Dart literals
    "GENERATED_HEADER",
    "COMMAND_NAME",
]

# ============================================================================
# REPOSITORY LAYOUT
# ============================================================================

# Directory whose presence identifies the repository root.
REPO_ROOT_MARKER: str = ".git"

# Package whose dependency record names the intl package location.
FRAMEWORK_PACKAGE: str = "flutter"

# Package that owns the .arb resources and receives the generated file.
LOCALIZATIONS_PACKAGE: str = "flutter_localizations"

# Dependency-lock record written by "flutter update-packages".
DEPENDENCY_RECORD: str = ".packages"

# Location of the .arb resources inside LOCALIZATIONS_PACKAGE.
L10N_DIR_PARTS: tuple[str, ...] = ("lib", "src", "l10n")

OUTPUT_FILE_NAME: str = "date_localizations.dart"

# Dart formatter, relative to the repository root.
FORMATTER_PARTS: tuple[str, ...] = ("bin", "cache", "dart-sdk", "bin", "dartfmt")

# ============================================================================
# INTL DATA
# ============================================================================

INTL_PACKAGE: str = "intl"

# Parent of the "symbols" and "patterns" corpora inside the intl package.
DATE_DATA_DIR_PARTS: tuple[str, ...] = ("src", "data", "dates")

DATA_FILE_EXTENSION: str = ".json"

RESOURCE_FILE_EXTENSION: str = ".arb"

# ============================================================================
# DART LITERALS
# ============================================================================

COMMAND_NAME: str = "l10ntools-gen-dates"

# Header of the generated file. Followed by one blank line before the tables.
GENERATED_HEADER: str = f"""\
// Copyright 2017 The Chromium Authors. All rights reserved.
// Use of this source code is governed by a BSD-style license that can be
// found in the LICENSE file.

// This file has been automatically generated.  Please do not edit it manually.
// To regenerate run (omit -w to print to console instead of the file):
// {COMMAND_NAME} -w

"""
