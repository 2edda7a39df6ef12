"""Tests for intl data file discovery (list_intl_data, DataFile)."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from l10ntools.dates.indexing import DataFile, list_intl_data, require_directory
from l10ntools.diagnostics import DataFileError, DiagnosticCode, DirectoryNotFoundError
from tests.strategies import locale_codes


class TestListIntlData:
    """list_intl_data() maps locale codes to JSON files."""

    def test_indexes_json_files(self, tmp_path: Path) -> None:
        (tmp_path / "en.json").write_text("{}", encoding="utf-8")
        (tmp_path / "zh_Hant.json").write_text("{}", encoding="utf-8")

        files = list_intl_data(tmp_path)

        assert set(files) == {"en", "zh_Hant"}
        assert files["en"] == DataFile(locale="en", path=tmp_path / "en.json")

    def test_skips_other_extensions(self, tmp_path: Path) -> None:
        (tmp_path / "en.json").write_text("{}", encoding="utf-8")
        (tmp_path / "README.md").write_text("", encoding="utf-8")
        (tmp_path / "fr.json.bak").write_text("{}", encoding="utf-8")

        assert list(list_intl_data(tmp_path)) == ["en"]

    def test_skips_subdirectories(self, tmp_path: Path) -> None:
        (tmp_path / "de.json").mkdir()
        (tmp_path / "en.json").write_text("{}", encoding="utf-8")

        assert list(list_intl_data(tmp_path)) == ["en"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list_intl_data(tmp_path) == {}

    def test_result_sorted_by_locale(self, tmp_path: Path) -> None:
        for locale in ["fr", "en_US", "de", "en"]:
            (tmp_path / f"{locale}.json").write_text("{}", encoding="utf-8")

        assert list(list_intl_data(tmp_path)) == ["de", "en", "en_US", "fr"]

    def test_missing_directory_raises(self, tmp_path: Path) -> None:
        missing = tmp_path / "symbols"

        with pytest.raises(DirectoryNotFoundError) as exc_info:
            list_intl_data(missing)

        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.DIRECTORY_NOT_FOUND
        assert exc_info.value.diagnostic.path == str(missing)

    def test_missing_directory_is_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            list_intl_data(tmp_path / "patterns")

    def test_file_in_place_of_directory_raises(self, tmp_path: Path) -> None:
        not_a_dir = tmp_path / "symbols"
        not_a_dir.write_text("", encoding="utf-8")

        with pytest.raises(DirectoryNotFoundError):
            require_directory(not_a_dir)

    @given(locales=st.sets(locale_codes(), max_size=8))
    @settings(max_examples=25)
    def test_every_json_file_indexed_once(self, locales: set[str]) -> None:
        with tempfile.TemporaryDirectory() as temp_dir:
            directory = Path(temp_dir)
            for locale in locales:
                (directory / f"{locale}.json").write_text("{}", encoding="utf-8")

            files = list_intl_data(directory)

        assert list(files) == sorted(locales)
        assert all(files[locale].locale == locale for locale in locales)


class TestDataFile:
    """DataFile.read_json() parses the whole document."""

    def test_read_json(self, tmp_path: Path) -> None:
        path = tmp_path / "en.json"
        path.write_text('{"NAME": "en", "ERAS": ["BC", "AD"]}', encoding="utf-8")

        assert DataFile("en", path).read_json() == {"NAME": "en", "ERAS": ["BC", "AD"]}

    def test_read_json_preserves_key_order(self, tmp_path: Path) -> None:
        path = tmp_path / "en.json"
        path.write_text('{"z": 1, "a": 2, "m": 3}', encoding="utf-8")

        data = DataFile("en", path).read_json()

        assert isinstance(data, dict)
        assert list(data) == ["z", "a", "m"]

    def test_read_json_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "ja.json"
        path.write_text(json.dumps({"ERAS": ["紀元前", "西暦"]}, ensure_ascii=False), encoding="utf-8")

        assert DataFile("ja", path).read_json() == {"ERAS": ["紀元前", "西暦"]}

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "en.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(DataFileError) as exc_info:
            DataFile("en", path).read_json()

        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.INVALID_DATA_FILE
        assert exc_info.value.diagnostic.path == str(path)

    def test_invalid_utf8_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "en.json"
        path.write_bytes(b'{"NAME": "\xff"}')

        with pytest.raises(DataFileError, match="INVALID_DATA_FILE") as exc_info:
            DataFile("en", path).read_json()

        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DataFileError) as exc_info:
            DataFile("en", tmp_path / "en.json").read_json()

        assert isinstance(exc_info.value.__cause__, FileNotFoundError)
