"""Tests for :mod:`courier.core.formats` and :mod:`courier.core.errors`."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from courier.core import errors, formats  # noqa: E402


def test_supported_extensions_are_exhaustive() -> None:
    assert set(formats.supported_extensions()) == {
        "xlsx", "xls", "csv", "dta", "RData", "json", "txt", "text", "tsv", "sqlite", "db",
    }


def test_every_format_has_an_extension() -> None:
    assert set(formats.EXTENSIONS.values()) == set(formats.DataFormat)


def test_supported_formats_text() -> None:
    text = formats.supported_formats_text()
    assert "CSV, Excel, JSON, Stata, RData, tab-delimited text, and SQLite databases" in text
    assert ".RData" in text


def test_unsupported_error_without_extension() -> None:
    err = errors.UnsupportedFormatError("")
    assert "(no extension)" in str(err)
    assert isinstance(err, ValueError)


def test_not_found_is_builtin_subclass(tmp_path: Path) -> None:
    err = errors.DatasetNotFoundError(tmp_path / "x.csv")
    assert isinstance(err, FileNotFoundError)
    assert err.path == tmp_path / "x.csv"
