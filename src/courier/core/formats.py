"""Supported dataset formats and the extension table."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

__all__ = [
    "DataFormat",
    "EXTENSIONS",
    "supported_extensions",
    "supported_formats_text",
]


class DataFormat(str, Enum):
    """Format families courier knows how to read."""

    CSV = "csv"
    EXCEL = "excel"
    JSON = "json"
    STATA = "stata"
    RDATA = "rdata"
    TEXT = "text"
    SQLITE = "sqlite"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS: Dict[DataFormat, str] = {
    DataFormat.CSV: "CSV",
    DataFormat.EXCEL: "Excel",
    DataFormat.JSON: "JSON",
    DataFormat.STATA: "Stata",
    DataFormat.RDATA: "RData",
    DataFormat.TEXT: "tab-delimited text",
    DataFormat.SQLITE: "SQLite databases",
}

# Matched exactly, case-sensitive.
EXTENSIONS: Dict[str, DataFormat] = {
    "xlsx": DataFormat.EXCEL,
    "xls": DataFormat.EXCEL,
    "csv": DataFormat.CSV,
    "dta": DataFormat.STATA,
    "RData": DataFormat.RDATA,
    "json": DataFormat.JSON,
    "txt": DataFormat.TEXT,
    "text": DataFormat.TEXT,
    "tsv": DataFormat.TEXT,
    "sqlite": DataFormat.SQLITE,
    "db": DataFormat.SQLITE,
}


def supported_extensions() -> Tuple[str, ...]:
    """Return every extension courier accepts, in table order."""

    return tuple(EXTENSIONS)


def supported_formats_text() -> str:
    """Human readable list of supported formats for error messages."""

    labels = [fmt.label for fmt in DataFormat]
    names = ", ".join(labels[:-1]) + f", and {labels[-1]}"
    exts = ", ".join(f".{ext}" for ext in EXTENSIONS)
    return f"Supported file types include {names} ({exts})."
