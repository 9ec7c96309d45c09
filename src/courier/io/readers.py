"""Format-specific readers.

Each reader takes the resolved path plus the caller's keyword options and
returns the parsed table. Options are forwarded to the underlying library
untouched except for the few control options documented per reader.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from pathlib import Path
from typing import Any, Callable, Dict

import pandas as pd
import pyreadr

from courier.core.errors import MissingBindingError
from courier.core.formats import DataFormat
from courier.utils.logging import get_logger

log = get_logger(__name__)

__all__ = [
    "Reader",
    "DEFAULT_RDATA_BINDING",
    "DEFAULT_SQLITE_TABLE",
    "DEFAULT_READERS",
    "read_excel",
    "read_csv",
    "read_stata",
    "read_rdata",
    "read_json",
    "read_tsv",
    "read_sqlite",
]

Reader = Callable[..., Any]

# Carried-over defaults: RData files are expected to hold an object called
# ``dta`` and databases a table called ``table_name`` unless told otherwise.
DEFAULT_RDATA_BINDING = "dta"
DEFAULT_SQLITE_TABLE = "table_name"


def read_excel(path: Path, **options: Any) -> pd.DataFrame:
    """Read an ``.xlsx``/``.xls`` workbook.

    ``sheet`` selects a worksheet by name or by 1-based position, so
    ``sheet=1`` is the first sheet. ``sheet_name`` keeps pandas' 0-based
    meaning.
    """

    if "sheet" in options:
        if "sheet_name" in options:
            raise TypeError("Pass either 'sheet' or 'sheet_name', not both")
        sheet = options.pop("sheet")
        if isinstance(sheet, int) and not isinstance(sheet, bool):
            if sheet < 1:
                raise ValueError(f"Sheet positions start at 1, got {sheet}")
            sheet = sheet - 1
        options["sheet_name"] = sheet
    return pd.read_excel(path, **options)


def read_csv(path: Path, **options: Any) -> pd.DataFrame:
    return pd.read_csv(path, **options)


def read_stata(path: Path, **options: Any) -> pd.DataFrame:
    return pd.read_stata(path, **options)


def read_rdata(path: Path, binding: str = DEFAULT_RDATA_BINDING, **options: Any) -> Any:
    """Read an ``.RData`` file and return the object named ``binding``.

    The file's objects are returned by :func:`pyreadr.read_r` as a mapping
    of name to data frame; nothing is injected into any namespace.

    Raises
    ------
    MissingBindingError
        If the file holds no object called ``binding``.
    """

    objects = pyreadr.read_r(str(path), **options)
    log.debug("RData objects in %s: %s", path, list(objects.keys()))
    if binding not in objects:
        raise MissingBindingError(binding, objects.keys())
    return objects[binding]


def read_json(path: Path, **options: Any) -> pd.DataFrame:
    return pd.read_json(path, **options)


def read_tsv(path: Path, **options: Any) -> pd.DataFrame:
    """Read tab-delimited text; ``sep`` may still be overridden."""

    options.setdefault("sep", "\t")
    return pd.read_csv(path, **options)


def _quote_identifier(name: str) -> str:
    return '"' + name.replace('"', '""') + '"'


def read_sqlite(
    path: Path,
    table: str | None = None,
    query: str | None = None,
    **options: Any,
) -> pd.DataFrame:
    """Run a query against a SQLite database file.

    Without ``table`` or ``query`` the statement is
    ``SELECT * FROM table_name``, which only succeeds if the database has a
    table literally called ``table_name``. ``table`` selects another table,
    ``query`` replaces the statement entirely. The database is opened
    read-only and the connection is closed before returning or raising.
    """

    if table is not None and query is not None:
        raise TypeError("Pass either 'table' or 'query', not both")
    if query is None:
        query = f"SELECT * FROM {_quote_identifier(table or DEFAULT_SQLITE_TABLE)}"

    uri = Path(path).resolve().as_uri() + "?mode=ro"
    log.debug("Querying %s: %s", path, query)
    with closing(sqlite3.connect(uri, uri=True)) as conn:
        return pd.read_sql_query(query, conn, **options)


DEFAULT_READERS: Dict[DataFormat, Reader] = {
    DataFormat.EXCEL: read_excel,
    DataFormat.CSV: read_csv,
    DataFormat.STATA: read_stata,
    DataFormat.RDATA: read_rdata,
    DataFormat.JSON: read_json,
    DataFormat.TEXT: read_tsv,
    DataFormat.SQLITE: read_sqlite,
}
