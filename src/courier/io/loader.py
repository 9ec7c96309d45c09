"""Convenience loader dispatching based on file extension."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Optional

from courier.core.errors import DatasetNotFoundError, LoadError, UnsupportedFormatError
from courier.core.formats import EXTENSIONS, DataFormat
from courier.core.paths import here
from courier.io.readers import DEFAULT_READERS, Reader
from courier.utils.logging import get_logger

log = get_logger(__name__)


def file_extension(path: str | os.PathLike) -> str:
    """Return the text after the last ``.`` of the file name.

    The result is case-sensitive. Names without a dot, or whose only dot is
    the leading one (``.csv``), have no extension and yield ``""``.
    """

    name = Path(path).name
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return ""
    return ext


def detect_format(path: str | os.PathLike) -> DataFormat:
    """Return the :class:`DataFormat` for ``path`` based on its extension."""

    ext = file_extension(path)
    try:
        return EXTENSIONS[ext]
    except KeyError:
        raise UnsupportedFormatError(ext, Path(path)) from None


def load(
    path: str | os.PathLike,
    *,
    root: str | Path | None = None,
    loaders: Optional[Mapping[DataFormat, Reader]] = None,
    **options: Any,
) -> Any:
    """Load the dataset at ``path``.

    ``path`` is resolved against the project root (see
    :func:`courier.core.paths.here`); ``root`` pins the root explicitly. The
    reader is picked from the file extension and receives ``options``
    unchanged. ``loaders`` overrides the reader used for individual formats.

    Raises
    ------
    FileNotFoundError
        As :class:`~courier.core.errors.DatasetNotFoundError` when nothing
        exists at the resolved path.
    UnsupportedFormatError
        If the extension is not one of the supported ones.
    LoadError
        If the reader fails for any reason.
    """

    resolved = here(path, root=root)
    log.debug("Loading %s (resolved to %s)", path, resolved)
    if not resolved.is_file():
        raise DatasetNotFoundError(resolved)

    fmt = detect_format(resolved)
    reader = (loaders or {}).get(fmt) or DEFAULT_READERS[fmt]
    log.debug("Dispatching %s to %s reader", resolved, fmt.label)

    try:
        result = reader(resolved, **options)
    except Exception as exc:
        log.error("Failed to read %s: %s", path, exc)
        raise LoadError(path, resolved, fmt, exc) from exc
    return result


__all__ = ["load", "detect_format", "file_extension"]
