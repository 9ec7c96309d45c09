"""Exceptions raised by courier."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from courier.core.formats import DataFormat, supported_formats_text

__all__ = [
    "CourierError",
    "DatasetNotFoundError",
    "UnsupportedFormatError",
    "LoadError",
    "WrappedLoadError",
    "MissingBindingError",
]


class CourierError(Exception):
    """Base class for all courier errors."""


class DatasetNotFoundError(CourierError, FileNotFoundError):
    """Raised when no file exists at the resolved path."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"File not found: {path}")


class UnsupportedFormatError(CourierError, ValueError):
    """Raised when a file extension has no registered reader."""

    def __init__(self, extension: str, path: Optional[Path] = None) -> None:
        self.extension = extension
        self.path = path
        shown = f".{extension}" if extension else "(no extension)"
        super().__init__(
            f"Unsupported file type {shown}"
            + (f" for {path}" if path is not None else "")
            + f". {supported_formats_text()}"
        )


class LoadError(CourierError):
    """Wraps any failure raised by a format reader.

    The message carries the path as given by the caller and the original
    exception's message; the original exception is chained as ``__cause__``.
    """

    def __init__(
        self,
        path: str | Path,
        resolved_path: Path,
        format: DataFormat,
        original: BaseException,
    ) -> None:
        self.path = path
        self.resolved_path = resolved_path
        self.format = format
        self.original = original
        super().__init__(f"An error occurred while reading file: {path}. {original}")


WrappedLoadError = LoadError


class MissingBindingError(CourierError, LookupError):
    """Raised when an RData file lacks the requested object."""

    def __init__(self, binding: str, available: Iterable[str]) -> None:
        self.binding = binding
        self.available = sorted(available)
        super().__init__(
            f"RData file has no object named {binding!r} "
            f"(available: {', '.join(self.available) or 'none'})"
        )
