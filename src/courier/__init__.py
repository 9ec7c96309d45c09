"""courier: read any common dataset file with one function."""

from .core.errors import (
    CourierError,
    DatasetNotFoundError,
    LoadError,
    MissingBindingError,
    UnsupportedFormatError,
    WrappedLoadError,
)
from .core.formats import DataFormat, supported_extensions
from .core.paths import here
from .io.loader import detect_format, load

__all__ = [
    "load",
    "detect_format",
    "here",
    "DataFormat",
    "supported_extensions",
    "CourierError",
    "DatasetNotFoundError",
    "UnsupportedFormatError",
    "LoadError",
    "WrappedLoadError",
    "MissingBindingError",
]
