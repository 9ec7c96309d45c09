"""IO utilities for courier."""

from .loader import detect_format, file_extension, load
from .readers import DEFAULT_READERS

__all__ = ["load", "detect_format", "file_extension", "DEFAULT_READERS"]
