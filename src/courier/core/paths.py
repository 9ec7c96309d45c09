"""Project root discovery and path resolution.

Relative dataset paths are anchored at the project root rather than the
current working directory, so ``load("data/sales.csv")`` works the same from
a notebook in a sub-folder as from the repository root.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from courier.config import get_settings

__all__ = ["ROOT_MARKERS", "find_project_root", "here"]

ROOT_MARKERS: Tuple[str, ...] = (
    ".here",
    "pyproject.toml",
    "setup.cfg",
    "setup.py",
    ".git",
    ".hg",
    ".svn",
)


def find_project_root(start: str | Path | None = None) -> Path:
    """Return the project root for ``start``.

    ``COURIER_PROJECT_ROOT`` takes precedence. It is read through the cached
    settings, so changing it after the first lookup only takes effect once
    :func:`courier.config.reset_settings` is called. Otherwise the directory
    tree is walked upwards from ``start`` (default: the working directory)
    until a directory containing one of :data:`ROOT_MARKERS` is found. If
    none is found, ``start`` itself is the root.
    """

    configured = get_settings().project_root
    if configured is not None:
        return configured.expanduser().resolve()

    origin = Path(start or Path.cwd()).expanduser().resolve()
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in ROOT_MARKERS):
            return candidate
    return origin


def here(*parts: str | os.PathLike, root: str | Path | None = None) -> Path:
    """Build a path relative to the project root.

    Absolute paths are returned unchanged. ``root`` bypasses discovery.
    """

    joined = Path(*parts) if parts else Path()
    joined = joined.expanduser()
    if joined.is_absolute():
        return joined
    base = Path(root) if root is not None else find_project_root()
    return base / joined
