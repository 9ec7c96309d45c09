"""Runtime settings read from ``COURIER_*`` environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

__all__ = ["CourierSettings", "get_settings", "reset_settings"]


class CourierSettings(BaseModel):
    """Settings shared by the loader, path resolution and logging."""

    project_root: Optional[Path] = None
    log_level: str = "INFO"
    log_dir: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "CourierSettings":
        """Build settings from the process environment.

        Unset or empty variables fall back to the field defaults.
        """

        values = {
            "project_root": os.getenv("COURIER_PROJECT_ROOT"),
            "log_level": os.getenv("COURIER_LOG_LEVEL"),
            "log_dir": os.getenv("COURIER_LOG_DIR"),
        }
        return cls(**{k: v for k, v in values.items() if v})


_settings: Optional[CourierSettings] = None


def get_settings() -> CourierSettings:
    global _settings
    if _settings is None:
        _settings = CourierSettings.from_env()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next call re-reads the environment."""

    global _settings
    _settings = None
