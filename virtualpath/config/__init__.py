"""virtualpath centralized configuration for runtime settings.

All settings are backed by environment variables following the VP_* naming convention.

Example:
    >>> from virtualpath.config import settings
    >>> settings.app_root
    '/'

Environment Variables:
    VP_APP_ROOT: Ambient application root used when no explicit root is passed (default: /)
    VP_CASE_INSENSITIVE: Compare application root prefixes ignoring case (default: on for Windows hosts)
    VP_LOG_DIR: Directory for structured JSON-lines logs (default: unset, console only)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


def _env(name: str, default: str) -> str:
    """Get environment variable with VP_* prefix validation."""
    if not name.startswith("VP_"):
        raise ValueError(f"Only VP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_path(name: str) -> Optional[str]:
    """Get an environment variable as an absolute filesystem path, or None when unset."""
    raw = _env(name, "")
    if not raw:
        return None
    return str(Path(raw).expanduser().resolve())


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for virtualpath.

    This dataclass is frozen to prevent accidental mutation at runtime.
    For testing, use monkeypatch to replace the module-level `settings` instance.
    """

    app_root: str = "/"
    case_insensitive: bool = os.name == "nt"
    log_dir: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            app_root=_env("VP_APP_ROOT", "/"),
            case_insensitive=_env_bool("VP_CASE_INSENSITIVE", os.name == "nt"),
            log_dir=_env_path("VP_LOG_DIR"),
        )


# Module-level instance for convenient access
settings = Settings.from_env()

__all__ = ["settings", "Settings"]
