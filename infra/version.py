# infra/version.py
from __future__ import annotations

import os
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = "govtrack-transparency"
_DEFAULT_APP_VERSION = "1.0.0"
_VERSION_FILE = Path(__file__).with_name("app_version.txt")


def _version_from_file(path: Path) -> str | None:
    try:
        raw = path.read_text(encoding="utf-8").strip()
    except OSError:
        return None
    return raw or None


def _version_from_metadata() -> str | None:
    try:
        return metadata.version(DISTRIBUTION_NAME) or None
    except metadata.PackageNotFoundError:
        return None


def get_app_version() -> str:
    """
    Resolution order: GOVTRACK_APP_VERSION, a bundled app_version.txt,
    the installed distribution metadata, then the built-in default.
    """
    env_override = (os.getenv("GOVTRACK_APP_VERSION") or "").strip()
    if env_override:
        return env_override

    return _version_from_file(_VERSION_FILE) or _version_from_metadata() or _DEFAULT_APP_VERSION


__all__ = ["get_app_version", "DISTRIBUTION_NAME"]
