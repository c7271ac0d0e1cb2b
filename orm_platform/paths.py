"""Path helpers and the fallback root location.

Thin wrappers over os.path that behave the same on every host, plus the
single place that decides where the fallback root lives.
"""

import os
import sys
from pathlib import Path

from .settings import load_settings

# Directory, relative to the working directory, that `pip install --target vendor` fills
DEFAULT_MODULES_DIRNAME = "vendor"


def normalize(path: str | os.PathLike[str]) -> str:
    """Normalize a path, using forward slashes on Windows too."""
    normalized = os.path.normpath(os.fspath(path))
    if sys.platform == "win32":
        normalized = normalized.replace("\\", "/")
    return normalized


def extension(path: str | os.PathLike[str]) -> str:
    """Return the file extension including the dot, or "" when there is none."""
    return os.path.splitext(os.fspath(path))[1]


def resolve_absolute(path: str | os.PathLike[str]) -> str:
    """Resolve a path against the working directory without following symlinks."""
    return os.path.abspath(os.fspath(path))


def get_fallback_root() -> Path:
    """Directory searched when a capability cannot be imported directly.

    Uses the configured ``modules_dir`` when set (relative values are taken
    from the working directory), else ``<cwd>/vendor``. Evaluated on every
    call so a change of working directory is picked up.
    """
    modules_dir = load_settings().modules_dir
    if modules_dir is None:
        return Path.cwd() / DEFAULT_MODULES_DIRNAME
    if modules_dir.is_absolute():
        return modules_dir
    return Path.cwd() / modules_dir
