"""Settings for the platform facade.

Resolution order (first match wins, per key):
1. Environment variables (ORM_PLATFORM_<KEY>)
2. Project settings (.orm_platform/settings.yaml)
3. User settings (~/.orm_platform/settings.yaml)
4. Defaults

Settings files keep their values under a ``platform`` section::

    platform:
      modules_dir: vendor
      log_level: DEBUG
      log_path: ./orm-platform.log.jsonl
"""

import functools
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "ORM_PLATFORM_"
SETTINGS_DIRNAME = ".orm_platform"
SETTINGS_KEYS = ("modules_dir", "log_level", "log_path")


@dataclass(frozen=True)
class PlatformSettings:
    """Effective settings after merging every scope."""

    modules_dir: Path | None = None
    log_level: str = "WARNING"
    log_path: Path | None = None


class SettingsManager:
    """Reads settings across environment/project/user scopes."""

    def __init__(self, settings_dir: Path | None = None, user_settings_dir: Path | None = None):
        """Initialize settings manager with standard paths.

        Args:
            settings_dir: Base directory for project settings (for testing).
                          If None, uses .orm_platform in current directory.
            user_settings_dir: Base directory for user settings (for testing).
                               If None, uses ~/.orm_platform.
        """
        if settings_dir is None:
            settings_dir = Path(SETTINGS_DIRNAME)
        if user_settings_dir is None:
            user_settings_dir = Path.home() / SETTINGS_DIRNAME

        self.project_settings_file = settings_dir / "settings.yaml"
        self.user_settings_file = user_settings_dir / "settings.yaml"

    def load(self) -> PlatformSettings:
        """Merge all scopes into a PlatformSettings."""
        merged: dict[str, Any] = {}

        # Lowest precedence first so later scopes overwrite
        for settings_file in (self.user_settings_file, self.project_settings_file):
            section = self._read_section(settings_file)
            merged.update({key: value for key, value in section.items() if key in SETTINGS_KEYS})

        for key in SETTINGS_KEYS:
            if env_value := os.getenv(f"{ENV_PREFIX}{key.upper()}"):
                merged[key] = env_value

        return PlatformSettings(
            modules_dir=Path(merged["modules_dir"]).expanduser() if merged.get("modules_dir") else None,
            log_level=str(merged.get("log_level") or PlatformSettings.log_level).upper(),
            log_path=Path(merged["log_path"]).expanduser() if merged.get("log_path") else None,
        )

    def _read_section(self, path: Path) -> dict[str, Any]:
        """Return the ``platform`` section of a settings file; missing files count as empty."""
        try:
            stat = path.stat()
        except OSError:
            return {}
        return dict(_parse_settings_file(path.resolve(), stat.st_mtime_ns, stat.st_size))


@functools.lru_cache(maxsize=32)
def _parse_settings_file(path: Path, mtime_ns: int, size: int) -> MappingProxyType:
    """Parse one version of a settings file.

    Cached on (path, mtime, size): settings are consulted on every resolve,
    and a broken file is reported once per edit rather than once per call.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Failed to read {path}: {e}")
        return MappingProxyType({})

    if not isinstance(data, dict):
        return MappingProxyType({})

    section = data.get("platform") or {}
    if not isinstance(section, dict):
        logger.warning(f"Ignoring 'platform' section in {path}: expected a mapping")
        return MappingProxyType({})
    return MappingProxyType(dict(section))


def load_settings() -> PlatformSettings:
    """Load effective settings relative to the current working directory."""
    return SettingsManager().load()
