"""Platform-specific tools.

PlatformTools is the one entry point the ORM core uses for anything that
depends on the host: driver loading, paths, files, environment and console
output. Every method delegates to the module that owns the concern.
"""

import os
import sys
from types import ModuleType
from typing import Any
from typing import Literal

from . import console
from . import env
from . import filesystem
from . import paths
from .module_resolution import resolve

PlatformType = Literal["browser", "native"]


def detect_platform_type() -> PlatformType:
    """Browser-like hosts (Pyodide, WASI) have no native extensions or real filesystem."""
    if sys.platform in ("emscripten", "wasi"):
        return "browser"
    return "native"


class PlatformTools:
    """Platform-specific tools."""

    platform_type: PlatformType = detect_platform_type()

    @staticmethod
    def load(name: str) -> ModuleType:
        """Load the driver module for a capability name.

        Raises:
            UnresolvedCapabilityError: No direct import or vendored copy found
        """
        return resolve(name)

    # ===== PATHS =====

    @staticmethod
    def path_normalize(path: str | os.PathLike[str]) -> str:
        return paths.normalize(path)

    @staticmethod
    def path_extname(path: str | os.PathLike[str]) -> str:
        return paths.extension(path)

    @staticmethod
    def path_resolve(path: str | os.PathLike[str]) -> str:
        return paths.resolve_absolute(path)

    # ===== FILES =====

    @staticmethod
    def file_exist(path: str | os.PathLike[str]) -> bool:
        return filesystem.exists(path)

    @staticmethod
    def read_file_sync(path: str | os.PathLike[str]) -> bytes:
        return filesystem.read_bytes(path)

    @staticmethod
    def append_file_sync(path: str | os.PathLike[str], data: str | bytes) -> None:
        filesystem.append(path, data)

    @staticmethod
    async def write_file(path: str | os.PathLike[str], data: str | bytes) -> None:
        await filesystem.write(path, data)

    # ===== ENVIRONMENT =====

    @staticmethod
    def dotenv(path: str | os.PathLike[str]) -> None:
        """Load a dotenv file into the environment variables."""
        env.load_env_file(path)

    @staticmethod
    def get_env_variable(name: str) -> str | None:
        return env.get_var(name)

    # ===== CONSOLE =====

    @staticmethod
    def highlight_sql(sql: str) -> str:
        return console.highlight_sql(sql)

    @staticmethod
    def highlight_json(json_text: str) -> str:
        return console.highlight_json(json_text)

    @staticmethod
    def log_info(prefix: str, info: Any) -> None:
        console.log_info(prefix, info)

    @staticmethod
    def log_error(prefix: str, error: Any) -> None:
        console.log_error(prefix, error)

    @staticmethod
    def log_warn(prefix: str, warning: Any) -> None:
        console.log_warn(prefix, warning)

    @staticmethod
    def log(message: str) -> None:
        console.log(message)

    @staticmethod
    def info(info: Any) -> str:
        return console.info(info)

    @staticmethod
    def error(error: Any) -> str:
        return console.error(error)

    @staticmethod
    def warn(message: Any) -> str:
        return console.warn(message)

    @staticmethod
    def log_cmd_err(prefix: str, err: Any = None) -> None:
        console.log_cmd_err(prefix, err)
