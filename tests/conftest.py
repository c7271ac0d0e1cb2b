"""Shared fixtures for orm_platform tests."""

import logging
import sys
import textwrap
from pathlib import Path

import pytest
from orm_platform.module_resolution.sources import FALLBACK_NAMESPACE
from orm_platform.settings import _parse_settings_file

SETTINGS_ENV_VARS = ("ORM_PLATFORM_MODULES_DIR", "ORM_PLATFORM_LOG_LEVEL", "ORM_PLATFORM_LOG_PATH")


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty working directory with an isolated HOME."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(home))
    for key in SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    return tmp_path


@pytest.fixture
def vendor_dir(workdir) -> Path:
    """The default fallback root (<cwd>/vendor), created empty."""
    root = workdir / "vendor"
    root.mkdir()
    return root


@pytest.fixture
def loaded_names():
    """Module names to drop from sys.modules when the test ends.

    Everything loaded from a fallback root is dropped as well.
    """
    names: list[str] = []
    yield names
    for name in names:
        sys.modules.pop(name, None)
    for name in [key for key in sys.modules if key.startswith(f"{FALLBACK_NAMESPACE}.")]:
        sys.modules.pop(name, None)


@pytest.fixture
def make_vendored_package(vendor_dir, loaded_names):
    """Create ``vendor/<name>/__init__.py`` (plus optional extra files)."""

    def _make(name: str, body: str = "VALUE = 1\n", files: dict[str, str] | None = None) -> Path:
        package_dir = vendor_dir / name
        package_dir.mkdir(parents=True)
        (package_dir / "__init__.py").write_text(textwrap.dedent(body))
        for filename, content in (files or {}).items():
            (package_dir / filename).write_text(textwrap.dedent(content))
        return package_dir

    return _make


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers installed by init_logging during a test."""
    yield
    package_logger = logging.getLogger("orm_platform")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Forget settings files parsed by earlier tests."""
    _parse_settings_file.cache_clear()
    yield
    _parse_settings_file.cache_clear()
