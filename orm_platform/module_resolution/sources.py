"""Module source implementations.

Concrete ways of turning a capability into a live module:
- PackageSource: the host import system (installed packages, stdlib)
- FileSource: a package or single-file module under the fallback root
"""

import importlib
import importlib.util
import re
import sys
from pathlib import Path
from types import ModuleType

_NON_IDENTIFIER = re.compile(r"\W")

# Vendored loads are registered under this prefix in sys.modules, never at top level
FALLBACK_NAMESPACE = "orm_platform._fallback"


def to_import_name(name: str) -> str:
    """Derive a valid Python module name from a capability name.

    Examples:
        >>> to_import_name("pg-query-stream")
        'pg_query_stream'
        >>> to_import_name("@sap/hana-client")
        '_sap_hana_client'
    """
    import_name = _NON_IDENTIFIER.sub("_", name)
    if not import_name or import_name[0].isdigit():
        import_name = f"_{import_name}"
    return import_name


class PackageSource:
    """Installed Python package source."""

    def __init__(self, module_name: str):
        """Initialize with a dotted module name.

        Args:
            module_name: Import target (e.g., "psycopg2", "redis.asyncio")
        """
        self.module_name = module_name

    def load(self) -> ModuleType:
        """Import the module through the host import system.

        Raises:
            ImportError: Package not installed or failed while importing
        """
        return importlib.import_module(self.module_name)

    def __repr__(self) -> str:
        return f"PackageSource({self.module_name})"


class FileSource:
    """Package or module living under a directory root, outside sys.path."""

    def __init__(self, root: str | Path, name: str):
        """Initialize with the fallback root and a capability name.

        Args:
            root: Directory the capability is looked up in
            name: Capability name, used as a path relative to root
        """
        self.root = Path(root).resolve()
        self.name = name
        self.import_name = to_import_name(name)
        self.module_name = f"{FALLBACK_NAMESPACE}.{self.import_name}"

    def locate(self) -> Path:
        """Find the file to execute for this capability.

        Tries ``<root>/<name>/__init__.py`` then ``<root>/<name>.py``.

        Raises:
            ModuleNotFoundError: Nothing loadable under root for this name
        """
        base = (self.root / self.name).resolve()

        # Absolute names and ".." segments must not reach outside root
        if base == self.root or not base.is_relative_to(self.root):
            raise ModuleNotFoundError(
                f"Capability '{self.name}' does not name a location inside {self.root}",
                name=self.module_name,
            )

        package_init = base / "__init__.py"
        if package_init.is_file():
            return package_init

        module_file = base.with_name(f"{base.name}.py")
        if module_file.is_file():
            return module_file

        raise ModuleNotFoundError(
            f"No package or module named '{self.name}' under {self.root}",
            name=self.module_name,
        )

    def load(self) -> ModuleType:
        """Execute the located file as a fresh module.

        The module is registered in sys.modules under FALLBACK_NAMESPACE, so
        relative imports inside a package work without shadowing any module
        of the same name. A failed load restores whatever was registered before.

        Raises:
            ModuleNotFoundError: Nothing loadable under root for this name
            Exception: Anything the module itself raises while executing
        """
        location = self.locate()
        search_locations = [str(location.parent)] if location.name == "__init__.py" else None

        spec = importlib.util.spec_from_file_location(
            self.module_name,
            location,
            submodule_search_locations=search_locations,
        )
        if spec is None or spec.loader is None:
            raise ImportError(f"Cannot build an import spec for {location}", name=self.module_name, path=str(location))

        module = importlib.util.module_from_spec(spec)
        previous = sys.modules.get(self.module_name)
        sys.modules[self.module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            if previous is None:
                sys.modules.pop(self.module_name, None)
            else:
                sys.modules[self.module_name] = previous
            raise

        return module

    def __repr__(self) -> str:
        return f"FileSource({self.root / self.name})"
