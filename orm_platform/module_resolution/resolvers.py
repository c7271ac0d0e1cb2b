"""Capability resolver.

Two-tier resolution:
1. Resolution table (direct import of a known driver module)
2. Fallback root (package or module file under <cwd>/vendor by default)

A direct import that fails for any reason falls through to the fallback
root, which may hold a separately vendored copy. Only when both tiers fail
does the caller see an error, always UnresolvedCapabilityError.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from types import ModuleType

from ..paths import get_fallback_root
from ..utils.error_format import format_error_message
from .errors import Attempt
from .errors import UnresolvedCapabilityError
from .registry import RESOLUTION_TABLE
from .registry import DirectImport
from .registry import ResolutionAction
from .sources import FileSource

logger = logging.getLogger(__name__)


class ModuleResolver:
    """Resolve capability names to freshly loaded modules.

    Holds no mutable state: the table is read-only and no handle is kept,
    so one instance can serve any number of threads.
    """

    def __init__(
        self,
        table: Mapping[str, ResolutionAction] | None = None,
        fallback_root: str | Path | None = None,
    ):
        """Initialize resolver.

        Args:
            table: Capability table (defaults to the built-in RESOLUTION_TABLE)
            fallback_root: Fixed fallback directory. If None, derived from the
                           working directory and settings on every call.
        """
        self.table: Mapping[str, ResolutionAction] = (
            RESOLUTION_TABLE if table is None else MappingProxyType(dict(table))
        )
        self._fallback_root = Path(fallback_root) if fallback_root is not None else None

    @property
    def fallback_root(self) -> Path:
        if self._fallback_root is not None:
            return self._fallback_root
        return get_fallback_root()

    def resolve(self, name: str) -> ModuleType:
        """Resolve a capability to a module handle.

        Raises:
            UnresolvedCapabilityError: Neither tier could load it
        """
        handle, _strategy = self.resolve_with_strategy(name)
        return handle

    def resolve_with_strategy(self, name: str) -> tuple[ModuleType, str]:
        """Resolve a capability and report which tier produced the handle.

        Returns:
            Tuple of (module, strategy), strategy being "direct" or "fallback"

        Raises:
            UnresolvedCapabilityError: Neither tier could load it
        """
        if not isinstance(name, str) or not name:
            raise UnresolvedCapabilityError(name)

        attempts: list[Attempt] = []

        action = self.table.get(name)
        if isinstance(action, DirectImport):
            try:
                return (action.source().load(), "direct")
            except Exception as e:
                # Kept on the final error; a vendored copy may still load
                logger.debug(
                    f"[module:resolve] {name} -> direct import of '{action.module}' failed, "
                    f"trying fallback root: {format_error_message(e)}"
                )
                attempts.append(("direct", e))

        try:
            return (FileSource(self.fallback_root, name).load(), "fallback")
        except Exception as e:
            attempts.append(("fallback", e))
            raise UnresolvedCapabilityError(name, attempts) from e

    def is_known(self, name: str) -> bool:
        """Whether the capability is listed in the resolution table."""
        return name in self.table

    def __repr__(self) -> str:
        return f"ModuleResolver({len(self.table)} capabilities)"


_default_resolver = ModuleResolver()


def create_module_resolver() -> ModuleResolver:
    """Create a resolver with the built-in table and settings-derived fallback root."""
    return ModuleResolver()


def resolve(name: str) -> ModuleType:
    """Resolve a capability with the default resolver.

    Raises:
        UnresolvedCapabilityError: Neither tier could load it
    """
    return _default_resolver.resolve(name)
