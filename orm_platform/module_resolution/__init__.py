"""Capability resolution for optional database drivers.

Callers ask for a driver by capability name and get a live module back, or
UnresolvedCapabilityError when it cannot be found anywhere.
"""

from .errors import UnresolvedCapabilityError
from .registry import RESOLUTION_TABLE
from .registry import DirectImport
from .registry import FallbackOnly
from .registry import ResolutionAction
from .registry import known_capabilities
from .resolvers import ModuleResolver
from .resolvers import create_module_resolver
from .resolvers import resolve
from .sources import FileSource
from .sources import PackageSource

__all__ = [
    "DirectImport",
    "FallbackOnly",
    "FileSource",
    "ModuleResolver",
    "PackageSource",
    "RESOLUTION_TABLE",
    "ResolutionAction",
    "UnresolvedCapabilityError",
    "create_module_resolver",
    "known_capabilities",
    "resolve",
]
