"""Platform facade for the ORM core.

Loads optional database drivers by capability name and wraps the host
services (paths, files, environment, console) the core depends on.
"""

from .console import ContentKind
from .module_resolution import ModuleResolver
from .module_resolution import UnresolvedCapabilityError
from .module_resolution import resolve
from .platform_tools import PlatformTools
from .platform_tools import detect_platform_type

__all__ = [
    "ContentKind",
    "ModuleResolver",
    "PlatformTools",
    "UnresolvedCapabilityError",
    "detect_platform_type",
    "resolve",
]
