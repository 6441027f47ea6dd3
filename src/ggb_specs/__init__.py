"""
GeoGebra command signature catalogue and the registry built from it.
"""

from .models import CommandExample, CommandParameter, CommandSignature, CommandSpec
from .registry import CatalogueError, SpecRegistry, get_spec_registry

__all__ = [
    "CommandExample",
    "CommandParameter",
    "CommandSignature",
    "CommandSpec",
    "CatalogueError",
    "SpecRegistry",
    "get_spec_registry",
]
