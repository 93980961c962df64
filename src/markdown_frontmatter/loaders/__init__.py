"""Deserializer loading.

Key modules:
    - deserializers: Built-in JSON/TOML/YAML deserializers and the registry
"""

from .deserializers import (
    DeserializerRegistry,
    default_registry,
    registry_from_config,
)

__all__ = [
    "DeserializerRegistry",
    "default_registry",
    "registry_from_config",
]
