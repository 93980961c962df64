"""Shared utility functions.

This subpackage has no dependencies on other subpackages.

Key modules:
    - logging: Logging configuration
    - protocols: Protocol definitions for pluggable deserializers
"""

from .logging import configure_logging, get_logger
from .protocols import Deserializer

__all__ = [
    # logging
    "configure_logging",
    "get_logger",
    # protocols
    "Deserializer",
]
