"""
Markdown frontmatter models.

This subpackage contains the format enumeration, the Pydantic result
models and the runtime configuration.

Key models:
    - FrontmatterFormat: JSON, TOML or YAML, decided by the opening delimiter
    - SplitResult: Raw frontmatter text and body with their offsets
    - ParseResult: Deserialized frontmatter and body
    - Config: Format selection loaded from environment
"""

from .format import FrontmatterFormat
from .results import Span, SplitResult, ParseResult
from .config import Config, ValidationConfig, load_env

__all__ = [
    "FrontmatterFormat",
    "Span",
    "SplitResult",
    "ParseResult",
    "Config",
    "ValidationConfig",
    "load_env",
]
