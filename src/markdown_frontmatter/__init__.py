"""
Markdown Frontmatter - type-safe frontmatter parsing for Markdown documents.

Splits a document into a JSON (``{ ... }``), TOML (``+++``) or YAML
(``---``) frontmatter block and a body, and deserializes the block into a
caller-supplied type.

Main entry points:
    - markdown_frontmatter.split: raw frontmatter text and body
    - markdown_frontmatter.parse: typed frontmatter and body
    - markdown_frontmatter.models.config: Config and load_env()
"""

from .models import FrontmatterFormat, Span, SplitResult, ParseResult, Config
from .core import (
    FrontmatterError,
    UnterminatedFrontmatterError,
    UnsupportedFormatError,
    DeserializeError,
    InvalidSyntaxError,
    TargetMismatchError,
    split,
    parse,
)
from .loaders import DeserializerRegistry, default_registry

__all__ = [
    "FrontmatterFormat",
    "Span",
    "SplitResult",
    "ParseResult",
    "Config",
    "FrontmatterError",
    "UnterminatedFrontmatterError",
    "UnsupportedFormatError",
    "DeserializeError",
    "InvalidSyntaxError",
    "TargetMismatchError",
    "split",
    "parse",
    "DeserializerRegistry",
    "default_registry",
]
