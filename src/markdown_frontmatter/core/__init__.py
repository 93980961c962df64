"""Core splitting and dispatch logic.

Key modules:
    - splitter: Delimiter scanning and format detection
    - dispatcher: Deserialization of the frontmatter into a target type
    - errors: Exception hierarchy shared by both
"""

from .errors import (
    FrontmatterError,
    UnterminatedFrontmatterError,
    UnsupportedFormatError,
    DeserializeError,
    InvalidSyntaxError,
    TargetMismatchError,
)
from .splitter import split, iter_lines, LineSpan
from .dispatcher import parse, deserialize

__all__ = [
    "FrontmatterError",
    "UnterminatedFrontmatterError",
    "UnsupportedFormatError",
    "DeserializeError",
    "InvalidSyntaxError",
    "TargetMismatchError",
    "split",
    "iter_lines",
    "LineSpan",
    "parse",
    "deserialize",
]
