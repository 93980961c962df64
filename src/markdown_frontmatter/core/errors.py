"""
Frontmatter error types.

Every failure of ``split`` or ``parse`` is raised as a subclass of
``FrontmatterError`` carrying the format it concerns. Errors coming from
a deserializer or from target validation keep the original exception as
``source`` (and as ``__cause__``).
"""

from __future__ import annotations

from typing import Optional

from markdown_frontmatter.models.format import FrontmatterFormat


def _label(fmt: Optional[FrontmatterFormat]) -> str:
	return fmt.value.upper() if fmt is not None else "empty"


class FrontmatterError(ValueError):
	"""Base class for frontmatter splitting and parsing failures."""

	def __init__(self, message: str,
	             format: Optional[FrontmatterFormat] = None) -> None:
		super().__init__(message)
		self.format = format


class UnterminatedFrontmatterError(FrontmatterError):
	"""Opening delimiter found but no closing delimiter before the end."""

	def __init__(self, format: FrontmatterFormat) -> None:
		super().__init__(f"absent closing {_label(format)} delimiter", format)


class UnsupportedFormatError(FrontmatterError):
	"""The detected format has no registered deserializer."""

	def __init__(self, format: FrontmatterFormat) -> None:
		super().__init__(
		    f"disabled format {_label(format)}, enable it in "
		    f"FRONTMATTER_FORMATS or pass a registry that supports it", format)


class DeserializeError(FrontmatterError):
	"""The frontmatter could not be turned into the target type."""

	stage = "deserialize"

	def __init__(self, format: Optional[FrontmatterFormat],
	             source: Exception) -> None:
		super().__init__(
		    f"couldn't {self.stage} {_label(format)} frontmatter: {source}",
		    format)
		self.source = source


class InvalidSyntaxError(DeserializeError):
	"""Malformed JSON, TOML or YAML syntax."""

	stage = "parse"


class TargetMismatchError(DeserializeError):
	"""Well-formed frontmatter that does not fit the target type."""

	stage = "validate"


__all__ = [
    "FrontmatterError",
    "UnterminatedFrontmatterError",
    "UnsupportedFormatError",
    "DeserializeError",
    "InvalidSyntaxError",
    "TargetMismatchError",
]
