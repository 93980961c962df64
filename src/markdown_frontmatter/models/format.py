"""
Frontmatter format model.

Defines the closed set of frontmatter formats and the delimiter grammar
that identifies each of them on the first line of a document.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class FrontmatterFormat(str, Enum):
	"""Format of a frontmatter block, decided by its opening delimiter."""

	JSON = "json"
	TOML = "toml"
	YAML = "yaml"

	@classmethod
	def detect(cls, first_line: str) -> Optional["FrontmatterFormat"]:
		"""
		Classify the first line of a document.

		Checked in a fixed order: ``+++`` (TOML), ``---`` (YAML), then a
		leading ``{`` (JSON). The markers are disjoint, so the first match
		is the only match.

		Parameters:
			first_line: The first line without its line terminator.

		Returns:
			The detected format, or None when the line opens no block.
		"""
		if first_line == TOML_DELIMITER:
			return cls.TOML
		if first_line == YAML_DELIMITER:
			return cls.YAML
		if first_line.startswith(JSON_OPEN):
			return cls.JSON
		return None

	def is_closing(self, line: str) -> bool:
		"""Return True when ``line`` closes a block of this format."""
		if self is FrontmatterFormat.JSON:
			# closing brace must sit at column 0
			return line.startswith(JSON_CLOSE)
		if self is FrontmatterFormat.TOML:
			return line == TOML_DELIMITER
		return line == YAML_DELIMITER

	@property
	def includes_delimiters(self) -> bool:
		"""Whether the delimiter lines are part of the payload (JSON braces)."""
		return self is FrontmatterFormat.JSON


TOML_DELIMITER = "+++"
YAML_DELIMITER = "---"
JSON_OPEN = "{"
JSON_CLOSE = "}"

__all__ = [
    "FrontmatterFormat",
    "TOML_DELIMITER",
    "YAML_DELIMITER",
    "JSON_OPEN",
    "JSON_CLOSE",
]
