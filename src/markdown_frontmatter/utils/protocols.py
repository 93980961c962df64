"""
Protocol definitions for pluggable deserializers.

Any callable matching ``Deserializer`` can be registered for a format,
which also lets tests substitute stub deserializers.
"""

from __future__ import annotations

from typing import Any, Protocol


class Deserializer(Protocol):
	"""
	Protocol for a frontmatter deserializer.

	Turns frontmatter text into plain Python data (mappings, lists,
	scalars) and raises the underlying library's own error on malformed
	input.
	"""

	def __call__(self, text: str) -> Any:
		...


__all__ = ["Deserializer"]
