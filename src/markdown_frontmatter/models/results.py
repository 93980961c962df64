"""
Split and parse result models.

Defines the immutable models returned by ``split`` and ``parse``. Text
is copied out of the document once, at this boundary; the ``Span``
offsets keep the link back to the original buffer.
"""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .format import FrontmatterFormat

T = TypeVar("T")


class Span(BaseModel):
	"""Half-open character range ``[start, end)`` into a document."""

	model_config = ConfigDict(frozen=True)

	start: int = Field(ge=0, description="Offset of the first character")
	end: int = Field(ge=0, description="Offset one past the last character")

	@model_validator(mode="after")
	def check_order(self) -> "Span":
		if self.end < self.start:
			raise ValueError(f"span end {self.end} precedes start {self.start}")
		return self

	def slice(self, text: str) -> str:
		"""Return the part of ``text`` covered by this span."""
		return text[self.start:self.end]

	def __len__(self) -> int:
		return self.end - self.start


class SplitResult(BaseModel):
	"""
	Outcome of splitting a document into frontmatter and body.

	Attributes:
		format: Detected frontmatter format, None when there is no block.
		frontmatter: Raw frontmatter text, None when there is no block.
		body: Document content after the block (the whole input otherwise).
		frontmatter_span: Offsets of ``frontmatter`` in the input.
		body_span: Offsets of ``body`` in the input.
	"""

	model_config = ConfigDict(frozen=True)

	format: Optional[FrontmatterFormat] = Field(
	    default=None, description="Detected frontmatter format")
	frontmatter: Optional[str] = Field(default=None,
	                                   description="Raw frontmatter text")
	body: str = Field(description="Document body")
	frontmatter_span: Optional[Span] = Field(
	    default=None, description="Frontmatter offsets in the input")
	body_span: Span = Field(description="Body offsets in the input")

	@model_validator(mode="after")
	def check_presence(self) -> "SplitResult":
		"""Frontmatter text and span exist exactly when a format does."""
		has_format = self.format is not None
		if (self.frontmatter is not None) != has_format:
			raise ValueError("frontmatter must be set if and only if format is")
		if (self.frontmatter_span is not None) != has_format:
			raise ValueError(
			    "frontmatter_span must be set if and only if format is")
		return self

	@property
	def has_frontmatter(self) -> bool:
		return self.format is not None


class ParseResult(BaseModel, Generic[T]):
	"""
	Outcome of parsing a document into typed frontmatter and body.

	Unlike ``SplitResult``, ``frontmatter`` is set even without a block:
	then ``format`` is None and ``frontmatter`` holds the target built from
	an empty mapping, so optional fields read as absent. Use
	``has_frontmatter`` to tell the two cases apart.
	"""

	model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

	format: Optional[FrontmatterFormat] = Field(
	    default=None, description="Detected frontmatter format")
	frontmatter: Optional[T] = Field(default=None,
	                                 description="Deserialized frontmatter")
	body: str = Field(description="Document body")

	@property
	def has_frontmatter(self) -> bool:
		"""Whether the document carried a frontmatter block."""
		return self.format is not None


__all__ = ["Span", "SplitResult", "ParseResult"]
