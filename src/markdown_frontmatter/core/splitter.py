"""
Frontmatter splitter.

Scans a document line by line, classifies the opening delimiter on the
first line and locates the matching closing delimiter, producing the raw
frontmatter text and the body without interpreting either.
"""

from __future__ import annotations

from typing import Iterator, NamedTuple

from markdown_frontmatter.core.errors import UnterminatedFrontmatterError
from markdown_frontmatter.models.format import FrontmatterFormat
from markdown_frontmatter.models.results import Span, SplitResult
from markdown_frontmatter.utils.logging import get_logger

logger = get_logger(__name__)


class LineSpan(NamedTuple):
	"""
	One line of a document.

	Attributes:
		start: Offset of the first character of the line.
		end: Offset one past the line content (before its terminator).
		next_start: Offset of the following line (after its terminator).
		line: The line content without terminator.
	"""

	start: int
	end: int
	next_start: int
	line: str


def iter_lines(text: str) -> Iterator[LineSpan]:
	"""
	Yield the lines of ``text`` with their offsets.

	Lines end at ``\\n``, ``\\r\\n`` or a lone ``\\r``. The last line may
	have no terminator, in which case ``end == next_start``.

	Parameters:
		text: The document to scan.
	"""
	pos = 0
	size = len(text)
	while pos < size:
		start = pos
		i = start
		while i < size and text[i] != "\n" and text[i] != "\r":
			i += 1
		end = i
		if i < size and text[i] == "\r":
			i += 1
			if i < size and text[i] == "\n":
				i += 1
		elif i < size:
			i += 1
		pos = i
		yield LineSpan(start, end, i, text[start:end])


def _no_frontmatter(document: str) -> SplitResult:
	return SplitResult(body=document, body_span=Span(start=0,
	                                                 end=len(document)))


def split(document: str) -> SplitResult:
	"""
	Split a document into frontmatter and body.

	Only the very first line is inspected for an opening delimiter; a
	document without one is returned whole as the body. For TOML and YAML
	the delimiter lines are dropped, for JSON the braces are part of the
	frontmatter. The body starts after the closing line's terminator and
	is never scanned again.

	Parameters:
		document: The full markdown document.

	Returns:
		SplitResult with format, frontmatter text, body and their offsets.

	Raises:
		UnterminatedFrontmatterError: If the closing delimiter is absent.
	"""
	lines = iter_lines(document)
	first = next(lines, None)
	if first is None:
		return _no_frontmatter(document)

	fmt = FrontmatterFormat.detect(first.line)
	if fmt is None:
		return _no_frontmatter(document)

	matter_start = first.start if fmt.includes_delimiters else first.next_start
	for span in lines:
		if not fmt.is_closing(span.line):
			continue
		matter_end = span.end if fmt.includes_delimiters else span.start
		matter = Span(start=matter_start, end=matter_end)
		body = Span(start=span.next_start, end=len(document))
		logger.debug("detected %s frontmatter at %d:%d, body at %d:%d",
		             fmt.value, matter.start, matter.end, body.start, body.end)
		return SplitResult(
		    format=fmt,
		    frontmatter=matter.slice(document),
		    body=body.slice(document),
		    frontmatter_span=matter,
		    body_span=body,
		)

	raise UnterminatedFrontmatterError(fmt)


__all__ = ["LineSpan", "iter_lines", "split"]
