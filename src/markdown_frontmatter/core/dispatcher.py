"""
Frontmatter dispatcher.

Runs the splitter, hands the frontmatter text to the deserializer
registered for the detected format and validates the result into the
caller's target type with pydantic.
"""

from __future__ import annotations

from typing import Any, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from markdown_frontmatter.core.errors import (
    InvalidSyntaxError,
    TargetMismatchError,
)
from markdown_frontmatter.core.splitter import split
from markdown_frontmatter.loaders.deserializers import (
    DeserializerRegistry,
    registry_from_config,
)
from markdown_frontmatter.models.config import Config, ValidationConfig
from markdown_frontmatter.models.format import FrontmatterFormat
from markdown_frontmatter.models.results import ParseResult
from markdown_frontmatter.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _validate(target: Any, data: Any, fmt: Optional[FrontmatterFormat],
              strict: bool) -> Any:
	adapter = TypeAdapter(target)
	try:
		if strict:
			# JSON mode: enums, dates and dataclasses still validate from their
			# serialized form, only scalar coercion is refused
			return adapter.validate_json(to_json(data), strict=True)
		return adapter.validate_python(data)
	except ValidationError as exc:
		raise TargetMismatchError(fmt, exc) from exc


def deserialize(
    fmt: FrontmatterFormat,
    text: str,
    target: Any = dict[str, Any],
    *,
    registry: DeserializerRegistry,
    strict: bool = False,
) -> Any:
	"""
	Deserialize frontmatter text of a known format into ``target``.

	Parameters:
		fmt: Format of ``text``.
		text: Raw frontmatter as returned by ``split``.
		target: Type to validate into (model, dataclass, TypedDict, ...).
		registry: Deserializers available for this call.
		strict: Validate without type coercion.

	Returns:
		The validated value.

	Raises:
		UnsupportedFormatError: If ``fmt`` is not in ``registry``.
		InvalidSyntaxError: If the deserializer rejects the text.
		TargetMismatchError: If the data does not fit ``target``.
	"""
	entry = registry.get(fmt)
	try:
		data = entry.load(text)
	except entry.syntax_errors as exc:
		raise InvalidSyntaxError(fmt, exc) from exc
	return _validate(target, data, fmt, strict)


def parse(
    document: str,
    target: Any = dict[str, Any],
    *,
    registry: DeserializerRegistry | None = None,
    strict: bool | None = None,
) -> ParseResult[Any]:
	"""
	Parse a document's frontmatter into ``target`` and return its body.

	Without a frontmatter block, ``target`` is built from an empty mapping
	so optional fields take their defaults, and ``format`` is None.

	Parameters:
		document: The full markdown document.
		target: Type to validate the frontmatter into. Defaults to a plain
			``dict[str, Any]``.
		registry: Deserializers to use. Defaults to the formats enabled in
			``Config``.
		strict: Validate without type coercion. Defaults to
			``Config.strict``.

	Returns:
		ParseResult with format, typed frontmatter and body.

	Raises:
		UnterminatedFrontmatterError: If the closing delimiter is absent.
		UnsupportedFormatError: If the detected format is not enabled.
		DeserializeError: If the frontmatter is malformed or does not fit
			``target``.
	"""
	if registry is None:
		config = Config()
		registry = registry_from_config(config)
		if strict is None:
			strict = config.strict
	elif strict is None:
		strict = ValidationConfig().strict

	result = split(document)
	if result.format is None:
		value = _validate(target, {}, None, strict)
	else:
		logger.debug("deserializing %s frontmatter with %r", result.format.value,
		             registry)
		value = deserialize(result.format, result.frontmatter or "", target,
		                    registry=registry, strict=strict)
	return ParseResult(format=result.format, frontmatter=value, body=result.body)


__all__ = ["deserialize", "parse"]
