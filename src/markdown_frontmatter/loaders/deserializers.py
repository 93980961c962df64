"""
Deserializer registry.

Maps each frontmatter format to the library call that parses it into
plain Python data, together with the exception types that library raises
on malformed input. A registry holding only some formats stands in for
building with a subset of format support: the others fail with
``UnsupportedFormatError``.
"""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

import yaml

from markdown_frontmatter.core.errors import UnsupportedFormatError
from markdown_frontmatter.models.config import Config
from markdown_frontmatter.models.format import FrontmatterFormat
from markdown_frontmatter.utils.protocols import Deserializer


def load_json(text: str) -> Any:
	"""Parse JSON frontmatter, braces included."""
	return json.loads(text)


def load_toml(text: str) -> Any:
	"""Parse TOML frontmatter into a dict."""
	return tomllib.loads(text)


def load_yaml(text: str) -> Any:
	"""Parse YAML frontmatter; an empty block yields an empty dict."""
	data = yaml.safe_load(text)
	return {} if data is None else data


@dataclass(frozen=True)
class DeserializerEntry:
	"""A deserializer and the exceptions it raises for bad syntax."""

	load: Deserializer
	syntax_errors: tuple[type[BaseException], ...]


BUILTIN_DESERIALIZERS: Mapping[FrontmatterFormat, DeserializerEntry] = MappingProxyType({
    FrontmatterFormat.JSON: DeserializerEntry(load_json, (json.JSONDecodeError, )),
    FrontmatterFormat.TOML: DeserializerEntry(load_toml,
                                              (tomllib.TOMLDecodeError, )),
    FrontmatterFormat.YAML: DeserializerEntry(load_yaml, (yaml.YAMLError, )),
})


class DeserializerRegistry:
	"""
	Immutable set of deserializers available to ``parse``.

	Registries are never modified in place; ``only`` and
	``with_deserializer`` return new instances, so one registry can be
	shared between concurrent callers.
	"""

	def __init__(self,
	             entries: Mapping[FrontmatterFormat, DeserializerEntry]) -> None:
		self._entries = MappingProxyType(dict(entries))

	def get(self, fmt: FrontmatterFormat) -> DeserializerEntry:
		"""
		Look up the deserializer for a format.

		Raises:
			UnsupportedFormatError: If the format is not registered.
		"""
		try:
			return self._entries[fmt]
		except KeyError:
			raise UnsupportedFormatError(fmt) from None

	def supports(self, fmt: FrontmatterFormat) -> bool:
		return fmt in self._entries

	@property
	def formats(self) -> tuple[FrontmatterFormat, ...]:
		"""Registered formats in declaration order."""
		return tuple(f for f in FrontmatterFormat if f in self._entries)

	def only(self, *formats: FrontmatterFormat) -> "DeserializerRegistry":
		"""Return a registry restricted to ``formats``."""
		return DeserializerRegistry(
		    {f: e
		     for f, e in self._entries.items() if f in formats})

	def with_deserializer(
	    self,
	    fmt: FrontmatterFormat,
	    load: Deserializer,
	    syntax_errors: Iterable[type[BaseException]] = (),
	) -> "DeserializerRegistry":
		"""Return a registry with ``load`` registered for ``fmt``."""
		entries = dict(self._entries)
		entries[fmt] = DeserializerEntry(load, tuple(syntax_errors))
		return DeserializerRegistry(entries)

	def __repr__(self) -> str:
		names = ", ".join(f.value for f in self.formats)
		return f"DeserializerRegistry({names})"


def default_registry() -> DeserializerRegistry:
	"""Registry with the JSON, TOML and YAML built-ins."""
	return DeserializerRegistry(BUILTIN_DESERIALIZERS)


def registry_from_config(config: Config) -> DeserializerRegistry:
	"""
	Build a registry from the formats enabled in configuration.

	Parameters:
		config: Runtime configuration.

	Returns:
		Registry holding the built-ins for ``config.enabled_formats``.
	"""
	return default_registry().only(*config.enabled_formats)


__all__ = [
    "load_json",
    "load_toml",
    "load_yaml",
    "DeserializerEntry",
    "DeserializerRegistry",
    "BUILTIN_DESERIALIZERS",
    "default_registry",
    "registry_from_config",
]
