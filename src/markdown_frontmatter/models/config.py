from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

from .format import FrontmatterFormat


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


class ValidationConfig(BaseSettings):
	"""Validation settings, readable without the format selection."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	strict: bool = Field(
	    False,
	    alias="FRONTMATTER_STRICT",
	    description="Validate frontmatter without type coercion",
	)


class Config(ValidationConfig):
	"""Runtime configuration loaded from environment variables."""

	enabled_formats: Any = Field(
	    default_factory=lambda: list(FrontmatterFormat),
	    alias="FRONTMATTER_FORMATS",
	    description="Frontmatter formats parse() may deserialize",
	)

	@field_validator("enabled_formats", mode="before")
	@classmethod
	def split_formats(cls, v: Any) -> list[Any]:
		"""Normalize enabled formats to a list regardless of input format."""
		if v is None:
			return []
		if isinstance(v, (list, tuple, set, frozenset)):
			items = list(v)
		else:
			# FRONTMATTER_FORMATS=json,yaml
			items = [p for p in str(v).split(",")]
		return [
		    p.strip().lower() if isinstance(p, str) else p for p in items
		    if not (isinstance(p, str) and not p.strip())
		]

	@field_validator("enabled_formats", mode="after")
	@classmethod
	def validate_formats(cls, v: list[Any]) -> list[FrontmatterFormat]:
		"""Resolve format names and require at least one of them."""
		formats: list[FrontmatterFormat] = []
		for item in v:
			try:
				fmt = FrontmatterFormat(item)
			except ValueError:
				known = ", ".join(f.value for f in FrontmatterFormat)
				raise ValueError(
				    f"unknown frontmatter format {item!r}, expected one of {known}") from None
			if fmt not in formats:
				formats.append(fmt)
		if not formats:
			raise ValueError(
			    "at least one of json, toml or yaml must be enabled")
		return formats


__all__ = ["Config", "ValidationConfig", "load_env"]
