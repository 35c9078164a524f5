"""
Loading and validation of the crawl configuration.

The document may be TOML, YAML or JSON; keys keep their hyphenated names
(``seed-url``, ``url-regex``, ``sleep-time`` ...) and are mapped to
snake_case fields through pydantic aliases.
"""
from __future__ import annotations

import errno
import json
import os
import re
import tomllib
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from simple_crawler.exceptions import ConfigurationError

__all__ = ["CrawlConfig", "load_config"]


class CrawlConfig(BaseModel):
    """Settings for a single crawl run. Immutable once loaded."""
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    seed_url: str = Field(..., alias="seed-url", min_length=1, description="URL the crawl starts from.")
    url_regex: str = Field(..., alias="url-regex", description="Pattern a discovered URL must contain.")
    sleep_time: int = Field(..., alias="sleep-time", ge=0, description="Delay between requests, ms.")
    save_html: bool = Field(False, alias="save-html", description="Write raw HTML of every page.")
    save_text: bool = Field(False, alias="save-text", description="Write visible text of every page.")
    html_dir: Path = Field(Path("html"), alias="html-dir", description="Where raw HTML files go.")
    text_dir: Path = Field(Path("text"), alias="text-dir", description="Where text files go.")
    user_agent: str = Field("SimpleCrawler/1.0", alias="user-agent", min_length=1)
    timeout: float = Field(30.0, gt=0, description="Per-request timeout, seconds.")
    robots_prefix_match: bool = Field(
        False,
        alias="robots-prefix-match",
        description="Block URLs that merely start with a Disallow rule.",
    )

    @field_validator("url_regex")
    @classmethod
    def _check_regex(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {v!r}: {exc}") from exc
        return v

    @model_validator(mode="after")
    def _check_outputs(self) -> CrawlConfig:
        if not self.save_html and not self.save_text:
            raise ValueError("no saving settings present: enable save-html and/or save-text")
        return self

    @property
    def pattern(self) -> re.Pattern[str]:
        """Compiled scope pattern (``re`` keeps its own cache)."""
        return re.compile(self.url_regex)

    @property
    def delay(self) -> float:
        """Politeness delay in seconds."""
        return self.sleep_time / 1000.0


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Invalid TOML in {path}: {exc}") from exc


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Top level of {path} must be a mapping, got {type(data).__name__}")
    return data


_READERS = {
    ".toml": _read_toml,
    ".yaml": _read_yaml,
    ".yml": _read_yaml,
    ".json": _read_json,
}


def load_config(path: Union[str, Path]) -> CrawlConfig:
    """
    Read a TOML, YAML or JSON document and return a validated CrawlConfig.

    A missing file raises FileNotFoundError; anything wrong with the
    contents raises ConfigurationError.
    """
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    reader = _READERS.get(path_obj.suffix.lower())
    if reader is None:
        raise ConfigurationError(f"Unsupported config format: {path_obj.suffix or '<none>'}")
    data = reader(path_obj)

    try:
        return CrawlConfig(**data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration in {path_obj}:\n{exc}") from exc
