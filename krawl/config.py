# === FILE: krawl/config.py ===
"""
Loading and validation of krawl crawl requests.

Pydantic describes the schema; structural checks on the seed URL and the path
patterns are left to :mod:`krawl.crawler.validator`, which reports them as
:class:`krawl.errors.ConfigError`.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Literal, Tuple, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_DEPTH = 3
DEFAULT_TIMEOUT = 60 * 60.0


class CrawlRequest(BaseModel):
    """Parameters of a single crawl."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    seed_url: str = Field(..., min_length=1, description="Page the crawl starts from.")
    path_patterns: Tuple[str, ...] = Field(
        default_factory=tuple, description="Regular expressions a followed link must match."
    )
    max_depth: int = Field(DEFAULT_DEPTH, description="Link generations to follow, seed included.")
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0, description="Deadline for the whole crawl (seconds).")
    page_timeout: float = Field(30.0, gt=0, description="Deadline for rendering one page (seconds).")
    user_agent: str = Field("KrawlBot/1.0", min_length=1, description="User-Agent header.")
    concurrency: int = Field(1, ge=1, description="Renderer calls allowed in flight at once.")
    renderer: Literal["http", "browser"] = Field("http", description="Page renderer backend.")

    @field_validator("seed_url", mode="before")
    def _strip_seed(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("max_depth")
    def _default_depth(cls, v: int) -> int:
        # anything below one generation means "use the default"
        return DEFAULT_DEPTH if v < 1 else v


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Malformed YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Malformed JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def read_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML or JSON config file into a plain mapping.
    Raises FileNotFoundError when the file does not exist.
    """
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Unsupported config format: {suffix}")


def load_config(path: Union[str, Path]) -> CrawlRequest:
    """Read YAML or JSON and return a checked CrawlRequest."""
    return CrawlRequest(**read_config(path))


def build_request(config_data: Dict[str, Any], **overrides: Any) -> CrawlRequest:
    """Merge the non-None *overrides* (e.g. CLI options) over *config_data*."""
    data = dict(config_data)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return CrawlRequest(**data)


__all__ = ["CrawlRequest", "ValidationError", "build_request", "load_config", "read_config", "DEFAULT_DEPTH", "DEFAULT_TIMEOUT"]
