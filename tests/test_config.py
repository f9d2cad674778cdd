# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from krawl.config import CrawlRequest, build_request, load_config, read_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("seed_url: https://example.com\npath_patterns: ['/docs/.*']", ".yaml", None),
        (json.dumps({"seed_url": "https://example.com", "path_patterns": ["/docs/.*"]}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("::invalid yaml", ".yaml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("seed_url: https://example.com", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlRequest)
        assert cfg.seed_url == "https://example.com"
        assert cfg.path_patterns == ("/docs/.*",)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_config(tmp_path / "nope.yaml")


@pytest.mark.parametrize("depth,expected", [(0, 3), (-5, 3), (1, 1), (7, 7)])
def test_depth_below_one_uses_default(depth, expected):
    assert CrawlRequest(seed_url="https://example.com", max_depth=depth).max_depth == expected


def test_defaults():
    cfg = CrawlRequest(seed_url="  https://example.com/  ")
    assert cfg.seed_url == "https://example.com/"
    assert cfg.path_patterns == ()
    assert cfg.max_depth == 3
    assert cfg.timeout == 3600.0
    assert cfg.concurrency == 1
    assert cfg.renderer == "http"


def test_request_is_frozen_and_strict():
    cfg = CrawlRequest(seed_url="https://example.com")
    with pytest.raises(ValidationError):
        cfg.max_depth = 5
    with pytest.raises(ValidationError):
        CrawlRequest(seed_url="https://example.com", follow_external=True)
    with pytest.raises(ValidationError):
        CrawlRequest(seed_url="https://example.com", renderer="curl")


def test_build_request_applies_overrides():
    base = {"seed_url": "https://example.com", "max_depth": 5, "timeout": 10.0}
    cfg = build_request(base, max_depth=0, timeout=None, path_patterns=["/a"])
    assert cfg.max_depth == 3
    assert cfg.timeout == 10.0
    assert cfg.path_patterns == ("/a",)
    assert base["max_depth"] == 5
