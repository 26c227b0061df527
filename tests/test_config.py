# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from links_finder.config import CrawlerConfig, load_config, read_config_file


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("start_url: http://example.com\nworkers: 3", ".yaml", None),
        (json.dumps({"start_url": "http://example.com", "workers": 3}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("- just\n- a list", ".yml", TypeError),
        ("[1, 2]", ".json", TypeError),
        ("{broken", ".json", ValueError),
        ("start_url = 1", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, CrawlerConfig)
        assert cfg.start_url == "http://example.com"
        assert cfg.workers == 3
        assert cfg.poll_interval == 5.0


def test_defaults():
    cfg = CrawlerConfig(start_url="https://example.com/docs/")
    assert cfg.start_url == "https://example.com/docs/"
    assert cfg.workers == 10
    assert cfg.poll_interval == 5.0
    assert cfg.timeout == 10.0
    assert cfg.user_agent == "Mozilla/4.0"
    assert cfg.default_encoding == "utf-8"


@pytest.mark.parametrize(
    "field,value",
    [
        ("start_url", ""),
        ("start_url", "   "),
        ("workers", 0),
        ("poll_interval", 0),
        ("timeout", -1),
        ("default_encoding", "no-such-codec"),
        ("unknown_key", 1),
    ],
)
def test_invalid_values(field, value):
    data = {"start_url": "http://example.com", field: value}
    with pytest.raises(ValidationError):
        CrawlerConfig(**data)


def test_overrides_win_and_none_ignored(tmp_path):
    cfg_path = write_file(tmp_path, "start_url: http://example.com\nworkers: 3", ".yaml")
    cfg = load_config(cfg_path, workers=7, timeout=None)
    assert cfg.workers == 7
    assert cfg.timeout == 10.0


def test_config_is_frozen():
    cfg = CrawlerConfig(start_url="http://example.com")
    with pytest.raises(ValidationError):
        cfg.workers = 2


def test_load_config_default_missing(tmp_path, monkeypatch):
    # no configs/default.yaml: built-in defaults, start_url must come from overrides
    monkeypatch.chdir(tmp_path)
    assert read_config_file(None) == {}
    with pytest.raises(ValidationError):
        load_config(None)
    assert load_config(None, start_url="http://example.com").workers == 10


def test_malformed_start_url_is_accepted():
    # reported as a diagnostic by the crawl, not rejected by the config
    cfg = CrawlerConfig(start_url=" not-a-url ")
    assert cfg.start_url == "not-a-url"


def test_shipped_default_config_is_valid():
    default = Path(__file__).resolve().parent.parent / "configs" / "default.yaml"
    cfg = load_config(default, start_url="http://example.com")
    assert cfg.workers == 10
    assert cfg.poll_interval == 5.0
    assert cfg.user_agent == "Mozilla/4.0"


def test_load_config_default_present(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "configs").mkdir()
    (tmp_path / "configs" / "default.yaml").write_text("start_url: http://example.com/a\n", encoding="utf-8")
    assert load_config(None).start_url == "http://example.com/a"


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")
