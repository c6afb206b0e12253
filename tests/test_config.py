"""Tests for config defaults, YAML loading and CLI overrides."""

import pytest

from package_analyser.config import AnalyserConfig, load_config
from package_analyser.errors import ConfigError


def test_defaults():
    c = load_config(None)
    assert c == AnalyserConfig()
    assert c.bins == 5
    assert c.bar_width == 20
    assert c.workers == 1
    assert c.api_url == "https://api.github.com"
    assert c.token is None


def test_yaml_values(tmp_path):
    p = tmp_path / "analyser.yaml"
    p.write_text("bins: 3\nbar_width: 40\nworkers: 8\napi_url: https://ghe.example/api/v3\nunknown: 1\n")
    c = load_config(p)
    assert (c.bins, c.bar_width, c.workers) == (3, 40, 8)
    assert c.api_url == "https://ghe.example/api/v3"


def test_yaml_empty_file(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("")
    assert load_config(p) == AnalyserConfig()


def test_yaml_token_is_ignored(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("token: abc\n")
    assert load_config(p).token is None


@pytest.mark.parametrize("body", ["- 1\n- 2\n", "bins: [1\n", "bins: 0\n", "bins: five\n", "workers: true\n"])
def test_yaml_invalid(tmp_path, body):
    p = tmp_path / "bad.yaml"
    p.write_text(body)
    with pytest.raises(ConfigError):
        load_config(p)


def test_missing_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_overrides_win_over_file(tmp_path):
    p = tmp_path / "c.yaml"
    p.write_text("bins: 3\nbar_width: 40\n")
    c = load_config(p).with_overrides(bins=7, bar_width=None, token="t")
    assert c.bins == 7
    assert c.bar_width == 40
    assert c.token == "t"


def test_override_validation():
    with pytest.raises(ConfigError):
        AnalyserConfig().with_overrides(workers=0)
