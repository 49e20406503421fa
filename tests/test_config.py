# tests/test_config.py
import json

import pytest

from cooccurrence_trie.utils.config_manager import DEFAULTS, Config, ConfigError


def test_defaults_without_file():
    cfg = Config()
    assert cfg.data == DEFAULTS
    assert cfg["classifier"] == "terminal"
    assert cfg["flush_trailing_sentence"] is True


def test_missing_file_is_created_with_defaults(tmp_path):
    p = tmp_path / "config.json"
    Config(str(p))
    assert json.loads(p.read_text(encoding="utf8")) == DEFAULTS


def test_file_values_override_defaults(tmp_path):
    p = tmp_path / "config.json"
    p.write_text(json.dumps({"classifier": "trailing-mark", "log_level": "debug"}), encoding="utf8")
    cfg = Config(str(p))
    assert cfg["classifier"] == "trailing-mark"
    assert cfg["log_level"] == "DEBUG"
    assert cfg["subtrie_label"] == "- "


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[1, 2]",
        json.dumps({"colour": "red"}),
        json.dumps({"classifier": "nope"}),
        json.dumps({"log_level": "LOUD"}),
        json.dumps({"flush_trailing_sentence": "yes"}),
        json.dumps({"log_path": 3}),
    ],
)
def test_bad_config_rejected(tmp_path, content):
    p = tmp_path / "config.json"
    p.write_text(content, encoding="utf8")
    with pytest.raises(ConfigError):
        Config(str(p))


def test_set_and_show():
    cfg = Config()
    cfg.set("subtrie_label", "> ")
    assert cfg["subtrie_label"] == "> "
    assert "subtrie_label" in cfg.show()
    with pytest.raises(ConfigError):
        cfg.set("missing", 1)
