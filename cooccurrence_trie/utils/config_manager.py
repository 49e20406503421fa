# config_manager.py - JSON config manager

from __future__ import annotations
import json
import os
from typing import Any, Optional

from typing_extensions import TypedDict

from cooccurrence_trie.context.classifier import CLASSIFIERS, DEFAULT_CLASSIFIER
from cooccurrence_trie.utils.logger_utils import LEVELS


class ConfigError(ValueError):
    """Config file unreadable, malformed, or holding unknown keys/values."""


class ConfigData(TypedDict):
    classifier: str  # name of the token classifier, see context.classifier
    flush_trailing_sentence: bool  # index a final sentence with no terminator
    log_level: str
    log_path: Optional[str]  # also append log lines to this file
    subtrie_label: str  # prefix of each co-occurrence line in query output


DEFAULTS: ConfigData = {
    "classifier": DEFAULT_CLASSIFIER,
    "flush_trailing_sentence": True,
    "log_level": "WARNING",
    "log_path": None,
    "subtrie_label": "- ",
}


class Config:
    def __init__(self, path: Optional[str] = None):
        self.path = path
        self.data: ConfigData = dict(DEFAULTS)  # type: ignore[assignment]
        if path:
            self._load()

    def _load(self):
        if not os.path.exists(self.path):
            self.save()
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"cannot read config {self.path}: {e}") from e
        if not isinstance(loaded, dict):
            raise ConfigError(f"config {self.path} must hold a JSON object")
        for k, v in loaded.items():
            self.set(k, v)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def set(self, key: str, val: Any) -> None:
        """Validate and store one option (used for file values and CLI overrides)."""
        if key not in DEFAULTS:
            raise ConfigError(f"No such option: {key}")
        if key == "classifier" and val not in CLASSIFIERS:
            raise ConfigError(f"unknown classifier {val!r}, choose from {sorted(CLASSIFIERS)}")
        if key == "log_level":
            if not isinstance(val, str) or val.upper() not in LEVELS:
                raise ConfigError(f"unknown log level {val!r}")
            val = val.upper()
        if key == "flush_trailing_sentence" and not isinstance(val, bool):
            raise ConfigError("flush_trailing_sentence must be true or false")
        if key in ("classifier", "subtrie_label") and not isinstance(val, str):
            raise ConfigError(f"{key} must be a string")
        if key == "log_path" and val is not None and not isinstance(val, str):
            raise ConfigError("log_path must be a string or null")
        self.data[key] = val  # type: ignore[literal-required]

    def show(self) -> str:
        return "\n".join(f"{k:25} = {v}" for k, v in self.data.items())
