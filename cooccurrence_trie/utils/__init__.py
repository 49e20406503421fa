# cooccurrence_trie/utils/__init__.py
# ambient helpers: logging and configuration

from .logger_utils import Log, LEVELS
from .config_manager import Config, ConfigError, DEFAULTS

__all__ = ["Log", "LEVELS", "Config", "ConfigError", "DEFAULTS"]
