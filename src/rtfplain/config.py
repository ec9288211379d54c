"""Configuration management for rtfplain.

Handles batch conversion settings only; the converter itself has no
options.

Config file location:
- Linux: $XDG_CONFIG_HOME/rtfplain/config.json (default ~/.config)
- Mac: ~/Library/Application Support/rtfplain/config.json
- Windows: %LOCALAPPDATA%/rtfplain/config.json

Environment variables override the file:
- RTFPLAIN_MAX_FILE_SIZE_MB
- RTFPLAIN_MIN_TEXT_LENGTH
"""

import json
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
import logging

from .batch.converter import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_MIN_TEXT_LENGTH

logger = logging.getLogger(__name__)


def get_config_dir() -> Path:
    """Get platform-specific config directory."""
    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", "~"))
    elif sys.platform == "darwin":
        base = Path("~/Library/Application Support")
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", "~/.config"))

    return base.expanduser() / "rtfplain"


CONFIG_DIR = get_config_dir()
CONFIG_FILE = CONFIG_DIR / "config.json"

# Keys accepted by `rtfplain config set`
INT_KEYS = ("max_file_size_mb", "min_text_length")
STR_KEYS = ("output_suffix",)


@dataclass
class Config:
    """rtfplain configuration."""

    max_file_size_mb: int = 100
    min_text_length: int = DEFAULT_MIN_TEXT_LENGTH
    output_suffix: str = ".txt"
    exclude_patterns: list[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_PATTERNS))

    @classmethod
    def load(cls) -> "Config":
        """Load config from file + environment."""
        config = cls()

        # Load from file if exists
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                config = cls._from_dict(data)
            except Exception as e:
                logger.warning(f"Failed to load config: {e}")

        # Override with environment variables
        for key in INT_KEYS:
            env_name = f"RTFPLAIN_{key.upper()}"
            if os.environ.get(env_name):
                try:
                    setattr(config, key, int(os.environ[env_name]))
                except ValueError:
                    logger.warning(f"Ignoring non-integer {env_name}={os.environ[env_name]!r}")

        return config

    @classmethod
    def _from_dict(cls, data: dict) -> "Config":
        """Create Config from dictionary."""
        config = cls()

        config.max_file_size_mb = int(data.get("max_file_size_mb", config.max_file_size_mb))
        config.min_text_length = int(data.get("min_text_length", config.min_text_length))
        config.output_suffix = data.get("output_suffix", config.output_suffix)
        if isinstance(data.get("exclude_patterns"), list):
            config.exclude_patterns = [str(p) for p in data["exclude_patterns"]]

        return config

    def to_dict(self) -> dict:
        return {
            "max_file_size_mb": self.max_file_size_mb,
            "min_text_length": self.min_text_length,
            "output_suffix": self.output_suffix,
            "exclude_patterns": self.exclude_patterns,
        }

    def save(self):
        """Save config to file."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)

        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

        logger.debug(f"Config saved to {CONFIG_FILE}")

    def set_value(self, key: str, value: str):
        """
        Set a config value from its string form.

        Raises:
            KeyError: Unknown key.
            ValueError: Value has the wrong type or is negative.
        """
        if key in INT_KEYS:
            number = int(value)
            if number < 0:
                raise ValueError(f"{key} must not be negative")
            setattr(self, key, number)
        elif key in STR_KEYS:
            if not value.startswith("."):
                value = "." + value
            setattr(self, key, value)
        else:
            raise KeyError(key)


def reset_config():
    """Delete the config file."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()

    logger.info("Configuration reset")
