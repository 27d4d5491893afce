"""Configuration management for loading settings from YAML."""

from pathlib import Path
from typing import Any
import yaml


class ConfigManager:

    def __init__(self, config_path: str = "settings.yaml"):
        self.config_path = Path(config_path)
        self.config = {}
        self.load()
        self.validate()

    def load(self) -> None:
        if not self.config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_path}\n"
                f"Please copy settings-template.yaml to settings.yaml and configure your values."
            )

        with open(self.config_path, 'r') as f:
            self.config = yaml.safe_load(f)

        if not self.config:
            raise ValueError(f"Configuration file is empty: {self.config_path}")

    def validate(self) -> None:
        base_url = self.wikipedia_base_url
        if not isinstance(base_url, str) or not base_url.startswith(("http://", "https://")):
            raise ValueError(
                f"Field 'wikipedia.base_url' must be an http(s) URL, got {base_url!r}.\n"
                f"Please update {self.config_path}"
            )

        timeout = self.timeout
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ValueError(
                f"Field 'wikipedia.timeout' must be a positive number of seconds, got {timeout!r}.\n"
                f"Please update {self.config_path}"
            )

    def get(self, key_path: str, default: Any = None) -> Any:
        keys = key_path.split('.')
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def wikipedia_base_url(self) -> str:
        return self.get("wikipedia.base_url", "https://en.wikipedia.org/w/api.php")

    @property
    def timeout(self) -> float:
        """Per-request timeout in seconds."""
        return self.get("wikipedia.timeout", 30)

    @property
    def user_agent(self) -> str:
        return self.get("wikipedia.user_agent", "wiki-lookup/0.1.0 (Python)")

    @property
    def log_level(self) -> str:
        return self.get("logging.level", "INFO")
