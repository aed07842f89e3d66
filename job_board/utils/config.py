"""
Configuration management for Job Board.
"""

from pathlib import Path
from typing import Optional
import copy
import json
import os


class Config:
    """Manages application configuration and API keys."""

    DEFAULT_CONFIG = {
        "api_keys": {
            "supabase": "",
        },
        "store": {
            "backend": "local",  # memory, local, supabase
            "url": "",
            "timeout": 30,
            "data_dir": "./job_board_data",
        },
        "logging": {
            "level": "WARNING",
        },
        "export": {
            "output_dir": "./exports",
        },
    }

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_path: Path to config file (default: ~/.job_board/config.json)
        """
        if config_path:
            self.config_path = Path(config_path)
        else:
            self.config_path = Path.home() / ".job_board" / "config.json"

        self.config = self._load_config()

    def _load_config(self) -> dict:
        """Load configuration from file or create default."""
        defaults = copy.deepcopy(self.DEFAULT_CONFIG)

        if self.config_path.exists():
            with open(self.config_path, 'r') as f:
                user_config = json.load(f)

            # Merge with defaults
            return self._deep_merge(defaults, user_config)

        return defaults

    def _deep_merge(self, base: dict, override: dict) -> dict:
        """Deep merge two dictionaries."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def save(self) -> None:
        """Save current configuration to file."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w') as f:
            json.dump(self.config, f, indent=2)

    def get(self, key: str, default=None):
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "store.backend")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self.config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def set(self, key: str, value) -> None:
        """
        Set a configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "store.backend")
            value: Value to set
        """
        keys = key.split('.')
        config = self.config

        for k in keys[:-1]:
            if k not in config or not isinstance(config[k], dict):
                config[k] = {}
            config = config[k]

        config[keys[-1]] = value

    def get_api_key(self, provider: str) -> str:
        """
        Get API key for a provider.

        Environment variables (``<PROVIDER>_API_KEY``) take precedence over
        the config file.
        """
        env_value = os.environ.get(f"{provider.upper()}_API_KEY")

        if env_value:
            return env_value

        return self.get(f"api_keys.{provider}", "")

    def set_api_key(self, provider: str, key: str) -> None:
        """Set API key for a provider."""
        self.set(f"api_keys.{provider}", key)
        self.save()

    def get_store_url(self) -> str:
        """Remote store URL; SUPABASE_URL overrides the config file."""
        return os.environ.get("SUPABASE_URL") or self.get("store.url", "")

    def get_data_dir(self) -> str:
        """Get the local store data directory."""
        return self.get("store.data_dir", "./job_board_data")

    def get_output_dir(self) -> str:
        """Get the export output directory."""
        return self.get("export.output_dir", "./exports")

    def get_log_level(self) -> str:
        """Log level; LOG_LEVEL overrides the config file."""
        return (os.environ.get("LOG_LEVEL") or self.get("logging.level", "WARNING")).upper()

    def print_config(self) -> None:
        """Print current configuration (with API keys masked)."""
        masked_config = self._mask_sensitive(self.config)
        print(json.dumps(masked_config, indent=2))

    def _mask_sensitive(self, data: dict, sensitive_keys: set = None) -> dict:
        """Mask sensitive values in configuration."""
        if sensitive_keys is None:
            sensitive_keys = {"api_key", "api_keys", "key", "secret", "password", "token"}

        result = {}
        for key, value in data.items():
            if isinstance(value, dict):
                if any(s in key.lower() for s in sensitive_keys):
                    result[key] = {k: self._mask_value(v) for k, v in value.items()}
                else:
                    result[key] = self._mask_sensitive(value, sensitive_keys)
            elif any(s in key.lower() for s in sensitive_keys):
                result[key] = self._mask_value(value)
            else:
                result[key] = value
        return result

    def _mask_value(self, value) -> str:
        if not value:
            return "(not set)"
        value = str(value)
        return f"{value[:4]}...{value[-4:]}" if len(value) > 8 else "****"

    @classmethod
    def create_default_config(cls, path: str = None) -> 'Config':
        """Create a new config file with default values."""
        config = cls(path)
        config.save()
        return config
