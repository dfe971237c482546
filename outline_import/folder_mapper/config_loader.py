"""YAML configuration loading and validation.

The config file holds defaults for the import command so they don't have to
be repeated on every invocation. Command-line flags always win.

Configuration file structure:
    folder: ./docs
    host: https://docs.example.com
    collection: 7b3c5a1e-...
"""

import os
from typing import Any, Dict, Optional

import yaml

from ..outline_client.errors import ConfigurationError
from .models import ImportConfig

DEFAULT_CONFIG_PATH = ".outline-import/config.yaml"


class ConfigLoader:
    """Loads and validates the optional YAML defaults file."""

    ALLOWED_FIELDS = {'folder', 'host', 'collection'}

    @classmethod
    def load(cls, config_path: str) -> ImportConfig:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            ImportConfig with the values found in the file

        Raises:
            ConfigurationError: If the file cannot be read or is invalid
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except FileNotFoundError:
            raise ConfigurationError(f"Configuration file not found: {config_path}")
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_path}: {e.strerror or e}")

        try:
            config_dict = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}")

        if config_dict is None:
            return ImportConfig()

        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration must be a YAML dictionary, got {type(config_dict).__name__}"
            )

        return cls._parse_config(config_dict)

    @classmethod
    def load_default(cls, config_path: Optional[str] = None) -> ImportConfig:
        """Load an explicit config file, or the default one if it exists.

        An explicit path must exist; the default path is optional.
        """
        if config_path:
            return cls.load(config_path)
        if os.path.exists(DEFAULT_CONFIG_PATH):
            return cls.load(DEFAULT_CONFIG_PATH)
        return ImportConfig()

    @classmethod
    def _parse_config(cls, config_dict: Dict[str, Any]) -> ImportConfig:
        unknown = set(config_dict) - cls.ALLOWED_FIELDS
        if unknown:
            raise ConfigurationError(
                f"Unknown field(s): {', '.join(sorted(str(k) for k in unknown))}"
            )

        values: Dict[str, Optional[str]] = {}
        for field_name in cls.ALLOWED_FIELDS:
            value = config_dict.get(field_name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"must be a string, got {type(value).__name__}",
                    config_field=field_name,
                )
            values[field_name] = value or None

        return ImportConfig(**values)
