"""
Configuration management utilities.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
from omegaconf import OmegaConf, DictConfig


DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
DEFAULT_CONFIG_NAME = "default"

# Sections every configuration must provide after merging with the defaults
CONFIG_SCHEMA = {
    "storage": {"path": None},
    "review": {"queue_limit": None},
    "logging": {"level": None},
    "vocabulary": None,
}


class ConfigManager:
    """Manages configuration loading and validation."""

    def __init__(self, config_dir: Union[str, Path] = DEFAULT_CONFIG_DIR):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = Path(config_dir)
        self._configs = {}

    def _read_yaml(self, config_path: Path) -> DictConfig:
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in {config_path}: {e}")

        if not isinstance(config, dict):
            raise ValueError(f"Configuration {config_path} must be a mapping")

        # Use OmegaConf for advanced configuration features
        return OmegaConf.create(config)

    def validate_config(self, config: Any, schema: Dict[str, Any] = CONFIG_SCHEMA) -> bool:
        """
        Check that every key in ``schema`` is present in ``config``.

        Args:
            config: Configuration to validate
            schema: Nested mapping of required keys (leaf values are ignored)

        Returns:
            True if valid, False otherwise
        """
        for key, value in schema.items():
            if key not in config:
                return False

            if isinstance(value, dict):
                section = config[key]
                if not isinstance(section, (dict, DictConfig)):
                    return False
                if not self.validate_config(section, value):
                    return False

        return True

    def get_default_config(self) -> DictConfig:
        """
        Get the packaged default configuration.

        Returns:
            Default configuration (a fresh copy on each call)
        """
        if DEFAULT_CONFIG_NAME not in self._configs:
            self._configs[DEFAULT_CONFIG_NAME] = self._read_yaml(self.config_dir / f"{DEFAULT_CONFIG_NAME}.yaml")

        return OmegaConf.create(OmegaConf.to_container(self._configs[DEFAULT_CONFIG_NAME]))

    def load_with_defaults(self, config_path: Optional[Union[str, Path]] = None) -> DictConfig:
        """
        Load a user configuration merged over the packaged defaults.

        Args:
            config_path: YAML file path, or None for defaults only

        Returns:
            Merged configuration

        Raises:
            FileNotFoundError: If ``config_path`` doesn't exist
            yaml.YAMLError: If the file is invalid YAML
            ValueError: If the merged configuration lacks a required section
        """
        config = self.get_default_config()

        if config_path is not None:
            user_config = self._read_yaml(Path(config_path).expanduser())
            config = OmegaConf.merge(config, user_config)

        if not self.validate_config(config):
            raise ValueError(f"Configuration is missing required sections: {list(CONFIG_SCHEMA)}")

        return config
