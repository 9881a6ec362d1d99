"""Shared environment management for configuration."""

import os
from configparser import ConfigParser
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .base_utils import BaseUtils

# Standard eschermerge directory
ESCHERMERGE_DIR = Path.home() / ".eschermerge"
DEFAULT_CONFIG_FILE = ESCHERMERGE_DIR / "config.yaml"
ENV_PREFIX = "ESCHERMERGE_"


class SharedEnvUtils(BaseUtils):
    """Manages shared environment configuration and runtime settings.

    Configuration priority order:
    1. Explicitly provided config_file parameter
    2. ~/.eschermerge/config.yaml (user config)
    3. config.yaml in the working directory or one of its parents
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize the shared environment which manages configuration.

        Args:
            config_file: Optional explicit config file path. If None, uses priority order.
            **kwargs: Additional arguments passed to BaseUtils
        """
        # The environment can override the log level unless the caller set one
        env_level = os.environ.get(ENV_PREFIX + "LOG_LEVEL")
        if env_level and "log_level" not in kwargs:
            kwargs["log_level"] = env_level
        super().__init__(**kwargs)

        self._config_hash = {}
        self._config_file = self._find_config_file(config_file)

        if self._config_file:
            self._config_hash = self.read_config()
            self.log_info(f"Loaded configuration from: {self._config_file}")

        self._env_vars = {}
        self.load_environment_variables()

    def _find_config_file(self, explicit_path: Optional[Union[str, Path]] = None) -> Optional[Path]:
        """Find the configuration file using priority order.

        Args:
            explicit_path: Optional explicit config file path

        Returns:
            Path to config file, or None if not found
        """
        if explicit_path:
            explicit = Path(explicit_path)
            if explicit.exists():
                return explicit
            else:
                self.log_warning(f"Explicit config file not found: {explicit_path}")
                return None

        if DEFAULT_CONFIG_FILE.exists():
            return DEFAULT_CONFIG_FILE

        current = Path.cwd()
        for _ in range(5):  # Search up to 5 levels
            project_config = current / "config.yaml"
            if project_config.exists():
                return project_config
            current = current.parent

        self.log_debug("No configuration file found")
        return None

    def read_config(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Dict[str, Any]:
        """Read configuration from a file.

        Supports both YAML (.yaml, .yml) and INI formats.

        Args:
            config_file: Optional path to config file. Uses self._config_file if None.

        Returns:
            Configuration dictionary
        """
        if config_file is None:
            config_file = self._config_file

        if config_file is None:
            return {}

        config_path = Path(config_file)
        confighash = {}

        if not config_path.exists():
            self.log_warning(f"Config file not found: {config_path}")
            return confighash

        try:
            if config_path.suffix in ['.yaml', '.yml']:
                import yaml
                with open(config_path, 'r') as f:
                    confighash = yaml.safe_load(f) or {}
                self.log_debug(f"Loaded YAML config from {config_path}")
            else:
                config = ConfigParser()
                config.read(config_path)
                for section in config.sections():
                    confighash[section] = {}
                    for nameval in config.items(section):
                        confighash[section][nameval[0]] = nameval[1]
                self.log_debug(f"Loaded INI config from {config_path}")

            return confighash

        except Exception as e:
            self.log_error(f"Error parsing config file {config_path}: {e}")
            raise

    def get_config_value(self, key_path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            key_path: Dot-separated path to config value (e.g., "sbml.gene_prefix")
            default: Default value if key not found

        Returns:
            Configuration value or default

        Examples:
            >>> util.get_config_value("sbml.reaction_prefix", "R_")
            'R_'
        """
        keys = key_path.split('.')
        value = self._config_hash

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                self.log_debug(f"Config key '{key_path}' not found, using default: {default}")
                return default

        return value

    def load_environment_variables(self) -> None:
        """Load eschermerge environment variables into the shared environment."""
        for key, value in os.environ.items():
            if key.startswith(ENV_PREFIX):
                self._env_vars[key] = value

    def get_env_var(self, name: str, default: Any = None) -> Any:
        """Retrieve an environment variable captured at startup."""
        return self._env_vars.get(name, default)
