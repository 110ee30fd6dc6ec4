"""
CategoryDesk Client - Configuration Manager

Handles loading and saving client configuration from/to config.json.

Author: CategoryDesk Project
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Dict, Any, Union

# Configure logging
logger = logging.getLogger(__name__)


# Default configuration values
DEFAULT_CONFIG = {
    "server_url": "http://localhost",
    "server_port": 8080,
    "verify_ssl": False,
    "request_timeout": None,  # Seconds; None waits for the server indefinitely
    "log_level": "INFO",
    "log_retention_days": 30,
    "show_log_on_startup": False,
    "confirm_before_delete": True
}


def get_base_dir() -> Path:
    """
    Directory holding config.json and the logs folder.

    Next to the executable when frozen, otherwise the working directory.
    """
    if getattr(sys, 'frozen', False):
        return Path(sys.executable).parent
    return Path.cwd()


class ConfigManager:
    """
    Manages client configuration.

    Responsibilities:
    - Load/save config.json next to the executable (same location as logs folder)
    - Fill in defaults for keys missing from an older file
    - Provide configuration values to other modules
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_dir: Directory for config.json (defaults to get_base_dir())
        """
        base_dir = Path(config_dir) if config_dir else get_base_dir()
        self.config_file = base_dir / "config.json"
        self.config: Dict[str, Any] = {}

    def load_config(self) -> Dict[str, Any]:
        """
        Load configuration from config.json.
        Creates default config if file doesn't exist.

        Returns:
            Configuration dictionary
        """
        if self.config_file.exists():
            logger.debug(f"Loading configuration from {self.config_file}")
            with open(self.config_file, 'r') as f:
                self.config = json.load(f)
            # Merge with defaults for any missing keys
            for key, value in DEFAULT_CONFIG.items():
                if key not in self.config:
                    self.config[key] = value
            logger.info("Configuration loaded successfully")
        else:
            logger.info(f"Configuration file not found, creating default at {self.config_file}")
            self.config = DEFAULT_CONFIG.copy()
            self.save_config()

        return self.config

    def save_config(self):
        """Save current configuration to config.json."""
        logger.debug(f"Saving configuration to {self.config_file}")
        with open(self.config_file, 'w') as f:
            json.dump(self.config, f, indent=2)
        logger.debug("Configuration saved successfully")

    def get(self, key: str, default=None) -> Any:
        """
        Get configuration value.

        Args:
            key: Configuration key
            default: Default value if key not found

        Returns:
            Configuration value
        """
        return self.config.get(key, default)

    def set(self, key: str, value: Any):
        """Set one value and persist it right away."""
        self.update({key: value})

    def update(self, values: Dict[str, Any]):
        """
        Set several values and write config.json once.

        Args:
            values: Mapping of configuration keys to new values
        """
        self.config.update(values)
        self.save_config()
