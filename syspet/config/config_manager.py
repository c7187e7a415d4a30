"""Configuration loading and management."""
import os
import yaml
from .config import Config
from .collection_config import ScanConfig
from .display_config import DisplayConfig
from .logging_config import LoggingConfig

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), 'default_config.yaml')


class ConfigManager:
    """Configuration loading and management."""

    @staticmethod
    def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> Config:
        """Load configuration from YAML file - let it crash if bad."""
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}

        return ConfigManager.from_dict(config_data)

    @staticmethod
    def from_dict(config_data: dict) -> Config:
        """Build a Config from parsed YAML, defaulting missing sections."""
        scan = ScanConfig(**(config_data.get('scan') or {}))
        display = DisplayConfig(**(config_data.get('display') or {}))
        logging_config = LoggingConfig(**(config_data.get('logging') or {}))

        return Config(
            scan=scan,
            display=display,
            logging=logging_config
        )
