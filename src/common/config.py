"""Configuration management for the watering service"""
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv


class Config:
    """Configuration manager that loads from .env and config.yaml"""

    def __init__(self, config_path: Optional[str] = None, env_path: Optional[str] = None):
        """
        Initialize configuration

        Args:
            config_path: Path to config.yaml (default: config/config.yaml)
            env_path: Path to .env file (default: .env in working directory)
        """
        if env_path:
            load_dotenv(env_path)
        else:
            load_dotenv()

        if config_path is None:
            project_root = Path(__file__).parent.parent.parent
            config_path = project_root / "config" / "config.yaml"

        self._yaml_config = {}
        if os.path.exists(config_path):
            with open(config_path, 'r') as f:
                self._yaml_config = yaml.safe_load(f) or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key. Supports dot notation for nested values.

        Args:
            key: Configuration key (e.g., 'gpio.chip' or 'API_SECRET_KEY')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        env_key = key.upper().replace('.', '_')
        env_value = os.getenv(env_key)
        if env_value is not None:
            return env_value

        keys = key.lower().split('.')
        value = self._yaml_config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value

    # API
    @property
    def api_secret_key(self) -> str:
        key = str(self.get('API_SECRET_KEY', '') or '')
        if not key:
            raise ValueError("API_SECRET_KEY is not set")
        return key

    @property
    def api_base_url(self) -> str:
        return self.get('API_BASE_URL', 'http://localhost:5000')

    # Pump hardware
    @property
    def water_pump_pin(self) -> int:
        pin = int(self.get('WATER_PUMP_PIN', 17))
        if pin < 0:
            raise ValueError(f"WATER_PUMP_PIN must be a non-negative BCM number, got {pin}")
        return pin

    @property
    def water_duration_secs(self) -> float:
        duration = float(self.get('WATER_DURATION_SECS', 5))
        if duration <= 0:
            raise ValueError(f"WATER_DURATION_SECS must be positive, got {duration}")
        return duration

    @property
    def gpio_chip(self) -> int:
        return int(self.get('GPIO_CHIP', 0))

    # Server
    @property
    def server_host(self) -> str:
        return self.get('SERVER_HOST', '0.0.0.0')

    @property
    def server_port(self) -> int:
        return int(self.get('SERVER_PORT', 5000))

    # Logging
    @property
    def log_level(self) -> str:
        return self.get('LOG_LEVEL', 'INFO')

    @property
    def log_dir(self) -> str:
        return self.get('LOG_DIR', 'logs')

    @property
    def log_file(self) -> Optional[str]:
        return self.get('LOG_FILE')


_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = Config()
    return _config
