"""
Tests for configuration loading - defaults, YAML values, environment overrides.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

import common.config
from common.config import Config, get_config


@pytest.fixture
def clean_env():
    """No .env loading and an empty environment."""
    with patch('common.config.load_dotenv'), patch.dict('os.environ', {}, clear=True):
        yield


def test_defaults(clean_env, tmp_path):
    config = Config(config_path=tmp_path / "missing.yaml")

    assert config.water_pump_pin == 17
    assert config.water_duration_secs == 5.0
    assert config.gpio_chip == 0
    assert config.server_host == '0.0.0.0'
    assert config.server_port == 5000
    assert config.log_level == 'INFO'
    assert config.log_file is None
    assert config.api_base_url == 'http://localhost:5000'


def test_missing_secret_is_an_error(clean_env, tmp_path):
    config = Config(config_path=tmp_path / "missing.yaml")

    with pytest.raises(ValueError, match="API_SECRET_KEY"):
        config.api_secret_key


def test_yaml_values(clean_env, tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("water_pump_pin: 22\nwater_duration_secs: 2.5\nserver_port: 8080\n")

    config = Config(config_path=config_file)

    assert config.water_pump_pin == 22
    assert config.water_duration_secs == 2.5
    assert config.server_port == 8080


def test_env_overrides_yaml(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("water_pump_pin: 22\n")

    env = {'WATER_PUMP_PIN': '5', 'API_SECRET_KEY': 'abc'}
    with patch('common.config.load_dotenv'), patch.dict('os.environ', env, clear=True):
        config = Config(config_path=config_file)

        assert config.water_pump_pin == 5
        assert config.api_secret_key == 'abc'


def test_non_positive_duration_rejected(tmp_path):
    with patch('common.config.load_dotenv'), patch.dict('os.environ', {'WATER_DURATION_SECS': '0'}, clear=True):
        config = Config(config_path=tmp_path / "missing.yaml")

        with pytest.raises(ValueError):
            config.water_duration_secs


def test_get_config_is_cached(clean_env):
    common.config._config = None
    try:
        assert get_config() is get_config()
    finally:
        common.config._config = None


def test_negative_pin_rejected(tmp_path):
    with patch('common.config.load_dotenv'), patch.dict('os.environ', {'WATER_PUMP_PIN': '-1'}, clear=True):
        config = Config(config_path=tmp_path / "missing.yaml")

        with pytest.raises(ValueError, match="WATER_PUMP_PIN"):
            config.water_pump_pin
