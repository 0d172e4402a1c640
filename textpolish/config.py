"""Configuration management for textpolish."""

import json
import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Dict

from dotenv import load_dotenv

from .errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILE = "config.json"
ENV_FILE = ".env"
API_KEY_VAR = "OPENAI_API_KEY"

DEFAULTS = {
    'openai_model': 'gpt-4o-mini',
    'openai_api_endpoint': 'https://api.openai.com/v1/chat/completions',
    'request_timeout_seconds': 30,
    'default_language': 'en-us',
}

# Environment variables that override values from the config file
ENV_OVERRIDES = {
    'openai_model': 'OPENAI_MODEL',
    'openai_api_endpoint': 'OPENAI_API_ENDPOINT',
    'request_timeout_seconds': 'REQUEST_TIMEOUT_SECONDS',
    'default_language': 'DEFAULT_LANGUAGE',
}


@dataclass(frozen=True)
class AppConfig:
    openai_model: str
    openai_api_endpoint: str
    request_timeout_seconds: float
    default_language: str
    openai_api_key: str


def read_config_file(config_path: str) -> Dict[str, Any]:
    """Read the JSON config file, returning an empty dict if it does not exist."""
    if not os.path.exists(config_path):
        logger.debug(f"Config file {config_path} not found, using defaults")
        return {}

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"error decoding config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"error opening config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config file {config_path} must contain a JSON object")
    return data


def _parse_timeout(value: Any) -> float:
    if isinstance(value, bool):
        raise ConfigError(f"invalid request_timeout_seconds: {value!r}")
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        raise ConfigError(f"invalid request_timeout_seconds: {value!r}")
    if not math.isfinite(timeout) or timeout <= 0:
        raise ConfigError(f"request_timeout_seconds must be a positive finite number, got {value!r}")
    return timeout


def load_config(config_path: str = CONFIG_FILE, env_path: str = ENV_FILE) -> AppConfig:
    """Build the application config from the config file, .env file and environment.

    Values are resolved in order: built-in defaults, the JSON config file,
    then environment variables. The API key only comes from the environment.
    Variables set in the .env file take precedence over ones already
    exported, so an empty exported OPENAI_API_KEY does not hide the key in .env.
    """
    if not load_dotenv(dotenv_path=env_path, override=True):
        logger.debug(f"No environment file loaded from {env_path}")

    values = dict(DEFAULTS)
    file_values = read_config_file(config_path)
    values.update({k: v for k, v in file_values.items() if k in DEFAULTS})

    for key, var in ENV_OVERRIDES.items():
        if os.getenv(var):
            values[key] = os.getenv(var)

    for key in ('openai_model', 'openai_api_endpoint', 'default_language'):
        if not isinstance(values[key], str) or not values[key].strip():
            raise ConfigError(f"{key} must be a non-empty string")

    api_key = (os.getenv(API_KEY_VAR) or '').strip()
    if not api_key:
        raise ConfigError(f"{API_KEY_VAR} not set in environment or {env_path} file")

    return AppConfig(
        openai_model=values['openai_model'].strip(),
        openai_api_endpoint=values['openai_api_endpoint'].strip(),
        request_timeout_seconds=_parse_timeout(values['request_timeout_seconds']),
        default_language=values['default_language'].strip(),
        openai_api_key=api_key,
    )
