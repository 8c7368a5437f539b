"""
Configuration management.

All configuration keys for the Overview client are defined here.

Precedence, highest first:
- Environment variables (OVERVIEW_HOST, OVERVIEW_API_TOKEN, ...)
- YAML config file
- Dataclass defaults
"""

import os
from dataclasses import dataclass
from pathlib import Path

import yaml

DEFAULT_HOST = "https://www.overviewdocs.com"


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class OverviewConfig:
    """Overview API configuration.

    - host: Scheme + host of the API, without the /api/v1 prefix
    - api_token: API token, sent as Basic auth with the x-auth-token password
    - timeout/max_retries/backoff_factor: used by the default executor only
    """

    host: str = DEFAULT_HOST
    api_token: str = ""
    timeout: int = 30
    max_retries: int = 3
    backoff_factor: float = 0.5

    def validate(self) -> list[str]:
        """Validate configuration completeness and consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors: list[str] = []

        if not self.host:
            errors.append("host is required")
        if not self.api_token:
            errors.append("api_token is required")
        if self.timeout <= 0:
            errors.append("timeout must be positive")
        if self.max_retries < 0:
            errors.append("max_retries must be >= 0")

        return errors


def _int_from_env(name: str, default: int) -> int:
    value = os.environ.get(name, "")
    if not value:
        return int(default)
    try:
        return int(value)
    except ValueError:
        raise ConfigValidationError(f"{name} must be an integer, got {value!r}")


def load_config(config_path: Path) -> OverviewConfig:
    """
    Load configuration from YAML file.

    Environment variables can override config values:
    - OVERVIEW_HOST
    - OVERVIEW_API_TOKEN
    - OVERVIEW_TIMEOUT (request timeout in seconds)
    - OVERVIEW_MAX_RETRIES
    """
    if config_path.exists():
        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {config_path}: {e}")
    else:
        data = {}

    if not isinstance(data, dict):
        raise ConfigValidationError(f"{config_path} must contain a mapping at the top level")

    overview_data = data.get("overview") or {}
    if not isinstance(overview_data, dict):
        raise ConfigValidationError("'overview' section must be a mapping")

    return OverviewConfig(
        host=os.environ.get("OVERVIEW_HOST", overview_data.get("host", DEFAULT_HOST)),
        api_token=os.environ.get("OVERVIEW_API_TOKEN", overview_data.get("api_token", "")),
        timeout=_int_from_env("OVERVIEW_TIMEOUT", overview_data.get("timeout", 30)),
        max_retries=_int_from_env("OVERVIEW_MAX_RETRIES", overview_data.get("max_retries", 3)),
        backoff_factor=float(overview_data.get("backoff_factor", 0.5)),
    )


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    default_config = """# Overview API client configuration
#
# Environment variables override these values:
# OVERVIEW_HOST, OVERVIEW_API_TOKEN, OVERVIEW_TIMEOUT, OVERVIEW_MAX_RETRIES

overview:
  host: "https://www.overviewdocs.com"   # Scheme + host, no /api/v1 suffix
  api_token: "YOUR_OVERVIEW_API_TOKEN"
  timeout: 30                            # Request timeout (seconds)
  max_retries: 3                         # Retries for 429/5xx and connection errors
  backoff_factor: 0.5
"""

    config_path.parent.mkdir(parents=True, exist_ok=True)
    with open(config_path, "w") as f:
        f.write(default_config)
