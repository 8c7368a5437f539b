"""Test fixtures and utilities."""

from unittest.mock import Mock

import pytest


@pytest.fixture
def fallback_executor() -> Mock:
    """Executor passed at construction time."""
    return Mock(name="fallback_executor", return_value={"from": "fallback"})


@pytest.fixture
def executor() -> Mock:
    """Executor passed per call."""
    return Mock(name="executor", return_value={"from": "per-call"})


@pytest.fixture
def sample_config_yaml() -> str:
    """Sample YAML config file contents."""
    return """
overview:
  host: "https://overview.example.org"
  api_token: "yaml-token"
  timeout: 12
  max_retries: 1
  backoff_factor: 0.25
"""
