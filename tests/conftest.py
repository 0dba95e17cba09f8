"""
Pytest configuration and shared fixtures for the property planner tests.
"""

import os
from unittest.mock import patch

import pytest

from property_planner import create_app
from property_planner.config import reset_global_settings
from property_planner.models.sell_or_keep import default_inputs


@pytest.fixture
def app_env(tmp_path):
    """Environment for an isolated application with storage under tmp_path."""
    env = {
        "SECRET_KEY": "test-secret-key-123",
        "APP_ENV": "testing",
        "STORAGE_BASE_PATH": str(tmp_path / "storage"),
    }
    reset_global_settings()
    with patch.dict(os.environ, env, clear=True):
        yield env
    reset_global_settings()


@pytest.fixture
def app(app_env):
    """Create a Flask application for testing."""
    return create_app()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture
def inputs():
    """The shipped default inputs."""
    return default_inputs()
