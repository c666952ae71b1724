"""Shared pytest fixtures."""

import pytest
from fastapi.testclient import TestClient

from sessiongate.app import App
from sessiongate.config import Config
from sessiongate.core.core import Core
from sessiongate.web.server import create_fastapi_app


@pytest.fixture
def config():
    """Create a config independent of the environment and .env files."""
    return Config(
        _env_file=None,
        users={"alice": "1234", "bob": "abcd"},
        protected_paths=["/benvenuto", "/logout"],
    )


@pytest.fixture
def core(config):
    return Core(config)


@pytest.fixture
def services(core):
    return core.services


@pytest.fixture
def app_instance(config):
    return App(config)


@pytest.fixture
def client(app_instance, config):
    """Test client with lifespan started, redirects are not followed."""
    with TestClient(create_fastapi_app(app_instance, config), follow_redirects=False) as test_client:
        yield test_client
