"""Shared fixtures for the web server tests."""
from flask import Flask
from flask.testing import FlaskClient
import pytest

from arithmetic_web_server.server.app import create_app


@pytest.fixture
def app() -> Flask:
    """Create a fresh application in testing mode."""
    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture
def client(app: Flask) -> FlaskClient:
    """Test client bound to the application."""
    return app.test_client()
