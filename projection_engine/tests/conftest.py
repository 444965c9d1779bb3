"""Pytest fixtures for testing"""

import pytest
from flask import Flask
from flask.testing import FlaskClient

from projection_engine.app import create_app


@pytest.fixture()
def app() -> Flask:
    flask_app = create_app()
    flask_app.config.update(TESTING=True)
    return flask_app


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    with app.test_client() as test_client:
        yield test_client
