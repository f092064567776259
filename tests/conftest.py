"""Shared fixtures: a Flask app built with TestingConfig and its test client."""

import pytest

from hawker_menu import create_app
from hawker_menu.config.settings import TestingConfig


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()
