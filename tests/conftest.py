"""Pytest configuration helpers for test collection.

Ensure the project root is on sys.path so tests can import the package
without requiring PYTHONPATH to be set externally.
"""
import sys
from pathlib import Path

import pytest


def pytest_configure(config):
    # Insert repo root (one level up from tests/) to sys.path
    repo_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(repo_root))


@pytest.fixture
def app(tmp_path):
    from valuestore_lib.main import create_app, Config
    # point at a missing config file so the repo's sample config is not used
    return create_app(Config(config_path=tmp_path / 'missing.yml',
                             initial_values={'students': [{'name': 'Ali'}, {'name': 'Sarah'}]}))


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def state():
    from valuestore_lib.state import StorageState
    return StorageState({'form': {'values': {'username': 'ali'}}})
