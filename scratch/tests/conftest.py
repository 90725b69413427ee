"""
scratch/tests/conftest.py

Shared fixtures: a mock Session and an isolated config file.
No test in this suite touches the network.
"""

from unittest.mock import MagicMock

import pytest
import requests

from scratch import config


@pytest.fixture
def session():
    """A Session stand-in; set session.request.side_effect per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def isolated_config_file(tmp_path, monkeypatch):
    """Point CONFIG_FILE at a temp location for the duration of a test."""
    path = tmp_path / 'config.json'
    monkeypatch.setattr(config, 'CONFIG_FILE', path)
    return path
