"""
Unit tests for the Firestore client factory.

The Firestore client class is patched so no credentials or network are needed.
"""

import os
import pytest
from unittest.mock import patch
from friendlyeats.store.firestore_client import create_client


@pytest.fixture
def mock_firestore_client():
    with patch('friendlyeats.store.firestore_client.firestore.Client') as client_cls:
        client_cls.return_value.project = "demo-project"
        yield client_cls


def test_empty_project_uses_environment_default(mock_firestore_client, monkeypatch):
    """Test an empty project id lets the library pick the default project."""
    monkeypatch.delenv("FIRESTORE_EMULATOR_HOST", raising=False)

    client = create_client()

    mock_firestore_client.assert_called_once_with(project=None)
    assert client is mock_firestore_client.return_value
    assert "FIRESTORE_EMULATOR_HOST" not in os.environ


def test_explicit_project(mock_firestore_client, monkeypatch):
    """Test an explicit project id is passed to the client."""
    monkeypatch.delenv("FIRESTORE_EMULATOR_HOST", raising=False)

    create_client(project="my-friendlyeats")

    mock_firestore_client.assert_called_once_with(project="my-friendlyeats")


def test_emulator_host_is_exported(mock_firestore_client, monkeypatch):
    """Test the emulator host is exported before the client is built."""
    monkeypatch.setenv("FIRESTORE_EMULATOR_HOST", "")
    seen = {}

    def build_client(project=None):
        seen["emulator"] = os.environ.get("FIRESTORE_EMULATOR_HOST")
        return mock_firestore_client.return_value

    mock_firestore_client.side_effect = build_client

    create_client(project="demo", emulator_host="localhost:8080")

    assert seen["emulator"] == "localhost:8080"
    assert os.environ["FIRESTORE_EMULATOR_HOST"] == "localhost:8080"
