"""Fixtures for backend tests."""

from unittest.mock import MagicMock

import pytest
import yaml


@pytest.fixture
def translations_dir(tmp_path):
    """Directory with nested and domain-prefixed YAML translation files.

    Layout:
    - en-US.yml
    - fr-FR.yml
    - incident.en-US.yml
    """
    files = {
        "en-US.yml": {"greeting": {"hello": "Hello", "bye": "Goodbye"}},
        "fr-FR.yml": {"greeting": {"hello": "Bonjour"}},
        "incident.en-US.yml": {"incident": {"created": "Incident {{id}} created"}},
    }
    for name, content in files.items():
        with open(tmp_path / name, "w", encoding="utf-8") as f:
            yaml.safe_dump(content, f)
    return tmp_path


@pytest.fixture
def mock_dynamodb_client():
    """boto3 DynamoDB client mock with an empty scan paginator."""
    client = MagicMock()
    paginator = MagicMock()
    paginator.paginate.return_value = [{"Items": []}]
    client.get_paginator.return_value = paginator
    client.delete_item.return_value = {}
    return client
