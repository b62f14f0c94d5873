"""
Test fixtures for objstore.
"""
from unittest.mock import MagicMock

import pytest

from objstore.credentials import API_KEY_KEY, AUTH_URL_KEY, TENANT_KEY, USERNAME_KEY
from objstore.models import CREDENTIALS_FILE_ENV
from objstore.storage import ObjectStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep credentials from the developer's shell out of the tests."""
    for key in (USERNAME_KEY, API_KEY_KEY, AUTH_URL_KEY, TENANT_KEY,
                CREDENTIALS_FILE_ENV):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def tmp_upload_dir(tmp_path):
    """Create a temporary directory for test files."""
    upload_dir = tmp_path / "uploads"
    upload_dir.mkdir()
    return upload_dir


@pytest.fixture
def source_files(tmp_upload_dir):
    """Create a small tree: a.txt (100 bytes) and sub/b.txt (200 bytes)."""
    (tmp_upload_dir / "a.txt").write_bytes(b"a" * 100)
    (tmp_upload_dir / "sub").mkdir()
    (tmp_upload_dir / "sub" / "b.txt").write_bytes(b"b" * 200)
    return tmp_upload_dir


@pytest.fixture
def mock_store():
    """Object store whose bucket already exists."""
    store = MagicMock(spec=ObjectStore)
    store.get_bucket.return_value = {"x-container-object-count": "0"}
    return store


@pytest.fixture
def credentials_file(tmp_path):
    """Write an openrc-style credentials file."""
    path = tmp_path / "openrc"
    path.write_text(
        "# OpenStack credentials\n"
        "export OS_USERNAME=file-user\n"
        "export OS_PASSWORD=file-secret\n"
        "export OS_AUTH_URL=http://keystone.example.com:5000/v2.0\n"
        "export OS_TENANT_NAME=file-tenant\n"
    )
    return path


@pytest.fixture
def credential_overrides():
    return {
        USERNAME_KEY: "cli-user",
        API_KEY_KEY: "cli-secret",
        AUTH_URL_KEY: "http://keystone.example.com:5000/v2.0",
    }
