"""
Tests for the Swift storage adapter.
"""
import io
from unittest.mock import MagicMock, patch

import pytest
from swiftclient.client import ClientException

from objstore.models import ConnectionParams
from objstore.storage import PUBLIC_READ_ACL, SwiftStore


@pytest.fixture
def connection():
    return MagicMock()


@pytest.fixture
def store(connection):
    return SwiftStore(connection)


def test_from_params_builds_keystone_connection():
    """Test that the connection is built for keystone v2 auth."""
    params = ConnectionParams(
        provider="openstack",
        username="user",
        api_key="secret",
        auth_url="http://keystone.example.com:5000/v2.0/tokens",
        tenant_name="demo",
    )
    with patch("objstore.storage.Connection") as mock_connection:
        store = SwiftStore.from_params(params)

    mock_connection.assert_called_once_with(
        authurl="http://keystone.example.com:5000/v2.0",
        user="user",
        key="secret",
        tenant_name="demo",
        auth_version="2.0",
        retries=0,
    )
    assert store.connection is mock_connection.return_value


def test_get_bucket_returns_headers(store, connection):
    """Test that an existing container returns its headers."""
    connection.head_container.return_value = {"x-container-object-count": "3"}
    assert store.get_bucket("b") == {"x-container-object-count": "3"}
    connection.head_container.assert_called_once_with("b")


def test_get_missing_bucket_returns_none(store, connection):
    """Test that a 404 on HEAD means the bucket is absent."""
    connection.head_container.side_effect = ClientException(
        "Container HEAD failed", http_status=404)
    assert store.get_bucket("b") is None


def test_get_bucket_propagates_other_errors(store, connection):
    """Test that non-404 errors propagate."""
    connection.head_container.side_effect = ClientException(
        "Unauthorized", http_status=401)
    with pytest.raises(ClientException):
        store.get_bucket("b")


def test_create_public_bucket(store, connection):
    """Test that public buckets get a world-readable ACL."""
    store.create_bucket("b")
    connection.put_container.assert_called_once_with(
        "b", headers={"X-Container-Read": PUBLIC_READ_ACL})


def test_create_private_bucket(store, connection):
    """Test that private buckets get no read ACL."""
    store.create_bucket("b", public=False)
    connection.put_container.assert_called_once_with("b", headers={})


def test_put_object(store, connection):
    """Test that put_object delegates to the connection."""
    connection.put_object.return_value = "etag-1"
    body = io.BytesIO(b"data")
    assert store.put_object("b", "dir/key.txt", body) == "etag-1"
    connection.put_object.assert_called_once_with("b", "dir/key.txt", contents=body)
