"""
Object storage handles used by the upload pipeline.
"""
import logging
from abc import ABC, abstractmethod
from typing import BinaryIO, Dict, Optional

from swiftclient.client import ClientException, Connection

from .models import TOKEN_PATH, ConnectionParams

logger = logging.getLogger(__name__)

PUBLIC_READ_ACL = ".r:*,.rlistings"


class ObjectStore(ABC):
    """Abstract storage handle: buckets holding keyed objects."""

    @abstractmethod
    def get_bucket(self, name: str) -> Optional[Dict[str, str]]:
        """Return the bucket's metadata, or None if it does not exist."""

    @abstractmethod
    def create_bucket(self, name: str, public: bool = True) -> None:
        """Create a bucket, optionally readable by anyone."""

    @abstractmethod
    def put_object(self, bucket: str, key: str, body: BinaryIO,
                   public: bool = True) -> Optional[str]:
        """Store ``body`` under ``key`` and return its etag if known."""


class SwiftStore(ObjectStore):
    """OpenStack Swift implementation of ObjectStore."""

    def __init__(self, connection: Connection):
        self.connection = connection

    @classmethod
    def from_params(cls, params: ConnectionParams) -> "SwiftStore":
        """Open a Swift connection authenticated against keystone v2.

        Args:
            params: Resolved connection parameters

        Returns:
            SwiftStore wrapping the connection
        """
        # keystoneclient appends the token path itself.
        authurl = params.auth_url
        if authurl.endswith(TOKEN_PATH):
            authurl = authurl[:-len(TOKEN_PATH)]

        logger.info("Getting the storage connection...")
        connection = Connection(
            authurl=authurl,
            user=params.username,
            key=params.api_key,
            tenant_name=params.tenant_name,
            auth_version="2.0",
            retries=0,
        )
        return cls(connection)

    def get_bucket(self, name: str) -> Optional[Dict[str, str]]:
        try:
            return self.connection.head_container(name)
        except ClientException as e:
            if e.http_status == 404:
                return None
            raise

    def create_bucket(self, name: str, public: bool = True) -> None:
        headers = {"X-Container-Read": PUBLIC_READ_ACL} if public else {}
        self.connection.put_container(name, headers=headers)
        logger.debug(f"Created container {name} (public={public})")

    def put_object(self, bucket: str, key: str, body: BinaryIO,
                   public: bool = True) -> Optional[str]:
        # Swift grants read access per container; ``public`` is honoured
        # by the container ACL set in create_bucket.
        return self.connection.put_object(bucket, key, contents=body)
