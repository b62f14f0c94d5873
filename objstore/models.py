"""
Module containing data models for objstore.
"""
import time
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

DEFAULT_PROVIDER = "openstack"
SUPPORTED_PROVIDERS = (DEFAULT_PROVIDER,)

# Appended to the resolved keystone v2 identity URL.
TOKEN_PATH = "/tokens"

DEFAULT_CREDENTIALS_FILE = "/etc/openrc"
CREDENTIALS_FILE_ENV = "OBJSTORE_CREDENTIALS_FILE"


class Command(Enum):
    """Object store commands known to the CLI."""
    LIST = "list"
    UPLOAD = "upload"
    DOWNLOAD = "download"
    DELETE = "delete"

    @classmethod
    def names(cls) -> Tuple[str, ...]:
        return tuple(c.value for c in cls)


@dataclass(frozen=True)
class ConnectionParams:
    """Resolved parameters needed to open a storage connection."""
    provider: str
    username: str
    api_key: str
    auth_url: str
    tenant_name: Optional[str] = None

    def __post_init__(self):
        """Validate the connection parameters."""
        for name in ("username", "api_key", "auth_url"):
            if not getattr(self, name):
                raise ValueError(f"{name} cannot be empty")

    def as_dict(self) -> Dict[str, str]:
        """Return the parameters keyed the way storage clients name them."""
        params = {
            "provider": self.provider,
            "openstack_username": self.username,
            "openstack_api_key": self.api_key,
            "openstack_auth_url": self.auth_url,
        }
        if self.tenant_name:
            params["openstack_tenant"] = self.tenant_name
        return params


@dataclass
class TransferSummary:
    """Aggregate statistics of one upload run."""
    bucket: str
    total_files: int = 0
    uploaded_files: int = 0
    total_bytes: int = 0
    started_at: float = field(default_factory=time.monotonic)
    elapsed: Optional[float] = None

    def add(self, size_bytes: int) -> None:
        """Account for one successfully uploaded file.

        Args:
            size_bytes: Size of the uploaded file
        """
        if size_bytes < 0:
            raise ValueError("size_bytes cannot be negative")
        self.uploaded_files += 1
        self.total_bytes += size_bytes

    def finish(self) -> float:
        """Freeze the elapsed time and return it in seconds."""
        if self.elapsed is None:
            self.elapsed = time.monotonic() - self.started_at
        return self.elapsed


@dataclass(frozen=True)
class Options:
    """Parsed command-line options, built once per invocation."""
    command: str
    args: Tuple[str, ...] = ()
    provider: str = DEFAULT_PROVIDER
    overrides: Mapping[str, str] = field(default_factory=dict)
    verbose: bool = False
    credentials_file: str = DEFAULT_CREDENTIALS_FILE

    def __post_init__(self):
        # Copy into read-only containers.
        object.__setattr__(self, "args", tuple(self.args))
        object.__setattr__(self, "overrides",
                           MappingProxyType(dict(self.overrides)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "command": self.command,
            "args": list(self.args),
            "provider": self.provider,
            "overrides": dict(self.overrides),
            "verbose": self.verbose,
            "credentials_file": self.credentials_file,
        }
