"""
Module for resolving provider connection parameters.

Each credential is looked up in the CLI ``-o KEY=VALUE`` overrides, then
the shell-style credentials file (``/etc/openrc`` by default), then the
process environment. The first source holding a non-empty value wins.
"""
import logging
import os
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, Sequence, Union

from dotenv import dotenv_values

from .errors import MissingCredentialError, UnsupportedProviderError
from .models import SUPPORTED_PROVIDERS, TOKEN_PATH, ConnectionParams

logger = logging.getLogger(__name__)

USERNAME_KEY = "OS_USERNAME"
API_KEY_KEY = "OS_PASSWORD"
AUTH_URL_KEY = "OS_AUTH_URL"
TENANT_KEY = "OS_TENANT_NAME"

Lookup = Callable[[str], Optional[str]]


def read_credentials_file(path: Union[str, Path, None]) -> Dict[str, str]:
    """Read ``export KEY=VALUE`` lines from a shell-style env file.

    Args:
        path: Path to the credentials file

    Returns:
        Dictionary of variables, empty if the file does not exist
    """
    if not path or not Path(path).is_file():
        logger.debug(f"Credentials file {path} not found, skipping")
        return {}

    values = dotenv_values(path)
    logger.debug(f"Read {len(values)} variables from {path}")
    return {k: v for k, v in values.items() if v is not None}


def mapping_lookup(source: Mapping[str, str]) -> Lookup:
    """Wrap a mapping as a lookup that treats empty values as absent."""
    return lambda key: source.get(key) or None


def first_value(key: str, lookups: Sequence[Lookup]) -> Optional[str]:
    """Return the first non-empty value for ``key`` across ``lookups``."""
    for lookup in lookups:
        value = lookup(key)
        if value:
            return value
    return None


def token_url(auth_url: str) -> str:
    """Append the keystone token path to an identity URL.

    Args:
        auth_url: Identity service URL

    Returns:
        Token endpoint URL
    """
    return auth_url.rstrip("/") + TOKEN_PATH


class CredentialResolver:
    """Resolves connection parameters from layered sources."""

    def __init__(self, cli_options: Mapping[str, str],
                 config_file: Mapping[str, str],
                 env: Mapping[str, str]):
        """Initialize the resolver.

        Args:
            cli_options: ``-o KEY=VALUE`` overrides, highest precedence
            config_file: Variables parsed from the credentials file
            env: Process environment, lowest precedence
        """
        self.lookups = [
            mapping_lookup(cli_options),
            mapping_lookup(config_file),
            mapping_lookup(env),
        ]

    def lookup(self, key: str) -> Optional[str]:
        return first_value(key, self.lookups)

    def require(self, key: str) -> str:
        value = self.lookup(key)
        if not value:
            raise MissingCredentialError(key)
        return value

    def resolve(self, provider: str) -> ConnectionParams:
        """Build connection parameters for a provider.

        Args:
            provider: Provider name, compared case-insensitively

        Returns:
            ConnectionParams for the provider

        Raises:
            UnsupportedProviderError: If the provider is not supported
            MissingCredentialError: If a required credential is absent
        """
        name = (provider or "").lower()
        if name not in SUPPORTED_PROVIDERS:
            raise UnsupportedProviderError(provider)

        params = ConnectionParams(
            provider=name,
            username=self.require(USERNAME_KEY),
            api_key=self.require(API_KEY_KEY),
            auth_url=token_url(self.require(AUTH_URL_KEY)),
            tenant_name=self.lookup(TENANT_KEY),
        )
        logger.debug(f"Cloud connection params: {params.as_dict()}")
        return params


def resolve(provider: str, cli_options: Mapping[str, str],
            config_file: Mapping[str, str],
            env: Optional[Mapping[str, str]] = None) -> ConnectionParams:
    """Resolve connection parameters; ``env`` defaults to ``os.environ``."""
    if env is None:
        env = os.environ
    return CredentialResolver(cli_options, config_file, env).resolve(provider)
