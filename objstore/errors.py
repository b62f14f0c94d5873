"""
Exceptions raised by objstore.

Every error is surfaced uncaught to the single handler in
``objstore.cli.main``; components never catch and discard them.
"""
from typing import Any, Sequence


class ObjstoreError(Exception):
    """Base class for all objstore errors."""

    def __init__(self, message: str, **context: Any):
        """Initialize the error.

        Args:
            message: Human-readable error message
            **context: Extra attributes describing the failure
        """
        self.message = message
        self.context = context
        for key, value in context.items():
            if key not in ("message", "context", "args"):
                setattr(self, key, value)
        super().__init__(message)


class UsageError(ObjstoreError):
    """Bad or missing command-line arguments. Printed with the usage banner."""


class UnsupportedProviderError(UsageError):
    def __init__(self, provider: str):
        super().__init__(f"Cloud Provider {provider} is not supported now!",
                         provider=provider)


class UnknownCommandError(UsageError):
    def __init__(self, command: str):
        super().__init__(f"Invalid command - {command}", command=command)


class ArityError(UsageError):
    """Raised when a command gets the wrong number of positional arguments."""

    def __init__(self, command: str, usage: str, received: Sequence[str]):
        super().__init__(f"Usage: {usage}", command=command,
                         received=list(received))


class CommandNotImplementedError(UsageError, NotImplementedError):
    """Raised for commands that are declared but have no implementation."""

    def __init__(self, command: str):
        super().__init__(f"{command} command is not supported now!",
                         command=command)


class MissingCredentialError(ObjstoreError):
    """Raised when a required credential is absent from every source."""

    def __init__(self, key: str):
        super().__init__(
            f"Missing credential {key}: pass -o {key}=..., set it in the "
            f"credentials file or export it in the environment",
            key=key
        )


class PathNotFoundError(ObjstoreError):
    def __init__(self, path: str):
        super().__init__(f"Given file/dir not exists, {path}", path=path)


class TransferError(ObjstoreError):
    """Raised when creating the bucket or uploading a file fails.

    The underlying storage or filesystem error is chained as
    ``__cause__``.
    """
