"""
Module for validating and dispatching object store commands.
"""
import logging
from typing import Any, Callable, Dict, Optional, Sequence

from .errors import ArityError, CommandNotImplementedError, UnknownCommandError
from .models import Command
from .storage import ObjectStore
from .uploader import upload

logger = logging.getLogger(__name__)

StoreFactory = Callable[[], ObjectStore]

UPLOAD_USAGE = "objstore -c upload [file_name] [bucket_name]"


def handle_upload(store: ObjectStore, args: Sequence[str]) -> Any:
    """Handle the upload command.

    Args:
        store: Storage handle
        args: ``[local_path, bucket_name]``
    """
    local_path, bucket = args
    return upload(store, local_path, bucket)


HANDLERS: Dict[Command, Callable[[ObjectStore, Sequence[str]], Any]] = {
    Command.UPLOAD: handle_upload,
}

ARITY: Dict[Command, int] = {
    Command.UPLOAD: 2,
}

USAGE: Dict[Command, str] = {
    Command.UPLOAD: UPLOAD_USAGE,
}


def parse_command(name: str, args: Sequence[str]) -> Command:
    """Validate a command name and its positional arguments.

    Args:
        name: Command name, case-insensitive
        args: Positional arguments for the command

    Returns:
        The matching Command

    Raises:
        UnknownCommandError: If the name is not a known command
        CommandNotImplementedError: If the command has no handler
        ArityError: If the argument count is wrong
    """
    try:
        command = Command((name or "").lower())
    except ValueError:
        raise UnknownCommandError(name) from None

    if command not in HANDLERS:
        raise CommandNotImplementedError(command.value)

    if len(args) != ARITY[command]:
        raise ArityError(command.value, USAGE[command], args)

    return command


def dispatch(name: str, args: Sequence[str],
             open_store: Optional[StoreFactory] = None) -> Any:
    """Validate a command, open the store and run the command.

    The store is only opened once the command and its arguments are
    valid.

    Args:
        name: Command name
        args: Positional arguments for the command
        open_store: Zero-argument callable returning the storage handle

    Returns:
        Whatever the command handler returns
    """
    command = parse_command(name, args)
    if open_store is None:
        raise ValueError(f"{command.value} needs a storage connection")

    store = open_store()
    logger.debug(f"Running {command.value} with args {list(args)}")
    return HANDLERS[command](store, args)
