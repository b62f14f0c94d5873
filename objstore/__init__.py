from .commands import dispatch, parse_command
from .credentials import CredentialResolver, resolve
from .models import Command, ConnectionParams, Options, TransferSummary
from .scanner import FileScanner, enumerate_path
from .sizes import format_size
from .storage import ObjectStore, SwiftStore
from .uploader import Uploader, upload

__version__ = "0.1.0"

__all__ = [
    "Command",
    "ConnectionParams",
    "CredentialResolver",
    "FileScanner",
    "ObjectStore",
    "Options",
    "SwiftStore",
    "TransferSummary",
    "Uploader",
    "dispatch",
    "enumerate_path",
    "format_size",
    "parse_command",
    "resolve",
    "upload",
]
