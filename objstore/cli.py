"""
Command-line interface for objstore.
"""
import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Mapping, NoReturn, Optional, Sequence

from .commands import dispatch
from .credentials import read_credentials_file, resolve
from .errors import UnsupportedProviderError, UsageError
from .models import (CREDENTIALS_FILE_ENV, DEFAULT_CREDENTIALS_FILE,
                     DEFAULT_PROVIDER, SUPPORTED_PROVIDERS, Command, Options)
from .storage import SwiftStore

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application.

    Args:
        verbose: Whether to enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        Parser whose help text doubles as the usage banner
    """
    commands = "|".join(Command.names())
    parser = argparse.ArgumentParser(
        prog="objstore",
        description="Upload files and directories to cloud object storage",
        usage=(f"objstore [-v] [-h] [-p (OpenStack)] [-o (Key=Value)] "
               f"[-c ({commands})] [args...]")
    )
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="More debugging info")
    parser.add_argument('-p', '--provider', default=DEFAULT_PROVIDER,
                        help="Cloud provider. Defaults to OpenStack(Swift)")
    parser.add_argument('-o', '--options', action='append', default=[],
                        metavar='KEY=VALUE', dest='options',
                        help="Cloud provider options, such as credentials. "
                             "Use Key=Value format")
    parser.add_argument('-c', '--command', default='',
                        help=f"Object store commands ({commands})")
    parser.add_argument('-f', '--credentials-file',
                        help="Shell-style credentials file "
                             f"(default: ${CREDENTIALS_FILE_ENV} or "
                             f"{DEFAULT_CREDENTIALS_FILE})")
    parser.add_argument('args', nargs='*',
                        help="Command arguments")
    return parser


def parse_overrides(pairs: Sequence[str]) -> Dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a dictionary.

    Args:
        pairs: Raw ``-o`` values

    Returns:
        Dictionary of overrides; later values win
    """
    overrides = {}
    for pair in pairs:
        key, sep, value = pair.partition('=')
        if not sep or not key:
            raise UsageError(f"Invalid provider option '{pair}', use Key=Value format")
        overrides[key] = value
    return overrides


def options_from_namespace(ns: argparse.Namespace,
                           environ: Mapping[str, str]) -> Options:
    """Build immutable Options from parsed arguments.

    Args:
        ns: Parsed argparse namespace
        environ: Process environment

    Returns:
        Options for this invocation
    """
    provider = ns.provider.lower()
    if provider not in SUPPORTED_PROVIDERS:
        raise UnsupportedProviderError(provider)

    return Options(
        command=ns.command.lower(),
        args=tuple(ns.args),
        provider=provider,
        overrides=parse_overrides(ns.options),
        verbose=ns.verbose,
        credentials_file=(ns.credentials_file
                          or environ.get(CREDENTIALS_FILE_ENV)
                          or DEFAULT_CREDENTIALS_FILE),
    )


def run(options: Options, environ: Mapping[str, str]) -> Any:
    """Validate the command, connect and execute it.

    Args:
        options: Parsed options
        environ: Process environment used as the last credential fallback
    """
    def open_store() -> SwiftStore:
        params = resolve(
            options.provider,
            options.overrides,
            read_credentials_file(options.credentials_file),
            environ,
        )
        return SwiftStore.from_params(params)

    return dispatch(options.command, options.args, open_store)


def exit_with_error(parser: argparse.ArgumentParser, error: BaseException,
                    verbose: bool, banner: bool) -> NoReturn:
    """Report an error and terminate with exit code 1.

    Args:
        parser: Parser used to print the usage banner
        error: The error to report
        verbose: Whether to include the traceback
        banner: Whether to print the usage banner after the message
    """
    logger.error(f"Some error occurred!! {error}", exc_info=verbose)
    if banner:
        parser.print_help(sys.stderr)
    sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = build_parser()
    ns = parser.parse_intermixed_args(argv)
    setup_logging(ns.verbose)

    try:
        options = options_from_namespace(ns, os.environ)
        logger.debug(f"Options: {options.to_dict()}")
        run(options, os.environ)

    except UsageError as e:
        exit_with_error(parser, e, ns.verbose, banner=True)

    except KeyboardInterrupt as e:
        logger.info("Upload interrupted by user")
        exit_with_error(parser, e, ns.verbose, banner=False)

    except Exception as e:
        exit_with_error(parser, e, ns.verbose, banner=False)


if __name__ == '__main__':
    main()
