"""
Module for expanding a local path into the files to upload.
"""
import logging
from pathlib import Path
from typing import List, Union

from .errors import PathNotFoundError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class FileScanner:
    """Expands a file or directory into a flat list of upload units."""

    def __init__(self, pattern: str = "**/*", include_hidden: bool = False):
        """Initialize the file scanner.

        Args:
            pattern: Glob pattern applied below a directory root
            include_hidden: Whether dot-files and dot-directories are kept
        """
        self.pattern = pattern
        self.include_hidden = include_hidden

    def scan(self, path: PathLike) -> List[str]:
        """Enumerate the upload units for a local path.

        A regular file yields itself, exactly as given. A directory yields
        every file below it as a POSIX path relative to the directory, in
        sorted order.

        Args:
            path: Local file or directory

        Returns:
            List of upload units

        Raises:
            PathNotFoundError: If the path does not exist
        """
        root = Path(path)
        if not root.exists():
            raise PathNotFoundError(str(path))

        if not root.is_dir():
            return [str(path)]

        units = sorted(
            self.get_relative_path(p, root).as_posix()
            for p in self.scan_folder(root)
        )
        logger.debug(f"Found {len(units)} files under {root}")
        return units

    def scan_folder(self, folder: Path) -> List[Path]:
        """Scan a folder for files matching the scanner pattern.

        Args:
            folder: Path to the folder to scan

        Returns:
            List of file paths found
        """
        return [
            p for p in folder.glob(self.pattern)
            if p.is_file() and (self.include_hidden or not self._is_hidden(p, folder))
        ]

    def get_relative_path(self, file_path: Path, base_path: Path) -> Path:
        """Get the relative path of a file from a base path.

        Args:
            file_path: Path to the file
            base_path: Base path to make relative to

        Returns:
            Relative path from base_path to file_path
        """
        return file_path.relative_to(base_path)

    def _is_hidden(self, file_path: Path, base_path: Path) -> bool:
        return any(part.startswith(".")
                   for part in self.get_relative_path(file_path, base_path).parts)


def enumerate_path(path: PathLike) -> List[str]:
    """Return the upload units for ``path`` using the default scanner."""
    return FileScanner().scan(path)


def unit_path(local_path: PathLike, unit: str) -> Path:
    """Locate the file behind an upload unit produced for ``local_path``."""
    root = Path(local_path)
    return root / unit if root.is_dir() else Path(unit)
