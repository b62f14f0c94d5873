"""
Module for uploading local files and directories to a bucket.
"""
import logging
from pathlib import Path
from typing import Callable, Optional, Union

from .errors import PathNotFoundError, TransferError
from .models import TransferSummary
from .scanner import FileScanner, unit_path
from .sizes import format_size
from .storage import ObjectStore

logger = logging.getLogger(__name__)


class Uploader:
    """Uploads a file or directory tree, one file at a time."""

    def __init__(self, store: ObjectStore,
                 scanner: Optional[FileScanner] = None,
                 out: Callable[[str], None] = print):
        """Initialize the uploader.

        Args:
            store: Storage handle to upload into
            scanner: Scanner used to enumerate directories
            out: Sink for user-facing progress lines
        """
        self.store = store
        self.scanner = scanner or FileScanner()
        self.out = out

    def ensure_bucket(self, bucket: str) -> None:
        """Create the bucket with public read access unless it exists.

        Args:
            bucket: Bucket name
        """
        try:
            if self.store.get_bucket(bucket) is not None:
                logger.debug(f"Bucket {bucket} already exists")
                return
            self.out(f"Creating the bucket: {bucket}")
            self.store.create_bucket(bucket, public=True)
        except Exception as e:
            raise TransferError(f"Could not get or create bucket {bucket}: {e}",
                                bucket=bucket) from e

    def _upload_file(self, path: Path, bucket: str, key: str) -> int:
        """Upload a single file and return its size in bytes."""
        try:
            with open(path, "rb") as body:
                self.store.put_object(bucket, key, body, public=True)
            return path.stat().st_size
        except Exception as e:
            logger.debug(f"Error uploading {path} to {bucket}/{key}: {e}")
            raise TransferError(f"Upload of {key} to {bucket} failed: {e}",
                                bucket=bucket, key=key) from e

    def upload(self, local_path: Union[str, Path], bucket: str) -> TransferSummary:
        """Upload a local file or directory to a bucket.

        Files are uploaded in order and the first failure aborts the run;
        files already uploaded are left in place.

        Args:
            local_path: Local file or directory to upload
            bucket: Destination bucket name

        Returns:
            TransferSummary with the total bytes and elapsed time
        """
        if not Path(local_path).exists():
            raise PathNotFoundError(str(local_path))

        summary = TransferSummary(bucket=bucket)
        self.ensure_bucket(bucket)

        self.out(f"Uploading local file/dir: {local_path} to bucket: {bucket}")
        units = self.scanner.scan(local_path)
        summary.total_files = len(units)

        for idx, unit in enumerate(units, start=1):
            self.out(f"{idx}/{summary.total_files}) Upload: {unit} to {bucket}")
            summary.add(self._upload_file(unit_path(local_path, unit), bucket, unit))

        elapsed = summary.finish()
        self.out(f"\nUpload is completed, total size: "
                 f"{format_size(summary.total_bytes)} took {elapsed:.3f} sec.")
        return summary


def upload(store: ObjectStore, local_path: Union[str, Path], bucket: str,
           out: Callable[[str], None] = print) -> TransferSummary:
    """Upload ``local_path`` into ``bucket`` through ``store``."""
    return Uploader(store, out=out).upload(local_path, bucket)
