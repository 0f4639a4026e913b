"""Delivery of export artifacts as downloadable files."""

import logging
import os
import tempfile
import time
from pathlib import Path

logger = logging.getLogger(__name__)

EXPORT_FILENAME_PREFIX = "templates-export-"
EXPORT_FILENAME_SUFFIX = ".json"


def export_filename(timestamp_ms: int | None = None) -> str:
    """Build ``templates-export-<epoch-millis>.json``.

    Example:
        >>> export_filename(1700000000000)
        'templates-export-1700000000000.json'
    """
    if timestamp_ms is None:
        timestamp_ms = time.time_ns() // 1_000_000
    return f"{EXPORT_FILENAME_PREFIX}{timestamp_ms}{EXPORT_FILENAME_SUFFIX}"


class FileDelivery:
    """Writes export artifacts into a download directory.

    Content is written to a temporary file next to the target and moved
    into place once complete, so a failed export never leaves a partial
    file under the final name. The file handle is closed as soon as the
    write finishes.
    """

    def __init__(self, download_dir: str | Path = ".") -> None:
        self.download_dir = Path(download_dir)

    def deliver(self, content: str, filename: str | None = None) -> Path:
        """Write ``content`` as a new download.

        Args:
            content: Serialized artifact
            filename: Target file name (defaults to a timestamped name)

        Returns:
            Path of the delivered file
        """
        self.download_dir.mkdir(parents=True, exist_ok=True)
        target = self.download_dir / (filename or export_filename())

        fd, tmp_name = tempfile.mkstemp(
            prefix=".", suffix=".part", dir=self.download_dir
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, target)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.info(f"Export saved to {target}")
        return target
