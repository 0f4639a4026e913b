"""Busy flags, notifications and file-input state for the import/export UI.

Nothing here has business logic: the pipeline only reports through it,
and the invoking UI reads it to disable controls and swap labels.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Literal

from .exceptions import FormatError

logger = logging.getLogger(__name__)

BusyFlag = Literal["exporting", "importing"]

IMPORT_FILE_EXTENSION = ".json"


class StatusReporter:
    """Observable state of the import/export controls.

    Attributes:
        exporting: True while an export runs
        importing: True while an import runs

    Example:
        >>> messages = []
        >>> status = StatusReporter(sink=messages.append)
        >>> with status.track("exporting"):
        ...     status.exporting
        True
        >>> status.exporting
        False
    """

    def __init__(self, sink: Callable[[str], None] | None = None) -> None:
        """Initialize the reporter.

        Args:
            sink: Receives every user-facing notification (e.g. a toast).
                Defaults to logging the message.
        """
        self.exporting = False
        self.importing = False
        self._sink = sink

    def notify(self, message: str) -> None:
        """Show a user-facing notification."""
        if self._sink is None:
            logger.info(message)
            return
        self._sink(message)

    @contextmanager
    def track(self, flag: BusyFlag) -> Iterator[None]:
        """Hold a busy flag for the duration of the block.

        The flag is cleared on every exit path, including exceptions.
        """
        setattr(self, flag, True)
        try:
            yield
        finally:
            setattr(self, flag, False)

    @property
    def busy(self) -> bool:
        return self.exporting or self.importing


class FileInput:
    """The file picker control used to choose an import file.

    Only ``.json`` files can be selected. The importer clears the
    selection once a batch ends so a stale file is never reused.
    """

    accept = IMPORT_FILE_EXTENSION

    def __init__(self) -> None:
        self.selected: Path | None = None

    def select(self, path: str | Path) -> Path:
        """Select a file to import.

        Raises:
            FormatError: If the file does not have a .json extension
        """
        path = Path(path)
        if path.suffix.lower() != self.accept:
            raise FormatError(f"Only {self.accept} files can be imported: {path.name}")
        self.selected = path
        return path

    def clear(self) -> None:
        self.selected = None

    @property
    def is_empty(self) -> bool:
        return self.selected is None
