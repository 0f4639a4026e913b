"""Template import.

Reads an export artifact and re-creates its templates on the server one
at a time, in artifact order.
"""

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from zen_kit.exceptions import FormatError, TemplateCreateError
from zen_kit.export.codec import check_version, parse_artifact
from zen_kit.export.normalize import strip_server_fields
from zen_kit.models.import_result import ImportFailureKind, ImportResult
from zen_kit.protocols import TemplateCreator
from zen_kit.status import FileInput, StatusReporter

logger = logging.getLogger(__name__)

IMPORT_FAILURE_MESSAGE = "Failed to import templates"

CompletionCallback = Callable[[], Awaitable[None] | None]
ProgressCallback = Callable[[int, int, str], None]


class TemplateImporter:
    """Import templates from an export artifact.

    The import is all-or-abort-from-here:

    - a malformed artifact aborts before any create call;
    - templates are created strictly one after another, each create
      awaited before the next template is submitted;
    - the first failed create stops the batch. Templates created before
      it stay on the server and later ones are never sent.

    Busy state and the file input are reset on every exit path, and each
    invocation emits exactly one notification.

    Example:
        >>> async with AsyncClient(config) as client:
        ...     importer = TemplateImporter(client, status)
        ...     file_input.select("templates-export-1700000000000.json")
        ...     result = await importer.import_file(file_input, on_complete=refresh)
        ...     print(f"Imported {result.imported} templates")
    """

    def __init__(
        self,
        creator: TemplateCreator,
        status: StatusReporter | None = None,
    ) -> None:
        """Initialize importer.

        Args:
            creator: Remote create capability (typically AsyncClient)
            status: Busy flag and notification sink (a fresh one if omitted)
        """
        self.creator = creator
        self.status = status or StatusReporter()

    async def import_file(
        self,
        file_input: FileInput,
        on_complete: CompletionCallback | None = None,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> ImportResult:
        """Import the file currently selected in ``file_input``.

        The file is read whole into memory. The selection is cleared when
        the import ends, whatever the outcome.

        Args:
            file_input: File picker holding the selected export file
            on_complete: Called once, only after every template was created
            progress_callback: Optional callback(current, total, message)

        Returns:
            ImportResult describing the outcome
        """
        path = file_input.selected
        if path is None:
            logger.debug("Import requested without a selected file")
            return ImportResult()

        with self.status.track("importing"):
            try:
                try:
                    text = await asyncio.to_thread(path.read_text, encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    return self._fail_malformed(
                        ImportResult(), FormatError(f"Cannot read {path.name}: {e}")
                    )

                return await self._import_text(text, on_complete, progress_callback)
            finally:
                file_input.clear()

    async def import_bytes(
        self,
        data: bytes | str,
        on_complete: CompletionCallback | None = None,
        *,
        progress_callback: ProgressCallback | None = None,
    ) -> ImportResult:
        """Import artifact contents that are already in memory.

        Args:
            data: Artifact contents (UTF-8 bytes or text)
            on_complete: Called once, only after every template was created
            progress_callback: Optional callback(current, total, message)

        Returns:
            ImportResult describing the outcome
        """
        with self.status.track("importing"):
            if isinstance(data, bytes):
                try:
                    text = data.decode("utf-8")
                except UnicodeDecodeError as e:
                    return self._fail_malformed(
                        ImportResult(), FormatError(f"Export file is not UTF-8 text: {e}")
                    )
            else:
                text = data

            return await self._import_text(text, on_complete, progress_callback)

    async def _import_text(
        self,
        text: str,
        on_complete: CompletionCallback | None,
        progress_callback: ProgressCallback | None,
    ) -> ImportResult:
        result = ImportResult()

        try:
            artifact = parse_artifact(text)
            for warning in check_version(artifact):
                logger.warning(warning)
                result.add_warning(warning)

            result.total = artifact.get_template_count()
            await self._create_sequentially(artifact.templates, result, progress_callback)

        except FormatError as e:
            return self._fail_malformed(result, e)

        except TemplateCreateError as e:
            logger.error(
                f"Import aborted at template {e.index + 1}/{result.total} "
                f"after {result.imported} created: {e}"
            )
            result.fail(ImportFailureKind.CREATE_FAILED, str(e), index=e.index)
            self.status.notify(IMPORT_FAILURE_MESSAGE)
            return result

        result.success = True
        logger.info(f"Imported {result.imported} templates")
        self.status.notify(f"Imported {result.imported} templates")

        if on_complete is not None:
            await self._run_completion(on_complete)

        return result

    async def _create_sequentially(
        self,
        records: Sequence[Mapping[str, Any]],
        result: ImportResult,
        progress_callback: ProgressCallback | None,
    ) -> None:
        """Create templates in order, one request in flight at a time.

        Raises:
            TemplateCreateError: On the first failed create
        """
        total = len(records)

        for index, record in enumerate(records):
            payload = strip_server_fields(record)
            name = payload.get("name", "")

            try:
                created = await self.creator.create_template(payload)
            except Exception as e:
                raise TemplateCreateError(
                    f"Failed to create template #{index} {name!r}: {e}", index=index
                ) from e

            result.created.append(created)
            result.imported += 1
            logger.debug(f"Created template {index + 1}/{total}: {name!r}")

            if progress_callback:
                self._report_progress(progress_callback, index + 1, total, f"Imported {name}")

    def _fail_malformed(self, result: ImportResult, error: FormatError) -> ImportResult:
        logger.error(f"Import aborted, malformed export file: {error}")
        result.fail(ImportFailureKind.MALFORMED_ARTIFACT, str(error))
        self.status.notify(IMPORT_FAILURE_MESSAGE)
        return result

    @staticmethod
    def _report_progress(
        progress_callback: ProgressCallback, current: int, total: int, message: str
    ) -> None:
        # Progress errors are only logged; the batch continues.
        try:
            progress_callback(current, total, message)
        except Exception:
            logger.exception(f"Import progress callback failed at {current}/{total}")

    @staticmethod
    async def _run_completion(on_complete: CompletionCallback) -> None:
        # The result is final here; callback errors are only logged.
        try:
            outcome = on_complete()
            if inspect.isawaitable(outcome):
                await outcome
        except Exception:
            logger.exception("Import completion callback failed")
