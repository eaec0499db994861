"""Module to concatenate several PDF documents into one"""

from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from ..config.app import AppConfig
from ..middleware.exceptions import InsufficientInputsError, MergeFailedError
from ..middleware.logging import logger, logging_middleware
from ..models.domain import FileEntry, FileRecord, ResultDocument
from ..utils.naming import file_stem, timestamped_file_name
from .document import DocumentModel
from .output import apply_metadata, copy_pages, new_output, save_output
from .progress import ProgressCallback, ProgressTracker

MERGED_BASE_NAME = "merged"

type MergeInput = Union[FileEntry, FileRecord]


class DocumentMerger:
    """Concatenates the pages of ordered source documents."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

    @logging_middleware
    def merge(
        self,
        ordered_files: Sequence[MergeInput],
        on_progress: Optional[ProgressCallback] = None,
    ) -> ResultDocument:
        """
        Merge documents in the given order.

        File i's pages, in their original order, precede file i+1's pages.
        A source that fails to parse aborts the whole merge.

        Args:
            ordered_files (Sequence[MergeInput]): Inputs with ``name`` and ``data``.
            on_progress (ProgressCallback, optional): Receives (percent, message).

        Returns:
            ResultDocument: The merged document.

        Raises:
            InsufficientInputsError: If fewer than 2 inputs are given.
            MergeFailedError: If any input fails to parse or copying fails.
        """
        files = list(ordered_files)
        if len(files) < 2:
            raise InsufficientInputsError(file_count=len(files))

        progress = ProgressTracker(on_progress, "merge")
        progress.report(5, "Initializing merged document...")

        output = new_output()
        total_pages = 0
        for i, file in enumerate(files):
            progress.report(
                10 + (i / len(files)) * 80,
                f"processing file {i + 1}/{len(files)}: {file.name}",
            )
            try:
                # the source model is dropped at the end of each iteration
                document = DocumentModel.load(file.data, name=file.name)
                total_pages += copy_pages(output, document, range(document.page_count))
            except Exception as e:
                output.close()
                raise MergeFailedError(
                    cause=e,
                    message=f"PDF merge failed on file {i + 1}/{len(files)}: {file.name}",
                    details={"index": i, "name": file.name},
                ) from e
            finally:
                document = None

            logger.debug(
                "Merged source document",
                extra={"index": i, "file_name": file.name, "total_pages": total_pages},
            )

        progress.report(95, "Saving merged document...")
        created = datetime.now(timezone.utc)
        file_name = timestamped_file_name(MERGED_BASE_NAME, created.astimezone())
        try:
            apply_metadata(
                output,
                title=file_stem(file_name),
                producer=self.config.producer,
                created=created,
            )
            data = save_output(output)
        except Exception as e:
            raise MergeFailedError(cause=e, details={"file_count": len(files)}) from e

        result = ResultDocument(
            data=data,
            page_count=total_pages,
            file_name=file_name,
            file_count=len(files),
            source_files=[f.name for f in files],
            created=created,
        )
        progress.report(100, "Merge complete!")

        logger.info(
            "PDF merge complete",
            extra={
                "file_count": result.file_count,
                "page_count": result.page_count,
                "size_bytes": result.size_bytes,
            },
        )
        return result
