"""Module to extract a contiguous page range into a new PDF document"""

from datetime import datetime, timezone
from typing import Optional

from ..config.app import AppConfig
from ..middleware.exceptions import ExtractionFailedError
from ..middleware.logging import logger, logging_middleware
from ..models.domain import PageRange, ResultDocument
from ..utils.naming import extraction_file_name, extraction_title
from .document import DocumentModel
from .output import apply_metadata, copy_pages, new_output, save_output
from .progress import ProgressCallback, ProgressTracker


class PageExtractor:
    """Builds a new document out of a page range of one source document."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

    @logging_middleware
    def extract(
        self,
        document: DocumentModel,
        page_range: PageRange,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ResultDocument:
        """
        Extract pages ``start..end`` (1-based, inclusive) of a document.

        Args:
            document (DocumentModel): The parsed source document.
            page_range (PageRange): The pages to keep.
            on_progress (ProgressCallback, optional): Receives (percent, message).

        Returns:
            ResultDocument: A new document with exactly the requested pages.

        Raises:
            InvalidPageRangeError: If the range does not fit the document.
            ExtractionFailedError: If copying or saving pages fails.
        """
        progress = ProgressTracker(on_progress, "extract")
        progress.report(10, "Reading source document...")

        # never clamp, a bad range is the caller's error
        page_range.validate_against(document.page_count)

        try:
            progress.report(30, "Creating new document...")
            output = new_output()

            progress.report(50, "Copying selected pages...")
            copied = copy_pages(output, document, page_range.indices())

            progress.report(80, "Finalizing document...")
            created = datetime.now(timezone.utc)
            apply_metadata(
                output,
                title=extraction_title(
                    document.name, page_range.start_page, page_range.end_page
                ),
                producer=self.config.producer,
                created=created,
            )

            progress.report(95, "Saving document...")
            data = save_output(output)
        except Exception as e:
            raise ExtractionFailedError(
                cause=e,
                details={"name": document.name, "range": page_range.label},
            ) from e

        result = ResultDocument(
            data=data,
            page_count=copied,
            file_name=extraction_file_name(
                document.name, page_range.start_page, page_range.end_page
            ),
            source_files=[document.name] if document.name else [],
            original_pages=page_range.label,
            created=created,
        )
        progress.report(100, "Done!")

        logger.info(
            "PDF extraction complete",
            extra={
                "file_name": document.name,
                "range": page_range.label,
                "page_count": result.page_count,
                "size_bytes": result.size_bytes,
            },
        )
        return result
