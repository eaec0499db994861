"""Application service tying file selection, assembly and preview together."""

from typing import Callable, Iterable, List, Optional

from ..config.app import AppConfig
from ..middleware.error_handler import ErrorHandler
from ..middleware.exceptions import (
    EmptyInputError,
    MalformedDocumentError,
    PDFToolboxError,
)
from ..middleware.logging import logger
from ..models.domain import (
    FileEntry,
    FileListChanged,
    FileRecord,
    PageRange,
    PageRangeChanged,
    ResultDocument,
)
from ..pdf_processor import DocumentMerger, DocumentModel, PageExtractor
from ..pdf_processor.progress import ProgressCallback
from ..repositories.file_set import OrderedFileSet
from .preview import PreviewSession
from .render_scheduler import RenderListener


class ToolboxService:
    """Split and merge workflows of the toolbox.

    Each workflow keeps at most one result. Running an operation again
    replaces the previous result and reloads its preview; a preview failure
    leaves the result available for saving.
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        split_preview: Optional[PreviewSession] = None,
        merge_preview: Optional[PreviewSession] = None,
        on_range_changed: Optional[Callable[[PageRangeChanged], None]] = None,
        on_files_changed: Optional[Callable[[FileListChanged], None]] = None,
        on_render_event: Optional[RenderListener] = None,
    ) -> None:
        """Initialize the toolbox.

        Args:
            config: Application configuration
            split_preview: Preview of extraction results
            merge_preview: Preview of merge results
            on_range_changed: Receives page-range-changed events
            on_files_changed: Receives file-list-changed events
            on_render_event: Receives render-state events of both previews
        """
        self.config = config or AppConfig()
        self.extractor = PageExtractor(self.config)
        self.merger = DocumentMerger(self.config)
        self.error_handler = ErrorHandler(self.config)
        self.split_preview = split_preview or PreviewSession(
            max_thumbnails=self.config.split_max_thumbnails,
            config=self.config,
            on_event=on_render_event,
        )
        self.merge_preview = merge_preview or PreviewSession(
            max_thumbnails=self.config.merge_max_thumbnails,
            config=self.config,
            on_event=on_render_event,
        )
        self._on_range_changed = on_range_changed
        self._on_files_changed = on_files_changed

        self.split_file: Optional[FileRecord] = None
        self.split_page_count: Optional[int] = None
        self.page_range: Optional[PageRange] = None
        self.split_result: Optional[ResultDocument] = None

        self.merge_files = OrderedFileSet()
        self.merge_result: Optional[ResultDocument] = None

    # --- Split workflow ---

    def set_split_file(self, record: FileRecord) -> int:
        """Select the document to extract pages from.

        The whole document becomes the selected range.

        Returns:
            int: Number of pages of the document

        Raises:
            EmptyInputError: If the file is empty
            MalformedDocumentError: If the file is not a readable PDF
        """
        self.clear_split_file()
        try:
            document = DocumentModel.load(record.data, name=record.name)
        except PDFToolboxError as e:
            self.error_handler.handle(e, "parse", context={"name": record.name})
            raise

        self.split_file = record
        self.split_page_count = document.page_count
        self.set_page_range(1, document.page_count)
        return document.page_count

    def set_page_range(self, start_page: int, end_page: int) -> PageRange:
        """Select the range to extract, corrected into the document bounds."""
        total = self.split_page_count or 1
        self.page_range = PageRange.clamped(start_page, end_page, total)
        if self._on_range_changed is not None:
            self._on_range_changed(
                PageRangeChanged(
                    start_page=self.page_range.start_page,
                    end_page=self.page_range.end_page,
                    page_count=self.page_range.page_count,
                )
            )
        return self.page_range

    async def split(
        self, on_progress: Optional[ProgressCallback] = None
    ) -> ResultDocument:
        """Extract the selected range and preview the result.

        Raises:
            ValueError: If no document is selected
            InvalidPageRangeError: If the range does not fit the document
            ExtractionFailedError: If extraction fails
        """
        if self.split_file is None or self.page_range is None:
            raise ValueError("No document selected for extraction")

        page_range = self.page_range
        try:
            document = DocumentModel.load(self.split_file.data, name=self.split_file.name)
            result = self.extractor.extract(document, page_range, on_progress)
        except PDFToolboxError as e:
            self.error_handler.handle(
                e, "split", context={"name": self.split_file.name, "range": page_range.label}
            )
            raise

        self.split_result = result
        await self._load_preview(self.split_preview, result)
        return result

    def reset_split(self) -> None:
        self.split_preview.clear()
        self.split_result = None

    def clear_split_file(self) -> None:
        self.reset_split()
        self.split_file = None
        self.split_page_count = None
        self.page_range = None

    # --- Merge workflow ---

    def add_merge_files(self, records: Iterable[FileRecord]) -> List[FileEntry]:
        """Append files to the merge order.

        A file that cannot be parsed is still listed, with 0 pages; merging
        it later fails the whole merge.
        """
        added = []
        for record in records:
            try:
                page_count = DocumentModel.load(record.data, name=record.name).page_count
            except (EmptyInputError, MalformedDocumentError) as e:
                logger.warning(
                    f"Failed to parse merge input {record.name}: {e}",
                    extra={"file_name": record.name, "code": e.code},
                )
                page_count = 0
            added.append(self.merge_files.add(record, page_count=page_count))
        self._files_changed()
        return added

    def remove_merge_file(self, entry_id: str) -> None:
        self.merge_files.remove(entry_id)
        self._files_changed()

    def reorder_merge_files(self, from_index: int, to_index: int) -> None:
        self.merge_files.reorder(from_index, to_index)
        self._files_changed()

    def clear_merge_files(self) -> None:
        self.merge_files.clear()
        self.reset_merge()
        self._files_changed()

    async def merge(
        self, on_progress: Optional[ProgressCallback] = None
    ) -> ResultDocument:
        """Merge the files in their current order and preview the result.

        Raises:
            InsufficientInputsError: If fewer than 2 files are selected
            MergeFailedError: If any file fails to parse or merging fails
        """
        try:
            result = self.merger.merge(self.merge_files.entries, on_progress)
        except PDFToolboxError as e:
            self.error_handler.handle(
                e, "merge", context={"file_count": len(self.merge_files)}
            )
            raise

        self.merge_result = result
        await self._load_preview(self.merge_preview, result)
        return result

    def reset_merge(self) -> None:
        self.merge_preview.clear()
        self.merge_result = None

    # --- Helpers ---

    async def _load_preview(self, preview: PreviewSession, result: ResultDocument) -> None:
        if not await preview.load(result) and preview.last_error is not None:
            self.error_handler.handle(
                preview.last_error, "preview", context={"file_name": result.file_name}
            )

    def _files_changed(self) -> None:
        if self._on_files_changed is not None:
            self._on_files_changed(self.merge_files.snapshot())
