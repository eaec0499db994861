"""Unit tests for the toolbox application service."""

import unittest

from pdf_toolbox.config.app import AppConfig
from pdf_toolbox.middleware.error_handler import ErrorCode
from pdf_toolbox.middleware.exceptions import (
    InsufficientInputsError,
    MalformedDocumentError,
    MergeFailedError,
)
from pdf_toolbox.models.domain import FileRecord
from pdf_toolbox.services.toolbox import ToolboxService
from tests.pdf_factory import make_pdf, page_widths


class TestToolboxSplit(unittest.IsolatedAsyncioTestCase):
    """Test cases for the extraction workflow."""

    def setUp(self):
        """Set up test fixtures."""
        self.ranges = []
        self.toolbox = ToolboxService(
            AppConfig(render_debounce_ms=0), on_range_changed=self.ranges.append
        )
        self.record = FileRecord.from_bytes("report.pdf", make_pdf(10, base_width=100))

    async def asyncTearDown(self):
        self.toolbox.clear_split_file()

    async def test_select_file_selects_whole_document(self):
        """Test selecting a document for extraction."""
        # Act
        page_count = self.toolbox.set_split_file(self.record)

        # Assert
        self.assertEqual(10, page_count)
        self.assertEqual("1-10", self.toolbox.page_range.label)
        self.assertEqual(10, self.ranges[-1].page_count)

    async def test_range_is_corrected(self):
        """Test the range selector's input correction."""
        # Arrange
        self.toolbox.set_split_file(self.record)

        # Act & Assert
        self.assertEqual("1-10", self.toolbox.set_page_range(0, 50).label)
        self.assertEqual("8-8", self.toolbox.set_page_range(8, 3).label)
        self.assertEqual("10-10", self.toolbox.set_page_range(12, 15).label)
        last = self.ranges[2]
        self.assertEqual((8, 8, 1), (last.start_page, last.end_page, last.page_count))

    async def test_split_produces_result_and_preview(self):
        """Test extracting a range end to end."""
        # Arrange
        self.toolbox.set_split_file(self.record)
        self.toolbox.set_page_range(3, 7)
        progress = []

        # Act
        result = await self.toolbox.split(lambda p, m: progress.append(p))

        # Assert
        self.assertEqual("report_pages_3-7.pdf", result.file_name)
        self.assertEqual([102, 103, 104, 105, 106], page_widths(result.data))
        self.assertIs(result, self.toolbox.split_result)
        self.assertEqual(100, progress[-1])
        self.assertEqual(5, self.toolbox.split_preview.info()["total_pages"])
        self.assertEqual(1, self.toolbox.split_preview.surface.page_num)

    async def test_split_without_file(self):
        """Test splitting before a document is selected."""
        with self.assertRaises(ValueError):
            await self.toolbox.split()

    async def test_malformed_file_is_reported(self):
        """Test selecting a file that is not a PDF."""
        # Act
        with self.assertRaises(MalformedDocumentError):
            self.toolbox.set_split_file(FileRecord.from_bytes("bad.pdf", b"nope"))

        # Assert
        logs = self.toolbox.error_handler.get_logs()
        self.assertEqual(1, len(logs))
        self.assertEqual(ErrorCode.INVALID_PDF, logs[0].code)
        self.assertEqual("warning", logs[0].level)
        self.assertEqual("parse", logs[0].operation)
        self.assertIsNone(self.toolbox.split_file)

    async def test_reset_keeps_selected_file(self):
        """Test resetting the result only."""
        # Arrange
        self.toolbox.set_split_file(self.record)
        await self.toolbox.split()

        # Act
        self.toolbox.reset_split()

        # Assert
        self.assertIsNone(self.toolbox.split_result)
        self.assertIsNotNone(self.toolbox.split_file)
        self.assertFalse(self.toolbox.split_preview.info()["has_document"])


class TestToolboxMerge(unittest.IsolatedAsyncioTestCase):
    """Test cases for the merge workflow."""

    def setUp(self):
        """Set up test fixtures."""
        self.snapshots = []
        self.toolbox = ToolboxService(
            AppConfig(render_debounce_ms=0), on_files_changed=self.snapshots.append
        )
        self.records = [
            FileRecord.from_bytes("a.pdf", make_pdf(2, base_width=100)),
            FileRecord.from_bytes("b.pdf", make_pdf(3, base_width=200)),
        ]

    async def asyncTearDown(self):
        self.toolbox.clear_merge_files()

    async def test_add_files_counts_pages(self):
        """Test adding files publishes the new list."""
        # Act
        entries = self.toolbox.add_merge_files(self.records)

        # Assert
        self.assertEqual([2, 3], [e.page_count for e in entries])
        self.assertEqual(5, self.snapshots[-1].total_pages)
        self.assertEqual(["a.pdf", "b.pdf"], [e.name for e in self.snapshots[-1].entries])

    async def test_unreadable_file_is_listed_with_zero_pages(self):
        """Test adding a file that cannot be parsed."""
        # Act
        entries = self.toolbox.add_merge_files([FileRecord.from_bytes("bad.pdf", b"nope")])

        # Assert
        self.assertEqual(0, entries[0].page_count)
        self.assertEqual(1, len(self.toolbox.merge_files))

    async def test_merge_after_reorder(self):
        """Test merging in the order shown to the user."""
        # Arrange
        self.toolbox.add_merge_files(self.records)
        self.toolbox.reorder_merge_files(1, 0)

        # Act
        result = await self.toolbox.merge()

        # Assert
        self.assertEqual([200, 201, 202, 100, 101], page_widths(result.data))
        self.assertEqual(["b.pdf", "a.pdf"], result.source_files)
        self.assertIs(result, self.toolbox.merge_result)
        self.assertEqual(5, self.toolbox.merge_preview.info()["total_pages"])
        self.assertEqual(5, len(self.toolbox.merge_preview.thumbnails.thumbnails))

    async def test_merge_needs_two_files(self):
        """Test merging a single file."""
        # Arrange
        self.toolbox.add_merge_files(self.records[:1])

        # Act & Assert
        with self.assertRaises(InsufficientInputsError):
            await self.toolbox.merge()
        report = self.toolbox.error_handler.get_logs()[0]
        self.assertEqual(ErrorCode.INSUFFICIENT_INPUTS, report.code)
        self.assertIsNone(self.toolbox.merge_result)

    async def test_merge_with_unreadable_file_fails(self):
        """Test one unreadable input fails the whole merge."""
        # Arrange
        self.toolbox.add_merge_files(
            [self.records[0], FileRecord.from_bytes("bad.pdf", b"nope"), self.records[1]]
        )

        # Act & Assert
        with self.assertRaises(MergeFailedError):
            await self.toolbox.merge()
        report = self.toolbox.error_handler.get_logs("error")[0]
        self.assertEqual(ErrorCode.MERGE_FAILED, report.code)
        self.assertEqual("merge", report.operation)
        self.assertIsNone(self.toolbox.merge_result)

    async def test_remove_and_clear(self):
        """Test removing and clearing merge inputs."""
        # Arrange
        entries = self.toolbox.add_merge_files(self.records)

        # Act
        self.toolbox.remove_merge_file(entries[0].id)

        # Assert
        self.assertEqual(["b.pdf"], [e.name for e in self.snapshots[-1].entries])
        self.assertEqual(0, self.snapshots[-1].entries[0].position)

        self.toolbox.clear_merge_files()
        self.assertEqual([], self.snapshots[-1].entries)


if __name__ == "__main__":
    unittest.main()
