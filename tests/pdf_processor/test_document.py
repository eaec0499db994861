"""Unit tests for the PDF document model."""

import unittest

from pdf_toolbox.middleware.exceptions import (
    EmptyInputError,
    MalformedDocumentError,
    PageIndexOutOfRangeError,
)
from pdf_toolbox.pdf_processor.document import DocumentModel
from tests.pdf_factory import make_pdf


class TestDocumentModel(unittest.TestCase):
    """Test cases for DocumentModel."""

    def setUp(self):
        """Set up test fixtures."""
        self.data = make_pdf(3, base_width=200, height=300, title="Quarterly report")

    def test_load_success(self):
        """Test loading a well-formed document."""
        # Act
        document = DocumentModel.load(self.data, name="report.pdf")

        # Assert
        self.assertEqual(3, document.page_count)
        self.assertEqual("report.pdf", document.name)

    def test_geometry(self):
        """Test page geometry of each page."""
        # Arrange
        document = DocumentModel.load(self.data)

        # Act
        geometry = [document.geometry(i) for i in range(document.page_count)]

        # Assert
        self.assertEqual([1, 2, 3], [g.number for g in geometry])
        self.assertEqual([200.0, 201.0, 202.0], [g.width for g in geometry])
        self.assertTrue(all(g.height == 300.0 for g in geometry))
        self.assertEqual(0, geometry[0].rotation)
        self.assertEqual((0.0, 0.0, 200.0, 300.0), geometry[0].mediabox)
        self.assertFalse(geometry[0].is_landscape)

    def test_get_page_out_of_range(self):
        """Test page handles outside of [0, page_count)."""
        # Arrange
        document = DocumentModel.load(self.data)

        # Act & Assert
        for index in (-1, 3, 100):
            with self.assertRaises(PageIndexOutOfRangeError) as ctx:
                document.get_page(index)
            self.assertEqual(index, ctx.exception.index)
            self.assertEqual(3, ctx.exception.details["page_count"])

    def test_get_page_returns_handle(self):
        """Test page handle of a valid index."""
        # Arrange
        document = DocumentModel.load(self.data)

        # Act
        handle = document.get_page(2)

        # Assert
        self.assertEqual(2, handle.index)
        self.assertEqual(202.0, handle.geometry().width)

    def test_load_empty_buffer(self):
        """Test zero-length input."""
        with self.assertRaises(EmptyInputError) as ctx:
            DocumentModel.load(b"", name="empty.pdf")
        self.assertEqual("EMPTY_INPUT", ctx.exception.code)

    def test_load_garbage(self):
        """Test input that is not a PDF."""
        with self.assertRaises(MalformedDocumentError) as ctx:
            DocumentModel.load(b"this is certainly not a pdf document", name="x.pdf")
        self.assertEqual("INVALID_PDF", ctx.exception.code)
        self.assertEqual("x.pdf", ctx.exception.details["name"])

    def test_load_truncated(self):
        """Test a PDF cut short before its trailer."""
        with self.assertRaises(MalformedDocumentError):
            DocumentModel.load(self.data[:60])

    def test_load_encrypted(self):
        """Test encrypted documents are rejected."""
        # Arrange
        data = make_pdf(2, password="secret")

        # Act & Assert
        with self.assertRaises(MalformedDocumentError) as ctx:
            DocumentModel.load(data)
        self.assertEqual("ENCRYPTED_PDF", ctx.exception.code)

    def test_info(self):
        """Test document metadata."""
        # Arrange
        document = DocumentModel.load(self.data)

        # Act
        info = document.info

        # Assert
        self.assertEqual("Quarterly report", info["title"])
        self.assertIsNone(info["author"])
        self.assertIn("creation_date", info)


if __name__ == "__main__":
    unittest.main()
