"""Unit tests for file naming helpers."""

import unittest
from datetime import datetime

from pdf_toolbox.utils.naming import (
    extraction_file_name,
    extraction_title,
    file_stem,
    format_file_size,
    timestamped_file_name,
)


class TestNaming(unittest.TestCase):
    """Test cases for file names of assembled documents."""

    def test_file_stem(self):
        cases = {
            "report.pdf": "report",
            "REPORT.PDF": "REPORT",
            "archive.pdf.pdf": "archive.pdf",
            "notes.txt": "notes.txt",
            ".pdf": "document",
            "": "document",
            None: "document",
        }
        for name, expected in cases.items():
            with self.subTest(name=name):
                self.assertEqual(expected, file_stem(name))

    def test_extraction_names(self):
        self.assertEqual("report_pages_3-7", extraction_title("report.pdf", 3, 7))
        self.assertEqual("report_pages_3-7.pdf", extraction_file_name("report.pdf", 3, 7))

    def test_timestamped_file_name(self):
        moment = datetime(2024, 1, 2, 9, 5, 7)
        self.assertEqual(
            "merged_20240102_090507.pdf", timestamped_file_name("merged", moment)
        )
        self.assertEqual(
            "report_split_20240102_090507.pdf",
            timestamped_file_name("report", moment, suffix="_split"),
        )


class TestFormatFileSize(unittest.TestCase):
    """Test cases for format_file_size."""

    def test_sizes(self):
        cases = [
            (0, "0 B"),
            (512, "512 B"),
            (1024, "1 KB"),
            (1536, "1.5 KB"),
            (1024 * 1024 * 2, "2 MB"),
            (int(1024**3 * 1.25), "1.25 GB"),
            (1024**4 * 3, "3072 GB"),
        ]
        for size, expected in cases:
            with self.subTest(size=size):
                self.assertEqual(expected, format_file_size(size))


if __name__ == "__main__":
    unittest.main()
