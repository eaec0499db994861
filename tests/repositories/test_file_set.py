"""Unit tests for the ordered merge input set."""

import unittest

from pdf_toolbox.models.domain import FileRecord
from pdf_toolbox.repositories.file_set import OrderedFileSet


class TestOrderedFileSet(unittest.TestCase):
    """Test cases for OrderedFileSet."""

    def setUp(self):
        """Set up test fixtures."""
        self.file_set = OrderedFileSet()
        self.entries = [
            self.file_set.add(
                FileRecord.from_bytes(f"{name}.pdf", b"%PDF-" + name.encode()),
                page_count=count,
            )
            for name, count in [("a", 1), ("b", 2), ("c", 3), ("d", 4)]
        ]

    def names(self):
        return [e.name for e in self.file_set]

    def positions(self):
        return [e.position for e in self.file_set]

    def test_add_appends(self):
        """Test entries are appended in insertion order."""
        self.assertEqual(["a.pdf", "b.pdf", "c.pdf", "d.pdf"], self.names())
        self.assertEqual([0, 1, 2, 3], self.positions())
        self.assertEqual(4, len(self.file_set))
        self.assertEqual(4, len({e.id for e in self.entries}))

    def test_add_keeps_file_details(self):
        """Test entry fields copied from the record."""
        entry = self.entries[1]
        self.assertEqual(len(b"%PDF-b"), entry.size)
        self.assertEqual(b"%PDF-b", entry.data)
        self.assertEqual(2, entry.page_count)

    def test_remove_second_of_four(self):
        """Test removing an entry re-densifies positions."""
        # Act
        removed = self.file_set.remove(self.entries[1].id)

        # Assert
        self.assertEqual("b.pdf", removed.name)
        self.assertEqual(["a.pdf", "c.pdf", "d.pdf"], self.names())
        self.assertEqual([0, 1, 2], self.positions())
        self.assertEqual(
            [self.entries[0].id, self.entries[2].id, self.entries[3].id],
            [e.id for e in self.file_set],
        )

    def test_remove_unknown_id(self):
        """Test removing an unknown id is a no-op."""
        self.assertIsNone(self.file_set.remove("missing"))
        self.assertEqual(4, len(self.file_set))

    def test_reorder_forward(self):
        """Test moving the first entry to the third position."""
        self.file_set.reorder(0, 2)
        self.assertEqual(["b.pdf", "c.pdf", "a.pdf", "d.pdf"], self.names())
        self.assertEqual([0, 1, 2, 3], self.positions())

    def test_reorder_backward(self):
        """Test moving the last entry to the front."""
        self.file_set.reorder(3, 0)
        self.assertEqual(["d.pdf", "a.pdf", "b.pdf", "c.pdf"], self.names())
        self.assertEqual([0, 1, 2, 3], self.positions())

    def test_reorder_identity(self):
        """Test reordering onto the same index."""
        ids = [e.id for e in self.file_set]
        self.file_set.reorder(2, 2)
        self.assertEqual(ids, [e.id for e in self.file_set])
        self.assertEqual([0, 1, 2, 3], self.positions())

    def test_reorder_out_of_range(self):
        """Test invalid indices leave the set untouched."""
        for from_index, to_index in [(-1, 0), (0, 4), (4, 0)]:
            with self.assertRaises(IndexError):
                self.file_set.reorder(from_index, to_index)
        self.assertEqual(["a.pdf", "b.pdf", "c.pdf", "d.pdf"], self.names())

    def test_ids_are_stable(self):
        """Test ids survive remove and reorder."""
        ids = {e.name: e.id for e in self.file_set}
        self.file_set.reorder(0, 3)
        self.file_set.remove(ids["c.pdf"])
        self.assertEqual(ids["a.pdf"], self.file_set.get(ids["a.pdf"]).id)
        self.assertEqual(["b.pdf", "d.pdf", "a.pdf"], self.names())

    def test_add_after_remove(self):
        """Test a new entry goes after the remaining ones."""
        self.file_set.remove(self.entries[0].id)
        entry = self.file_set.add(FileRecord.from_bytes("e.pdf", b"%PDF-e"))
        self.assertEqual(3, entry.position)
        self.assertIsNone(entry.page_count)
        self.assertEqual([0, 1, 2, 3], self.positions())

    def test_total_pages_and_snapshot(self):
        """Test the file-list-changed snapshot."""
        # Act
        self.file_set.set_page_count(self.entries[0].id, 5)
        snapshot = self.file_set.snapshot()

        # Assert
        self.assertEqual(14, snapshot.total_pages)
        self.assertEqual([0, 1, 2, 3], [e.position for e in snapshot.entries])
        self.assertEqual(self.entries[0].id, snapshot.entries[0].id)

    def test_clear(self):
        """Test clearing the set."""
        self.file_set.clear()
        self.assertEqual(0, len(self.file_set))
        self.assertEqual(0, self.file_set.total_pages)


if __name__ == "__main__":
    unittest.main()
