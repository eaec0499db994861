"""In-memory repository of the ordered merge inputs."""

from typing import Iterator, List, Optional

from ..models.domain import FileEntry, FileListChanged, FileListEntry, FileRecord


class OrderedFileSet:
    """User-chosen order of the files to merge.

    Entries keep their ``id`` across every mutation; ``position`` is always a
    dense 0-based permutation of the set and matches list order.
    """

    def __init__(self) -> None:
        self._entries: List[FileEntry] = []

    def add(self, record: FileRecord, page_count: Optional[int] = None) -> FileEntry:
        """Append a file at the end of the order.

        Args:
            record: The selected file.
            page_count: Number of pages when already known.
        Returns:
            The new entry, positioned after every existing entry.
        """
        entry = FileEntry(
            name=record.name,
            size=record.size,
            data=record.data,
            page_count=page_count,
            position=len(self._entries),
        )
        self._entries.append(entry)
        self._check_positions()
        return entry

    def remove(self, entry_id: str) -> Optional[FileEntry]:
        """Remove an entry and close the gap it leaves.

        Unknown ids are ignored.
        """
        index = self._index_of(entry_id)
        if index is None:
            return None
        removed = self._entries.pop(index)
        self._renumber()
        return removed

    def reorder(self, from_index: int, to_index: int) -> None:
        """Move the entry at ``from_index`` to ``to_index``.

        Raises:
            IndexError: If either index is outside the set.
        """
        size = len(self._entries)
        if not (0 <= from_index < size and 0 <= to_index < size):
            raise IndexError(
                f"Cannot move file from {from_index} to {to_index} in a set of {size}"
            )
        if from_index == to_index:
            return
        entry = self._entries.pop(from_index)
        self._entries.insert(to_index, entry)
        self._renumber()

    def set_page_count(self, entry_id: str, page_count: int) -> None:
        index = self._index_of(entry_id)
        if index is None:
            raise KeyError(entry_id)
        self._entries[index].page_count = page_count

    def clear(self) -> None:
        self._entries = []

    def get(self, entry_id: str) -> Optional[FileEntry]:
        index = self._index_of(entry_id)
        return None if index is None else self._entries[index]

    @property
    def entries(self) -> List[FileEntry]:
        """Entries in merge order."""
        return list(self._entries)

    @property
    def total_pages(self) -> int:
        """Sum of the known page counts."""
        return sum(e.page_count or 0 for e in self._entries)

    def snapshot(self) -> FileListChanged:
        """Current order as a file-list-changed event."""
        return FileListChanged(
            entries=[
                FileListEntry(
                    id=e.id,
                    name=e.name,
                    size=e.size,
                    page_count=e.page_count,
                    position=e.position,
                )
                for e in self._entries
            ],
            total_pages=self.total_pages,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FileEntry]:
        return iter(list(self._entries))

    def _index_of(self, entry_id: str) -> Optional[int]:
        for i, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return i
        return None

    def _renumber(self) -> None:
        for i, entry in enumerate(self._entries):
            entry.position = i
        self._check_positions()

    def _check_positions(self) -> None:
        positions = [e.position for e in self._entries]
        if positions != list(range(len(self._entries))):
            raise AssertionError(f"File positions are not dense: {positions}")
