"""Result document domain model."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class ResultDocument(BaseModel):
    """A newly assembled document produced by extraction or merge.

    The aggregate handed back to the caller. It is independent from the
    sources it was built from and immutable once produced.

    Attributes:
        data: Serialized PDF bytes
        page_count: Number of pages in the result
        file_name: Suggested file name for saving the result
        file_count: Number of source documents (merge only)
        source_files: Names of the source documents in page order
        original_pages: Extracted ``start-end`` range (extraction only)
        created: Assembly timestamp
    """

    model_config = ConfigDict(frozen=True)

    data: bytes = Field(..., repr=False, description="Serialized PDF bytes")
    page_count: int = Field(..., ge=0, description="Number of pages")
    file_name: str = Field(..., description="Suggested file name")
    file_count: int = Field(default=1, ge=1, description="Number of source documents")
    source_files: List[str] = Field(
        default_factory=list, description="Source document names in page order"
    )
    original_pages: Optional[str] = Field(
        default=None, description="Extracted page range as start-end"
    )
    created: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Assembly timestamp",
    )

    @computed_field
    @property
    def size_bytes(self) -> int:
        """Size of the serialized document in bytes."""
        return len(self.data)

    def save(self, directory: Path) -> Path:
        """Write the document into ``directory`` under its file name.

        Args:
            directory: Target directory, created when missing

        Returns:
            Path: The written file
        """
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / self.file_name
        target.write_bytes(self.data)
        return target
