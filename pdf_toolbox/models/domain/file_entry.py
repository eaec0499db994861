"""Input file domain models."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileRecord(BaseModel):
    """A validated file handed over by the file-selection collaborator."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Original file name")
    size: int = Field(..., ge=0, description="File size in bytes")
    mime_type: str = Field(default="application/pdf", description="Declared MIME type")
    data: bytes = Field(..., repr=False, description="Raw file content")

    @classmethod
    def from_bytes(cls, name: str, data: bytes) -> "FileRecord":
        return cls(name=name, size=len(data), data=data)


class FileEntry(BaseModel):
    """An entry of the ordered merge input set.

    Attributes:
        id: Stable identifier generated once on insertion
        name: Display name
        size: File size in bytes
        page_count: Number of pages, None until parsed
        position: 0-based position in the merge order
        added: Insertion timestamp
    """

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    name: str = Field(..., description="Display name")
    size: int = Field(..., ge=0, description="File size in bytes")
    data: bytes = Field(..., repr=False, description="Raw file content")
    page_count: Optional[int] = Field(
        default=None, ge=0, description="Number of pages, None until parsed"
    )
    position: int = Field(..., ge=0, description="0-based merge position")
    added: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Insertion timestamp",
    )
