"""Events exposed to the UI layer."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .enums import RenderEventType


class PageRangeChanged(BaseModel):
    """The selected extraction range changed."""

    start_page: int = Field(..., ge=1)
    end_page: int = Field(..., ge=1)
    page_count: int = Field(..., ge=0)


class FileListEntry(BaseModel):
    """Snapshot of one merge input as shown in the file list."""

    id: str
    name: str
    size: int
    page_count: Optional[int] = None
    position: int


class FileListChanged(BaseModel):
    """The merge input list or its order changed."""

    entries: List[FileListEntry] = Field(default_factory=list)
    total_pages: int = Field(default=0, ge=0)


class RenderEvent(BaseModel):
    """Render-state change of a preview.

    ``page_num`` and ``total_pages`` are set for ``page-rendered``,
    ``message`` for ``error``.
    """

    type: RenderEventType
    page_num: Optional[int] = None
    total_pages: Optional[int] = None
    message: Optional[str] = None
