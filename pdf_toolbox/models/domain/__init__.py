"""Domain models for the PDF Toolbox."""

from .document import ResultDocument
from .enums import RenderEventType, RenderState
from .events import FileListChanged, FileListEntry, PageRangeChanged, RenderEvent
from .file_entry import FileEntry, FileRecord
from .page import PageGeometry
from .page_range import PageRange
from .render_task import RenderTask

__all__ = [
    "RenderState",
    "RenderEventType",
    "ResultDocument",
    "FileRecord",
    "FileEntry",
    "FileListEntry",
    "FileListChanged",
    "PageRangeChanged",
    "RenderEvent",
    "PageGeometry",
    "PageRange",
    "RenderTask",
]
