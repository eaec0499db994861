from .document import DocumentModel, PageHandle
from .extract import PageExtractor
from .merge import DocumentMerger
from .progress import ProgressCallback, ProgressTracker
from .render import PdfiumRasterizer, Rasterizer

__all__ = [
    "DocumentModel",
    "PageHandle",
    "PageExtractor",
    "DocumentMerger",
    "ProgressCallback",
    "ProgressTracker",
    "PdfiumRasterizer",
    "Rasterizer",
]
