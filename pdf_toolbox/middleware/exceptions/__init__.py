"""Exception handling for the PDF Toolbox."""

from typing import Any, Dict, Optional


class PDFToolboxError(Exception):
    """Base exception for all PDF Toolbox errors."""

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}


from .business import (
    EmptyInputError,
    InsufficientInputsError,
    InvalidPageRangeError,
    MalformedDocumentError,
    PageIndexOutOfRangeError,
)
from .processing import ExtractionFailedError, MergeFailedError, ProcessingError
from .render import RenderFailedError, ThumbnailFailedError

__all__ = [
    # Base
    "PDFToolboxError",
    # Input Errors
    "EmptyInputError",
    "InsufficientInputsError",
    "InvalidPageRangeError",
    "MalformedDocumentError",
    "PageIndexOutOfRangeError",
    # Assembly Errors
    "ProcessingError",
    "ExtractionFailedError",
    "MergeFailedError",
    # Preview Errors
    "RenderFailedError",
    "ThumbnailFailedError",
]
