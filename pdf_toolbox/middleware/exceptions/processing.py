"""Document assembly exceptions."""

from typing import Any, Dict, Optional

from . import PDFToolboxError


class ProcessingError(PDFToolboxError):
    """Base class for failures of a whole assembly operation.

    The original exception is kept on ``cause`` so callers get a single
    terminal failure without losing what went wrong.
    """

    def __init__(
        self,
        message: str,
        code: str,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = dict(details or {})
        if cause is not None:
            merged.setdefault("cause", f"{cause.__class__.__name__}: {cause}")
        super().__init__(message=message, code=code, details=merged)
        self.cause = cause


class ExtractionFailedError(ProcessingError):
    """Page extraction aborted, no partial output is produced."""

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        message: str = "PDF page extraction failed",
        code: str = "EXTRACTION_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, cause, details)


class MergeFailedError(ProcessingError):
    """Merge aborted, no partial output is produced."""

    def __init__(
        self,
        cause: Optional[BaseException] = None,
        message: str = "PDF merge failed",
        code: str = "MERGE_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, cause, details)
