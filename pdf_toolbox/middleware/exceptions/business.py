"""Input and validation related exceptions."""

from typing import Any, Dict, Optional

from . import PDFToolboxError


class BusinessError(PDFToolboxError):
    """Base class for errors caused by invalid input."""


class EmptyInputError(BusinessError):
    """Error for zero-length document buffers."""

    def __init__(
        self,
        message: str = "Document buffer is empty",
        code: str = "EMPTY_INPUT",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class MalformedDocumentError(BusinessError):
    """Errors for buffers that are not well-formed PDF documents."""

    def __init__(
        self,
        message: str = "Invalid PDF file",
        code: str = "INVALID_PDF",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)


class PageIndexOutOfRangeError(BusinessError):
    """Error when a 0-based page index is outside of the document."""

    def __init__(
        self,
        index: int,
        page_count: int,
        message: str = "Page index out of range",
        code: str = "PAGE_INDEX_OUT_OF_RANGE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"index": index, "page_count": page_count, **(details or {})},
        )
        self.index = index
        self.page_count = page_count


class InvalidPageRangeError(BusinessError):
    """Error for page ranges that do not fit the document."""

    def __init__(
        self,
        start_page: int,
        end_page: int,
        page_count: int,
        message: Optional[str] = None,
        code: str = "INVALID_PAGE_RANGE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message
            or f"Invalid page range: {start_page}-{end_page} (total pages: {page_count})",
            code=code,
            details={
                "start_page": start_page,
                "end_page": end_page,
                "page_count": page_count,
                **(details or {}),
            },
        )
        self.start_page = start_page
        self.end_page = end_page
        self.page_count = page_count


class InsufficientInputsError(BusinessError):
    """Error when a merge is requested with fewer than two documents."""

    def __init__(
        self,
        file_count: int,
        message: str = "At least 2 PDF files are required to merge",
        code: str = "INSUFFICIENT_INPUTS",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={"file_count": file_count, **(details or {})},
        )
        self.file_count = file_count
