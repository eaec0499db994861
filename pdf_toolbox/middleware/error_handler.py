import uuid
from collections import deque
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Deque, Dict, List, Optional

from aws_lambda_powertools.logging import Logger
from pydantic import BaseModel, Field, ValidationError

from ..config.app import AppConfig
from .exceptions import (
    EmptyInputError,
    ExtractionFailedError,
    InsufficientInputsError,
    InvalidPageRangeError,
    MalformedDocumentError,
    MergeFailedError,
    PageIndexOutOfRangeError,
    PDFToolboxError,
    RenderFailedError,
    ThumbnailFailedError,
)

logger = Logger(service="pdf-toolbox")


class ErrorCode(Enum):
    # Input errors
    VALIDATION_INVALID_INPUT = "VALIDATION_INVALID_INPUT"
    EMPTY_INPUT = "EMPTY_INPUT"
    INVALID_PDF = "INVALID_PDF"
    PAGE_INDEX_OUT_OF_RANGE = "PAGE_INDEX_OUT_OF_RANGE"
    INVALID_PAGE_RANGE = "INVALID_PAGE_RANGE"
    INSUFFICIENT_INPUTS = "INSUFFICIENT_INPUTS"

    # Assembly errors
    EXTRACTION_FAILED = "EXTRACTION_FAILED"
    MERGE_FAILED = "MERGE_FAILED"

    # Preview errors
    RENDER_FAILED = "RENDER_FAILED"
    THUMBNAIL_FAILED = "THUMBNAIL_FAILED"

    # System errors
    MEMORY_ERROR = "MEMORY_ERROR"
    SYSTEM_INTERNAL_ERROR = "SYSTEM_INTERNAL_ERROR"

    @property
    def default_message(self) -> str:
        messages: Dict["ErrorCode", str] = {
            ErrorCode.VALIDATION_INVALID_INPUT: "Invalid input parameters",
            ErrorCode.EMPTY_INPUT: "The file is empty",
            ErrorCode.INVALID_PDF: "Failed to parse the PDF file, check whether it is damaged",
            ErrorCode.PAGE_INDEX_OUT_OF_RANGE: "The page does not exist",
            ErrorCode.INVALID_PAGE_RANGE: "The page range is not valid for this document",
            ErrorCode.INSUFFICIENT_INPUTS: "At least 2 PDF files are required to merge",
            ErrorCode.EXTRACTION_FAILED: "An error occurred while extracting pages",
            ErrorCode.MERGE_FAILED: "An error occurred while merging documents",
            ErrorCode.RENDER_FAILED: "Page preview failed, the result can still be saved",
            ErrorCode.THUMBNAIL_FAILED: "A thumbnail could not be generated",
            ErrorCode.MEMORY_ERROR: "Not enough memory, try smaller files",
            ErrorCode.SYSTEM_INTERNAL_ERROR: "An unexpected error occurred",
        }
        return messages[self]

    @classmethod
    def from_exception(cls, e: Exception) -> "ErrorCode":
        """Map exceptions to error codes."""
        mappings: Dict[type, "ErrorCode"] = {
            ValidationError: ErrorCode.VALIDATION_INVALID_INPUT,
            EmptyInputError: ErrorCode.EMPTY_INPUT,
            MalformedDocumentError: ErrorCode.INVALID_PDF,
            PageIndexOutOfRangeError: ErrorCode.PAGE_INDEX_OUT_OF_RANGE,
            InvalidPageRangeError: ErrorCode.INVALID_PAGE_RANGE,
            InsufficientInputsError: ErrorCode.INSUFFICIENT_INPUTS,
            ExtractionFailedError: ErrorCode.EXTRACTION_FAILED,
            MergeFailedError: ErrorCode.MERGE_FAILED,
            RenderFailedError: ErrorCode.RENDER_FAILED,
            ThumbnailFailedError: ErrorCode.THUMBNAIL_FAILED,
            MemoryError: ErrorCode.MEMORY_ERROR,
        }
        return mappings.get(type(e), ErrorCode.SYSTEM_INTERNAL_ERROR)


class ErrorReport(BaseModel):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    level: str = "error"
    operation: str
    message: str
    user_message: str
    code: ErrorCode
    details: Optional[Dict[str, Any]] = None
    context: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(
        cls,
        e: Exception,
        operation: str,
        context: Optional[Dict[str, Any]] = None,
        level: str = "error",
    ) -> "ErrorReport":
        """Create an ErrorReport from an exception."""
        code = ErrorCode.from_exception(e)
        message = str(e) if str(e) else code.default_message
        details = getattr(e, "details", None)

        return cls(
            level=level,
            operation=operation,
            message=message,
            user_message=code.default_message,
            code=code,
            details=details,
            context=context or {},
        )


class ErrorHandler:
    """Logs failures of user operations and keeps a bounded history of them."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()
        self._logs: Deque[ErrorReport] = deque(maxlen=self.config.max_error_log_entries)

    def handle(
        self,
        e: Exception,
        operation: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> ErrorReport:
        """Log an exception and record it.

        Input problems are logged as warnings, everything else as errors.
        """
        # --- PDFToolboxError exceptions (our custom exceptions) ---
        if isinstance(e, PDFToolboxError):
            level = "warning" if isinstance(e, _USER_ERRORS) else "error"
            report = ErrorReport.from_exception(e, operation, context, level)
            getattr(logger, level)(
                f"{e.__class__.__name__}: {str(e)}",
                extra={
                    "operation": operation,
                    "code": e.code,
                    "details": e.details,
                    "context": context,
                },
            )

        # --- Input Validation Errors ---
        elif isinstance(e, ValidationError):
            report = ErrorReport.from_exception(e, operation, context, "warning")
            logger.warning(f"Input validation failed: {e}", extra={"operation": operation})

        # --- Generic Fallback Error ---
        else:
            report = ErrorReport.from_exception(e, operation, context)
            logger.error(
                f"Unhandled error: {e.__class__.__name__}: {str(e)}",
                exc_info=e,
                extra={"operation": operation},
            )

        self._logs.append(report)
        return report

    def get_logs(self, level: Optional[str] = None) -> List[ErrorReport]:
        if level:
            return [r for r in self._logs if r.level == level]
        return list(self._logs)

    def clear_logs(self) -> None:
        self._logs.clear()


_USER_ERRORS = (
    EmptyInputError,
    MalformedDocumentError,
    PageIndexOutOfRangeError,
    InvalidPageRangeError,
    InsufficientInputsError,
    ThumbnailFailedError,
)
