"""Preview rendering exceptions."""

from typing import Any, Dict, Optional

from . import PDFToolboxError


class RenderFailedError(PDFToolboxError):
    """Rasterization of a preview page failed."""

    def __init__(
        self,
        page_num: int,
        cause: Optional[BaseException] = None,
        message: str = "Page rendering failed",
        code: str = "RENDER_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            code=code,
            details={
                "page_num": page_num,
                **({"cause": str(cause)} if cause is not None else {}),
                **(details or {}),
            },
        )
        self.page_num = page_num
        self.cause = cause


class ThumbnailFailedError(RenderFailedError):
    """A single thumbnail could not be rendered. Never fatal."""

    def __init__(
        self,
        page_num: int,
        cause: Optional[BaseException] = None,
        message: str = "Thumbnail rendering failed",
        code: str = "THUMBNAIL_FAILED",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(page_num, cause, message, code, details)
