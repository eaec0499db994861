"""
Module to load PDF buffers into a page-addressable document model
"""

from io import BytesIO
from typing import Optional

from pypdf import PageObject, PdfReader
from pypdf.errors import PyPdfError

from ..middleware.exceptions import (
    EmptyInputError,
    MalformedDocumentError,
    PageIndexOutOfRangeError,
)
from ..middleware.logging import logger
from ..models.domain import PageGeometry

# metadata keys reported by DocumentModel.info
INFO_KEYS = {
    "title": "/Title",
    "author": "/Author",
    "creator": "/Creator",
    "producer": "/Producer",
    "creation_date": "/CreationDate",
    "modification_date": "/ModDate",
}


class PageHandle:
    """Opaque handle of one page of a DocumentModel."""

    __slots__ = ("_page", "index")

    def __init__(self, page: PageObject, index: int) -> None:
        self._page = page
        self.index = index

    @property
    def page(self) -> PageObject:
        """The underlying page object, used to copy the page into an output."""
        return self._page

    def geometry(self) -> PageGeometry:
        return get_page_geometry(self.index + 1, self._page)


class DocumentModel:
    """Parsed, immutable representation of a PDF buffer."""

    def __init__(self, reader: PdfReader, page_count: int, name: Optional[str]):
        self._reader = reader
        self._page_count = page_count
        self.name = name

    @classmethod
    def load(cls, buffer: bytes, name: Optional[str] = None) -> "DocumentModel":
        """
        Parse a PDF buffer.

        Args:
            buffer (bytes): The raw document bytes.
            name (str, optional): Display name used in logs and errors.

        Returns:
            DocumentModel: The parsed document.

        Raises:
            EmptyInputError: If the buffer has zero length.
            MalformedDocumentError: If the buffer is not a well-formed PDF.
        """
        if not buffer:
            raise EmptyInputError(details={"name": name})

        try:
            reader = PdfReader(BytesIO(bytes(buffer)))
            if reader.is_encrypted:
                raise MalformedDocumentError(
                    "Encrypted PDF files are not supported",
                    code="ENCRYPTED_PDF",
                    details={"name": name},
                )
            # walking the page tree surfaces broken page trees at load time
            page_count = len(reader.pages)
        except MalformedDocumentError:
            raise
        except Exception as e:
            raise MalformedDocumentError(
                f"Failed to parse PDF: {e}",
                details={"name": name, "error": e.__class__.__name__},
            ) from e

        logger.debug(
            "Loaded PDF document",
            extra={"file_name": name, "page_count": page_count, "size": len(buffer)},
        )
        return cls(reader, page_count, name)

    @property
    def page_count(self) -> int:
        return self._page_count

    def get_page(self, index: int) -> PageHandle:
        """
        Get the handle of a page.

        Args:
            index (int): 0-based page index.

        Returns:
            PageHandle: The page handle.

        Raises:
            PageIndexOutOfRangeError: If index is not in [0, page_count).
        """
        if not 0 <= index < self._page_count:
            raise PageIndexOutOfRangeError(index=index, page_count=self._page_count)
        return PageHandle(self._reader.pages[index], index)

    def geometry(self, index: int) -> PageGeometry:
        return self.get_page(index).geometry()

    @property
    def info(self) -> dict:
        """Document metadata, missing or unreadable entries are None."""
        try:
            meta = self._reader.metadata or {}
        except PyPdfError:
            meta = {}
        return {
            key: (str(meta[pdf_key]) if pdf_key in meta else None)
            for key, pdf_key in INFO_KEYS.items()
        }


def _box(box) -> tuple[float, float, float, float]:
    return tuple(float(v) for v in (box.left, box.bottom, box.right, box.top))


def get_page_geometry(number: int, page: PageObject) -> PageGeometry:
    """
    Extract geometry from a PDF page.

    Args:
        number (int): 1-based page number.
        page (PageObject): The PDF page object.

    Returns:
        PageGeometry: The page size, rotation and boxes.
    """
    mediabox = page.mediabox
    return PageGeometry(
        number=number,
        width=float(mediabox.width),
        height=float(mediabox.height),
        rotation=page.rotation,
        mediabox=_box(mediabox),
        cropbox=_box(page.cropbox),
        bleedbox=_box(page.bleedbox),
        trimbox=_box(page.trimbox),
        artbox=_box(page.artbox),
    )
