"""Module to render PDF pages to images"""

import asyncio
from typing import Protocol

import pypdfium2 as pdfium
from PIL.Image import Image

from ..middleware.exceptions import EmptyInputError, MalformedDocumentError
from ..middleware.logging import logger


class Rasterizer(Protocol):
    """Renders pages of one loaded document."""

    @property
    def page_count(self) -> int: ...

    async def render(self, index: int, scale: float) -> Image:
        """Render the page at 0-based ``index`` at ``scale``."""
        ...

    def close(self) -> None: ...


def render_page(pdf: pdfium.PdfDocument, index: int, scale: float) -> Image:
    """
    Renders a PDF page to an image.

    Args:
        pdf (pdfium.PdfDocument): The loaded PDF document.
        index (int): The 0-based index of the page to render.
        scale (float): The scale factor for rendering.

    Returns:
        Image: The rendered PIL image of the page.
    """

    page = pdf[index]
    try:
        bitmap = page.render(
            scale=scale,
            draw_annots=True,
            prefer_bgrx=True,
        )
        return bitmap.to_pil().convert("RGBA")
    finally:
        page.close()


class PdfiumRasterizer:
    """
    Rasterizer over a finalized PDF buffer.

    PDFium is not safe for concurrent use of one document, so ``render`` does
    the actual rasterization synchronously on the event loop thread. The await
    before it is the only suspension point, which keeps any two renders of the
    same document from ever overlapping.
    """

    def __init__(self, data: bytes) -> None:
        if not data:
            raise EmptyInputError(message="Cannot preview an empty document")
        try:
            self._pdf = pdfium.PdfDocument(data)
        except pdfium.PdfiumError as e:
            raise MalformedDocumentError(f"Failed to open PDF for preview: {e}") from e
        self._page_count = len(self._pdf)

    @property
    def page_count(self) -> int:
        return self._page_count

    async def render(self, index: int, scale: float) -> Image:
        await asyncio.sleep(0)
        logger.debug("Rendering page", extra={"index": index, "scale": scale})
        return render_page(self._pdf, index, scale)

    def get_meta_data(self) -> dict:
        return extract_meta_data(self._pdf)

    def close(self) -> None:
        self._pdf.close()


def extract_meta_data(pdf: pdfium.PdfDocument) -> dict:
    """
    Extract meta-data from the PDF document.

    Args:
        pdf (pdfium.PdfDocument): The PDF document object.

    Returns:
        dict: A dictionary containing the extracted meta-data.
    """
    return {
        "version": pdf.get_version(),
        "page_count": len(pdf),
        "meta": pdf.get_metadata_dict(),
    }
