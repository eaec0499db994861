"""Module to build and serialize assembled PDF documents"""

from datetime import datetime, timezone
from io import BytesIO

from pypdf import PdfWriter

from .document import DocumentModel


def new_output() -> PdfWriter:
    """Create an empty output document."""
    return PdfWriter()


def copy_pages(output: PdfWriter, document: DocumentModel, indices) -> int:
    """
    Copy pages of a document into the output, in the given order.

    Page content and the resources it references (fonts, images, forms) are
    cloned into the output, so the source can be released afterwards.

    Args:
        output (PdfWriter): The output document.
        document (DocumentModel): The source document.
        indices (Iterable[int]): 0-based page indices to copy.

    Returns:
        int: Number of copied pages.
    """
    copied = 0
    for index in indices:
        output.add_page(document.get_page(index).page)
        copied += 1
    return copied


def pdf_date(moment: datetime) -> str:
    """Format a timestamp as a PDF date string (D:YYYYMMDDHHmmSS+HH'mm')."""
    offset = moment.strftime("%z") or "+0000"
    return f"D:{moment.strftime('%Y%m%d%H%M%S')}{offset[:3]}'{offset[3:]}'"


def apply_metadata(
    output: PdfWriter, title: str, producer: str, created: datetime
) -> None:
    """Set title, creator/producer tags and creation date of the output."""
    stamp = pdf_date(created.astimezone(timezone.utc))
    output.add_metadata(
        {
            "/Title": title,
            "/Creator": producer,
            "/Producer": producer,
            "/CreationDate": stamp,
            "/ModDate": stamp,
        }
    )


def save_output(output: PdfWriter) -> bytes:
    """Serialize the output document to bytes."""
    buffer = BytesIO()
    output.write(buffer)
    output.close()
    return buffer.getvalue()
