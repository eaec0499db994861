"""File naming and size formatting helpers."""

import re
from datetime import datetime
from typing import Optional

_PDF_SUFFIX = re.compile(r"\.pdf$", re.IGNORECASE)

_SIZE_UNITS = ["B", "KB", "MB", "GB"]


def file_stem(name: Optional[str]) -> str:
    """Strip a trailing ``.pdf`` from a file name."""
    stem = _PDF_SUFFIX.sub("", name or "")
    return stem or "document"


def extraction_title(name: Optional[str], start_page: int, end_page: int) -> str:
    return f"{file_stem(name)}_pages_{start_page}-{end_page}"


def extraction_file_name(name: Optional[str], start_page: int, end_page: int) -> str:
    """File name of an extracted range, e.g. ``report_pages_3-7.pdf``."""
    return f"{extraction_title(name, start_page, end_page)}.pdf"


def timestamped_file_name(base_name: str, moment: datetime, suffix: str = "") -> str:
    """File name with a local timestamp, e.g. ``merged_20240101_093000.pdf``."""
    return f"{base_name}{suffix}_{moment.strftime('%Y%m%d_%H%M%S')}.pdf"


def format_file_size(size: int) -> str:
    """Human readable size: ``0 B``, ``1.5 KB``, ``2 MB``."""
    if size <= 0:
        return "0 B"
    value = float(size)
    exponent = 0
    while value >= 1024 and exponent < len(_SIZE_UNITS) - 1:
        value /= 1024
        exponent += 1
    return f"{round(value, 2):g} {_SIZE_UNITS[exponent]}"
