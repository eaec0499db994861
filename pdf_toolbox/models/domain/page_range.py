"""Page range domain model."""

from pydantic import BaseModel, ConfigDict, Field

from ...middleware.exceptions import InvalidPageRangeError


class PageRange(BaseModel):
    """A 1-based inclusive span of pages within one document.

    Construction only checks that both bounds are integers; whether the range
    fits a particular document is checked by ``validate_against``.
    """

    model_config = ConfigDict(frozen=True)

    start_page: int = Field(..., description="First page (1-based, inclusive)")
    end_page: int = Field(..., description="Last page (1-based, inclusive)")

    @property
    def page_count(self) -> int:
        return self.end_page - self.start_page + 1

    @property
    def label(self) -> str:
        """Range rendered as ``start-end``."""
        return f"{self.start_page}-{self.end_page}"

    def indices(self) -> range:
        """0-based page indices covered by the range, ascending."""
        return range(self.start_page - 1, self.end_page)

    def validate_against(self, total_pages: int) -> "PageRange":
        """Check ``1 <= start <= end <= total_pages``.

        Raises:
            InvalidPageRangeError: If the range does not fit the document
        """
        if not 1 <= self.start_page <= self.end_page <= total_pages:
            raise InvalidPageRangeError(
                start_page=self.start_page,
                end_page=self.end_page,
                page_count=total_pages,
            )
        return self

    @classmethod
    def full(cls, total_pages: int) -> "PageRange":
        """Range covering every page (``1-1`` for an empty document)."""
        return cls(start_page=1, end_page=max(1, total_pages))

    @classmethod
    def clamped(cls, start_page: int, end_page: int, total_pages: int) -> "PageRange":
        """Build a range corrected into the document bounds.

        This is the range selector's input correction: ``start`` is forced
        into ``[1, total]`` and ``end`` into ``[start, total]``.
        """
        total = max(1, total_pages)
        start = max(1, min(start_page, total))
        end = max(start, min(end_page, total))
        return cls(start_page=start, end_page=end)
