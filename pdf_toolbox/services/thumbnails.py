"""Sequential generation of the thumbnail strip."""

from typing import List, Optional

from PIL.Image import Image
from pydantic import BaseModel, ConfigDict, Field

from ..config.app import AppConfig
from ..middleware.exceptions import ThumbnailFailedError
from ..middleware.logging import logger
from ..pdf_processor.render import Rasterizer


class Thumbnail(BaseModel):
    """A small raster preview of one page."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    page_num: int = Field(..., gt=0, description="Page number (1-based)")
    image: Image = Field(..., repr=False, description="Rendered image")


class ThumbnailSet(BaseModel):
    """Outcome of one thumbnail generation run.

    Attributes:
        thumbnails: Rendered thumbnails in page order
        total_pages: Number of pages of the document
        omitted_pages: Trailing pages beyond the thumbnail limit
        failed_pages: Pages whose thumbnail could not be rendered
    """

    thumbnails: List[Thumbnail] = Field(default_factory=list)
    total_pages: int = Field(default=0, ge=0)
    omitted_pages: int = Field(default=0, ge=0)
    failed_pages: List[int] = Field(default_factory=list)


class ThumbnailPipeline:
    """Renders thumbnails one page at a time.

    Thumbnails are produced by a plain loop awaiting each render before the
    next one starts, never by a pool, so two pages of the same document are
    never rasterized at once. A pipeline runs one generation at a time.
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()
        self._active = False

    @property
    def is_running(self) -> bool:
        return self._active

    async def generate(self, rasterizer: Rasterizer, max_count: int) -> ThumbnailSet:
        """Render up to ``min(total_pages, max_count)`` thumbnails.

        A page that fails to render is logged and skipped.

        Raises:
            RuntimeError: If this pipeline is already generating
        """
        if self._active:
            raise RuntimeError("Thumbnail generation is already running")
        self._active = True
        try:
            return await self._generate(rasterizer, max(0, max_count))
        finally:
            self._active = False

    async def _generate(self, rasterizer: Rasterizer, max_count: int) -> ThumbnailSet:
        total = rasterizer.page_count
        shown = min(total, max_count)
        result = ThumbnailSet(total_pages=total, omitted_pages=max(0, total - shown))

        for page_num in range(1, shown + 1):
            try:
                image = await rasterizer.render(page_num - 1, self.config.thumbnail_scale)
            except Exception as e:
                error = ThumbnailFailedError(page_num, cause=e)
                logger.warning(
                    f"Thumbnail {page_num} failed: {e}",
                    extra={"code": error.code, "details": error.details},
                )
                result.failed_pages.append(page_num)
                continue
            result.thumbnails.append(Thumbnail(page_num=page_num, image=image))

        logger.debug(
            "Thumbnails generated",
            extra={
                "count": len(result.thumbnails),
                "failed": result.failed_pages,
                "omitted": result.omitted_pages,
            },
        )
        return result
