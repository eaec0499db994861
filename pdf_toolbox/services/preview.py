"""Preview of an assembled document: main page view plus thumbnail strip."""

import asyncio
from typing import Callable, Optional

from ..config.app import AppConfig
from ..middleware.exceptions import PDFToolboxError, RenderFailedError
from ..middleware.logging import logger
from ..models.domain import RenderEvent, RenderEventType, ResultDocument
from ..pdf_processor.render import PdfiumRasterizer, Rasterizer
from .render_scheduler import RenderListener, RenderScheduler
from .surface import ImageSurface, RenderSurface
from .thumbnails import ThumbnailPipeline, ThumbnailSet


class PreviewSession:
    """Binds one result document to a scheduler and a thumbnail pipeline.

    Loading a new result clears the previous one completely: pending and
    in-flight renders are cancelled and thumbnail generation is stopped.
    A failing preview never touches the result it was loaded from.
    """

    def __init__(
        self,
        surface: Optional[RenderSurface] = None,
        max_thumbnails: int = 5,
        show_thumbnails: bool = True,
        config: Optional[AppConfig] = None,
        on_event: Optional[RenderListener] = None,
        rasterizer_factory: Callable[[bytes], Rasterizer] = PdfiumRasterizer,
    ) -> None:
        self.config = config or AppConfig()
        self.surface = surface or ImageSurface()
        self.max_thumbnails = max_thumbnails
        self.show_thumbnails = show_thumbnails
        self._on_event = on_event
        self._rasterizer_factory = rasterizer_factory
        self._pipeline = ThumbnailPipeline(self.config)

        self.scheduler: Optional[RenderScheduler] = None
        self.thumbnails: Optional[ThumbnailSet] = None
        self.last_error: Optional[RenderFailedError] = None
        self._rasterizer: Optional[Rasterizer] = None
        self._thumbnail_task: Optional[asyncio.Task] = None
        self._load_id = 0

    async def load(self, result: ResultDocument) -> bool:
        """Show page 1 of ``result`` and build its thumbnails.

        Returns:
            bool: False if the preview failed or was superseded
        """
        self.clear()
        load_id = self._load_id
        self._emit(RenderEvent(type=RenderEventType.LOADING))
        logger.debug(
            "Loading PDF preview",
            extra={"file_name": result.file_name, "size_bytes": result.size_bytes},
        )

        try:
            rasterizer = self._rasterizer_factory(result.data)
        except PDFToolboxError as e:
            self._fail(RenderFailedError(1, cause=e, message="PDF preview failed to load"))
            return False

        self._rasterizer = rasterizer
        self.scheduler = RenderScheduler(
            rasterizer, self.surface, self.config, on_event=self._emit
        )
        self.scheduler.render_page(1)
        await self.scheduler.wait_idle()
        if load_id != self._load_id:
            return False
        if self.scheduler.last_error is not None:
            self.last_error = self.scheduler.last_error

        if self.show_thumbnails:
            task = asyncio.ensure_future(
                self._pipeline.generate(rasterizer, self.max_thumbnails)
            )
            self._thumbnail_task = task
            try:
                self.thumbnails = await task
            except asyncio.CancelledError:
                if load_id != self._load_id:
                    return False
                raise
            finally:
                if self._thumbnail_task is task:
                    self._thumbnail_task = None

        return self.last_error is None

    def render_page(self, page_num: int) -> bool:
        return self.scheduler is not None and self.scheduler.render_page(page_num)

    def next_page(self) -> bool:
        return self.scheduler is not None and self.scheduler.next_page()

    def previous_page(self) -> bool:
        return self.scheduler is not None and self.scheduler.previous_page()

    def zoom_in(self) -> bool:
        return self.scheduler is not None and self.scheduler.zoom_in()

    def zoom_out(self) -> bool:
        return self.scheduler is not None and self.scheduler.zoom_out()

    def clear(self) -> None:
        """Drop the loaded document and stop all preview work."""
        self._load_id += 1
        if self._thumbnail_task is not None and not self._thumbnail_task.done():
            self._thumbnail_task.cancel()
        self._thumbnail_task = None
        if self.scheduler is not None:
            self.scheduler.cancel()
            self.scheduler = None
        if self._rasterizer is not None:
            self._rasterizer.close()
            self._rasterizer = None
        self.thumbnails = None
        self.last_error = None
        self.surface.clear()

    def info(self) -> dict:
        """Snapshot of the preview state."""
        return {
            "total_pages": self.scheduler.total_pages if self.scheduler else 0,
            "current_page": self.scheduler.active_page if self.scheduler else 0,
            "scale": self.scheduler.scale if self.scheduler else self.config.initial_scale,
            "has_document": self.scheduler is not None,
        }

    def _fail(self, error: RenderFailedError) -> None:
        self.last_error = error
        logger.warning(
            error.message, extra={"code": error.code, "details": error.details}
        )
        self._emit(RenderEvent(type=RenderEventType.ERROR, message=error.message))

    def _emit(self, event: RenderEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            logger.exception("Render event listener failed", extra={"event": event.type})
