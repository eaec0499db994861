"""Debounced, cancellable rendering of the main preview page."""

import asyncio
from typing import Callable, Optional

from ..config.app import AppConfig
from ..middleware.exceptions import RenderFailedError
from ..middleware.logging import logger
from ..models.domain import RenderEvent, RenderEventType, RenderState, RenderTask
from ..pdf_processor.render import Rasterizer
from .surface import RenderSurface

type RenderListener = Callable[[RenderEvent], None]


class RenderScheduler:
    """Owns the visible page of one result document.

    Every request bumps ``generation``. A request first waits in the pending
    slot for the debounce window; a newer request replaces the slot instead
    of stacking another timer. Once started, a render commits to the surface
    only if its generation is still the current one when it completes, so
    output of superseded work is never observable.

    Must be driven from the thread running the asyncio event loop.
    """

    def __init__(
        self,
        rasterizer: Rasterizer,
        surface: RenderSurface,
        config: Optional[AppConfig] = None,
        on_event: Optional[RenderListener] = None,
    ) -> None:
        self.config = config or AppConfig()
        self._rasterizer = rasterizer
        self._surface = surface
        self._on_event = on_event

        self.generation = 0
        self.active_page = 0
        self.scale = self.config.initial_scale
        self.last_error: Optional[RenderFailedError] = None

        self._requested_page = 1
        self._pending: Optional[asyncio.TimerHandle] = None
        self._pending_task: Optional[RenderTask] = None
        self._in_flight: Optional[asyncio.Task] = None
        self._current_task: Optional[RenderTask] = None

    @property
    def total_pages(self) -> int:
        return self._rasterizer.page_count

    @property
    def requested_page(self) -> int:
        """Page of the most recent request, committed or not."""
        return self._requested_page

    @property
    def is_idle(self) -> bool:
        return self._pending is None and (
            self._in_flight is None or self._in_flight.done()
        )

    def render_page(self, page_num: int) -> bool:
        """Request a render of ``page_num`` (1-based).

        Pages outside the document are ignored, navigating past either end is
        a normal no-op.

        Returns:
            bool: Whether a render was scheduled
        """
        if not 1 <= page_num <= self.total_pages:
            return False
        self._schedule(page_num)
        return True

    def next_page(self) -> bool:
        return self.render_page(self._requested_page + 1)

    def previous_page(self) -> bool:
        return self.render_page(self._requested_page - 1)

    def zoom_in(self) -> bool:
        self.scale = min(self.scale * self.config.zoom_factor, self.config.max_scale)
        return self.render_page(self._requested_page)

    def zoom_out(self) -> bool:
        self.scale = max(self.scale / self.config.zoom_factor, self.config.min_scale)
        return self.render_page(self._requested_page)

    def cancel(self) -> None:
        """Drop the pending request and invalidate the render in flight.

        Safe to call at any time, never raises and never waits.
        """
        self.generation += 1
        self._supersede()

    async def wait_idle(self) -> None:
        """Wait until nothing is pending or rendering."""
        while True:
            if self._in_flight is not None and not self._in_flight.done():
                await asyncio.wait([self._in_flight])
            elif self._pending is not None:
                await asyncio.sleep(self.config.render_debounce / 2)
            else:
                return

    def _schedule(self, page_num: int) -> None:
        loop = asyncio.get_running_loop()
        self._supersede()
        self.generation += 1

        task = RenderTask(
            target_page=page_num, scale=self.scale, generation=self.generation
        )
        self._requested_page = page_num
        self._pending_task = task
        self._pending = loop.call_later(self.config.render_debounce, self._start, task)

    def _supersede(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        if self._pending_task is not None:
            self._pending_task.update_state(RenderState.CANCELLED)
            self._pending_task = None

        if self._in_flight is not None and not self._in_flight.done():
            self._in_flight.cancel()
            # a task cancelled before its first step never runs its body
            if self._current_task.state == RenderState.REQUESTED:
                self._current_task.update_state(RenderState.CANCELLED)

    def _start(self, task: RenderTask) -> None:
        self._pending = None
        self._pending_task = None
        if task.generation != self.generation or task.state != RenderState.REQUESTED:
            return
        self._current_task = task
        self._in_flight = asyncio.ensure_future(self._run(task))

    async def _run(self, task: RenderTask) -> None:
        task.update_state(RenderState.RENDERING)
        self._emit(
            RenderEvent(
                type=RenderEventType.LOADING,
                page_num=task.target_page,
                total_pages=self.total_pages,
            )
        )

        try:
            image = await self._rasterizer.render(task.target_page - 1, task.scale)
        except asyncio.CancelledError:
            task.update_state(RenderState.CANCELLED)
            logger.debug(
                "Render cancelled",
                extra={"page_num": task.target_page, "generation": task.generation},
            )
            if task.generation == self.generation:
                # cancelled from outside the scheduler, let it propagate
                raise
            return
        except Exception as e:
            if task.generation != self.generation:
                task.update_state(RenderState.CANCELLED)
                return
            task.update_state(RenderState.FAILED)
            self.last_error = RenderFailedError(task.target_page, cause=e)
            logger.warning(
                f"Failed to render page {task.target_page}: {e}",
                extra={"code": self.last_error.code, "details": self.last_error.details},
            )
            self._emit(
                RenderEvent(
                    type=RenderEventType.ERROR,
                    page_num=task.target_page,
                    total_pages=self.total_pages,
                    message=self.last_error.message,
                )
            )
            return

        if task.generation != self.generation:
            task.update_state(RenderState.CANCELLED)
            logger.debug(
                "Discarding stale render",
                extra={"page_num": task.target_page, "generation": task.generation},
            )
            return

        self._surface.paint(image, task.target_page)
        self.active_page = task.target_page
        self.last_error = None
        task.update_state(RenderState.COMMITTED)
        self._emit(
            RenderEvent(
                type=RenderEventType.PAGE_RENDERED,
                page_num=task.target_page,
                total_pages=self.total_pages,
            )
        )

    def _emit(self, event: RenderEvent) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(event)
        except Exception:
            logger.exception("Render event listener failed", extra={"event": event.type})
