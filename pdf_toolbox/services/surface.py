"""Raster surfaces that receive committed preview renders."""

from typing import Optional, Protocol

from PIL.Image import Image


class RenderSurface(Protocol):
    """Target of committed page renders."""

    def paint(self, image: Image, page_num: int) -> None: ...

    def clear(self) -> None: ...


class ImageSurface:
    """Surface holding the last committed image in memory."""

    def __init__(self) -> None:
        self.image: Optional[Image] = None
        self.page_num: Optional[int] = None
        self.paint_count = 0

    def paint(self, image: Image, page_num: int) -> None:
        self.image = image
        self.page_num = page_num
        self.paint_count += 1

    def clear(self) -> None:
        self.image = None
        self.page_num = None
