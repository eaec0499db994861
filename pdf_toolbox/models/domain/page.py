"""Page domain model."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

type Box = tuple[float, float, float, float]


class PageGeometry(BaseModel):
    """Geometry of a single page of a parsed document.

    Attributes:
        number: Page number (1-based)
        width: Page width in points
        height: Page height in points
        rotation: Page rotation in degrees
    """

    model_config = ConfigDict(frozen=True)

    number: int = Field(..., gt=0, description="Page number (1-based)")
    width: float = Field(..., ge=0, description="Page width in points")
    height: float = Field(..., ge=0, description="Page height in points")
    rotation: int = Field(0, description="Page rotation in degrees (0, 90, 180, 270)")
    mediabox: Optional[Box] = Field(None, description="Media box coordinates")
    cropbox: Optional[Box] = Field(None, description="Crop box coordinates")
    bleedbox: Optional[Box] = Field(None, description="Bleed box coordinates")
    trimbox: Optional[Box] = Field(None, description="Trim box coordinates")
    artbox: Optional[Box] = Field(None, description="Art box coordinates")

    @property
    def is_landscape(self) -> bool:
        """Whether the page displays wider than tall, rotation included."""
        if self.rotation % 180:
            return self.height > self.width
        return self.width > self.height
