"""Render task domain model."""

from pydantic import BaseModel, Field

from .enums import RenderState


class RenderTask(BaseModel):
    """A request to rasterize one page at one scale.

    Attributes:
        target_page: Page number to render (1-based)
        scale: Render scale
        generation: Scheduler generation the task belongs to
        state: Current lifecycle state
    """

    target_page: int = Field(..., gt=0, description="Page number (1-based)")
    scale: float = Field(..., gt=0, description="Render scale")
    generation: int = Field(..., ge=0, description="Scheduler generation")
    state: RenderState = Field(
        default=RenderState.REQUESTED, description="Current lifecycle state"
    )

    def update_state(self, new_state: RenderState) -> None:
        """Update task state if transition is valid.

        Args:
            new_state: New state to transition to

        Raises:
            ValueError: If state transition is invalid
        """
        if not self.state.can_transition_to(new_state):
            raise ValueError(
                f"Invalid state transition from {self.state} to {new_state}"
            )
        self.state = new_state
