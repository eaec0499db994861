"""Domain enums for the PDF Toolbox."""

from enum import Enum


class RenderState(str, Enum):
    """Lifecycle of a single preview render task.

    Inherits from str to ensure JSON serialization works correctly.
    """

    REQUESTED = "requested"
    RENDERING = "rendering"
    COMMITTED = "committed"
    CANCELLED = "cancelled"
    FAILED = "failed"

    def can_transition_to(self, new_state: "RenderState") -> bool:
        """Check if current state can transition to new state."""
        valid_transitions = {
            RenderState.REQUESTED: {
                RenderState.RENDERING,
                RenderState.CANCELLED,
            },
            RenderState.RENDERING: {
                RenderState.COMMITTED,
                RenderState.CANCELLED,
                RenderState.FAILED,
            },
            RenderState.COMMITTED: set(),  # Terminal state
            RenderState.CANCELLED: set(),  # Terminal state
            RenderState.FAILED: set(),  # Terminal state
        }
        return new_state in valid_transitions.get(self, set())

    @property
    def is_terminal(self) -> bool:
        return self in (
            RenderState.COMMITTED,
            RenderState.CANCELLED,
            RenderState.FAILED,
        )


class RenderEventType(str, Enum):
    """Render-state events exposed to the UI layer."""

    LOADING = "loading"
    PAGE_RENDERED = "page-rendered"
    ERROR = "error"
