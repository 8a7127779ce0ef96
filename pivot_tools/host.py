"""Host session contract used by the pivot actions.

A host binding subclasses HostSession and forwards each call to the animation
package's scripting API. Everything the actions read or mutate in the host goes
through one session object, so the actions run unchanged against a fake
session in tests.
"""

from typing import Any, Callable, Optional, Tuple

from .core.types import Cel

DRAWING_NODE_TYPE = "READ"

# Column attributes of a drawing node
ELEMENT_COLUMN_ATTR = "drawing.element"
TIMING_COLUMN_ATTR = "drawing.customName.timing"


class PivotPreconditionError(ValueError):
    """Selection does not allow the action to run. Reported, never fatal."""


class HostSession:
    """Narrow view of the host application's scripting API."""

    # Selection and timeline
    def selected_node(self) -> Optional[Any]:
        raise NotImplementedError

    def node_type(self, node) -> str:
        raise NotImplementedError

    def frame_selection(self) -> Tuple[int, int]:
        """First selected frame and number of selected frames."""
        raise NotImplementedError

    def set_current_frame(self, frame: int) -> None:
        raise NotImplementedError

    # Columns
    def element_mode(self, node) -> bool:
        raise NotImplementedError

    def linked_column(self, node, attr_name: str) -> Any:
        raise NotImplementedError

    def cel_at(self, column, frame: int) -> Cel:
        raise NotImplementedError

    # Pivots
    def pivot_mode(self, node) -> str:
        raise NotImplementedError

    def set_pivot_mode(self, node, mode: str) -> None:
        raise NotImplementedError

    def pivot(self, node, frame: int) -> Tuple[float, float]:
        """Node pivot at a frame, in fields."""
        raise NotImplementedError

    def units_aspect_ratio(self) -> Tuple[float, float]:
        """Scene units aspect ratio as (x, y)."""
        raise NotImplementedError

    # Drawing tools
    def set_current_drawing(self, node, frame: int) -> None:
        raise NotImplementedError

    def select_pivot_tool(self) -> None:
        raise NotImplementedError

    def commit_pivot_at(self, x: float, y: float) -> None:
        """Press and release the active pivot tool at pixel coordinates."""
        raise NotImplementedError

    # Undo and feedback
    def begin_undo_group(self, label: str) -> None:
        raise NotImplementedError

    def end_undo_group(self) -> None:
        raise NotImplementedError

    def show_message(self, text: str) -> None:
        raise NotImplementedError

    def trace(self, text: str) -> None:
        raise NotImplementedError

    # Helpers built on the contract
    def cel_reader(self, column) -> Callable[[int], Cel]:
        """Bind cel_at to one column."""
        return lambda frame: self.cel_at(column, frame)

    def drawing_column(self, node):
        """Column the node's cels are read from, depending on its element mode."""
        attr_name = ELEMENT_COLUMN_ATTR if self.element_mode(node) else TIMING_COLUMN_ATTR
        return self.linked_column(node, attr_name)


__all__ = [
    "DRAWING_NODE_TYPE",
    "ELEMENT_COLUMN_ATTR",
    "TIMING_COLUMN_ATTR",
    "PivotPreconditionError",
    "HostSession",
]
