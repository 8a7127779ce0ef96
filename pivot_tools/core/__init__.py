"""Core pivot utilities for the interpolated drawing pivots action."""

from .types import (
    APPLY_ON_PARENT_PEG,
    DONT_USE_EMBEDDED_PIVOT,
    APPLY_ON_DRAWING_LAYER,
    PIVOT_MODES,
    FrameRange,
    PivotPoint,
    PixelPoint,
    PivotAssignment,
)
from .cels import (
    build_inbetween_set,
    cel_exposures,
)
from .interpolation import (
    FIELD_SCALE,
    scene_aspect_ratio,
    step_positions,
    field_to_pixel,
    plan_pivot_assignments,
)

__all__ = [
    # Types
    "APPLY_ON_PARENT_PEG",
    "DONT_USE_EMBEDDED_PIVOT",
    "APPLY_ON_DRAWING_LAYER",
    "PIVOT_MODES",
    "FrameRange",
    "PivotPoint",
    "PixelPoint",
    "PivotAssignment",
    # Cels
    "build_inbetween_set",
    "cel_exposures",
    # Interpolation
    "FIELD_SCALE",
    "scene_aspect_ratio",
    "step_positions",
    "field_to_pixel",
    "plan_pivot_assignments",
]
