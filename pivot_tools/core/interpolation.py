"""Equal-step pivot interpolation and field-to-pixel conversion."""

from typing import Dict, List, Optional, Sequence

import numpy as np

from .types import Cel, PivotAssignment, PivotPoint, PixelPoint

# Pixels per scene field for the pivot tool
FIELD_SCALE = 208.33333


def scene_aspect_ratio(ratio_x: float, ratio_y: float) -> float:
    """Vertical-to-horizontal unit ratio of the scene."""
    if ratio_x <= 0:
        raise ValueError(f"units aspect ratio X must be positive, got {ratio_x}")
    return ratio_y / ratio_x


def step_positions(first: PivotPoint, last: PivotPoint, count: int) -> np.ndarray:
    """
    Positions of `count` in-betweens spaced evenly between two pivots.

    The segment is split into count + 1 equal steps and row i - 1 holds the
    position at step i, so neither endpoint is ever returned.

    Returns:
        Array of shape (count, 2) with x, y in fields
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    start = first.as_array()
    end = last.as_array()
    steps = np.arange(1, count + 1, dtype=np.float64)[:, np.newaxis]
    return -(start - end) / (count + 1) * steps + start


def field_to_pixel(
    position: PivotPoint,
    aspect: float = 1.0,
    field_scale: float = FIELD_SCALE
) -> PixelPoint:
    """Convert a field-space position to pivot tool pixels, correcting Y for aspect."""
    return PixelPoint(
        x=float(field_scale * position.x),
        y=float(field_scale * position.y * aspect),
    )


def plan_pivot_assignments(
    inbetweens: Sequence[Cel],
    first_pivot: PivotPoint,
    last_pivot: PivotPoint,
    aspect: float = 1.0,
    exposures: Optional[Dict[Cel, List[int]]] = None,
    field_scale: float = FIELD_SCALE
) -> List[PivotAssignment]:
    """
    Assign one interpolated pivot to each in-between cel.

    The step index is the cel's 1-based position in `inbetweens`, not its
    frame, so a cel held for several frames still moves by a single step.

    Args:
        inbetweens: Distinct in-between cels in first-seen order
        first_pivot: Pivot at the first selected frame, in fields
        last_pivot: Pivot at the last selected frame, in fields
        aspect: Scene vertical-to-horizontal unit ratio
        exposures: Optional cel -> frames mapping; the first frame becomes
            the assignment's frame
        field_scale: Pixels per field

    Returns:
        List of PivotAssignment in the same order as `inbetweens`
    """
    positions = step_positions(first_pivot, last_pivot, len(inbetweens))

    assignments = []
    for index, (cel, (x, y)) in enumerate(zip(inbetweens, positions), start=1):
        position = PivotPoint(float(x), float(y))
        frame = exposures[cel][0] if exposures and cel in exposures else None
        assignments.append(PivotAssignment(
            cel=cel,
            index=index,
            frame=frame,
            position=position,
            pixel=field_to_pixel(position, aspect, field_scale),
        ))
    return assignments


__all__ = [
    "FIELD_SCALE",
    "scene_aspect_ratio",
    "step_positions",
    "field_to_pixel",
    "plan_pivot_assignments",
]
