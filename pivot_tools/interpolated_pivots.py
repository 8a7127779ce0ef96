"""Set Interpolated Drawing Pivots - embedded pivots for in-between cels.

Select a run of cels on a drawing node and run the action. The pivots at the
first and last selected frames act as keys: every distinct cel in between gets
an embedded pivot on the straight line between them, one equal step per cel.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Tuple

from .core import (
    APPLY_ON_DRAWING_LAYER,
    APPLY_ON_PARENT_PEG,
    DONT_USE_EMBEDDED_PIVOT,
    FIELD_SCALE,
    FrameRange,
    PivotAssignment,
    PivotPoint,
    build_inbetween_set,
    cel_exposures,
    plan_pivot_assignments,
    scene_aspect_ratio,
)
from .host import DRAWING_NODE_TYPE, HostSession, PivotPreconditionError

logger = logging.getLogger(__name__)

DEFAULT_UNDO_LABEL = "Set Interpolated drawing pivots"
FINISH_FRAMES = ["last", "first"]

MSG_SELECT_DRAWING = "Please select a drawing node before running the script."
MSG_TOO_FEW_CELS = "At least 3 cels need to be selected for the script to work."

# Modes under which the pivot tool would not write to the drawing itself
_REDIRECTED_MODES = (APPLY_ON_PARENT_PEG, DONT_USE_EMBEDDED_PIVOT)


def interpolate_pivots(
    session: HostSession,
    node,
    column,
    frame_range: FrameRange,
    inbetweens: List,
    field_scale: float = FIELD_SCALE
) -> List[PivotAssignment]:
    """
    Commit one interpolated embedded pivot per in-between cel.

    Walks every frame of the range in order and commits a pivot the first
    time each in-between cel shows up. The node's pivot mode is switched to
    apply on the drawing layer while committing. The original mode and the
    current frame (first frame of the range) are restored on every exit path.

    Args:
        session: Host session
        node: Drawing node
        column: Column the cels are read from
        frame_range: Selected frames, boundaries included
        inbetweens: Distinct in-between cels in first-seen order
        field_scale: Pixels per field

    Returns:
        Committed assignments in commit order
    """
    original_mode = session.pivot_mode(node)
    mode_changed = original_mode in _REDIRECTED_MODES
    if mode_changed:
        session.set_pivot_mode(node, APPLY_ON_DRAWING_LAYER)

    try:
        first_pivot = PivotPoint.from_xy(session.pivot(node, frame_range.first_frame))
        last_pivot = PivotPoint.from_xy(session.pivot(node, frame_range.last_frame))
        aspect = scene_aspect_ratio(*session.units_aspect_ratio())

        plan = {
            assignment.cel: assignment
            for assignment in plan_pivot_assignments(
                inbetweens, first_pivot, last_pivot, aspect, field_scale=field_scale
            )
        }
        cel_at = session.cel_reader(column)
        session.select_pivot_tool()

        committed: List[PivotAssignment] = []
        done = set()
        for f in frame_range.frames:
            session.set_current_frame(f)
            session.set_current_drawing(node, f)
            cel = cel_at(f)
            if cel not in plan or cel in done:
                continue

            assignment = replace(plan[cel], frame=f)
            session.commit_pivot_at(assignment.pixel.x, assignment.pixel.y)
            done.add(cel)
            committed.append(assignment)
            logger.debug(
                "[Pivots] cel %s step %d/%d at frame %d -> (%.5f, %.5f)",
                cel, assignment.index, len(plan), f, assignment.pixel.x, assignment.pixel.y,
            )
        return committed
    finally:
        if mode_changed:
            session.set_pivot_mode(node, original_mode)
        session.set_current_frame(frame_range.first_frame)


class SetInterpolatedDrawingPivots:
    """Set embedded pivots on in-between cels from the first and last cels' pivots."""

    CATEGORY = "Pivots/Drawing"
    FUNCTION = "run"
    RETURN_TYPES = ("PIVOT_REPORT",)
    RETURN_NAMES = ("report",)

    @classmethod
    def INPUT_TYPES(cls):
        return {
            "required": {
                "session": ("HOST_SESSION",),
            },
            "optional": {
                "field_scale": ("FLOAT", {"default": FIELD_SCALE, "min": 0.001, "max": 10000.0, "step": 0.00001}),
                "finish_frame": (FINISH_FRAMES,),
                "undo_label": ("STRING", {"default": DEFAULT_UNDO_LABEL}),
                "dry_run": ("BOOLEAN", {"default": False}),
            }
        }

    def check_selection(self, session: HostSession) -> Tuple[Any, Any, FrameRange, List]:
        """Resolve node, column, range and in-betweens, or raise PivotPreconditionError."""
        node = session.selected_node()
        if node is None or session.node_type(node) != DRAWING_NODE_TYPE:
            raise PivotPreconditionError(MSG_SELECT_DRAWING)

        first_frame, num_frames = session.frame_selection()
        if num_frames < 1:
            raise PivotPreconditionError(MSG_TOO_FEW_CELS)
        try:
            frame_range = FrameRange.from_selection(first_frame, num_frames)
        except ValueError as e:
            raise PivotPreconditionError(MSG_TOO_FEW_CELS) from e

        column = session.drawing_column(node)
        inbetweens = build_inbetween_set(session.cel_reader(column), frame_range)
        if not inbetweens:
            raise PivotPreconditionError(MSG_TOO_FEW_CELS)

        return node, column, frame_range, inbetweens

    def preview(
        self,
        session: HostSession,
        node,
        column,
        frame_range: FrameRange,
        inbetweens: List,
        field_scale: float = FIELD_SCALE
    ) -> List[PivotAssignment]:
        """Compute the assignments without touching host state."""
        first_pivot = PivotPoint.from_xy(session.pivot(node, frame_range.first_frame))
        last_pivot = PivotPoint.from_xy(session.pivot(node, frame_range.last_frame))
        aspect = scene_aspect_ratio(*session.units_aspect_ratio())
        exposures = cel_exposures(session.cel_reader(column), frame_range)
        return plan_pivot_assignments(
            inbetweens, first_pivot, last_pivot, aspect,
            exposures=exposures, field_scale=field_scale,
        )

    def run(
        self,
        session: HostSession,
        field_scale: float = FIELD_SCALE,
        finish_frame: str = "last",
        undo_label: str = DEFAULT_UNDO_LABEL,
        dry_run: bool = False
    ):
        """Set interpolated embedded pivots on the selected in-between cels."""
        if finish_frame not in FINISH_FRAMES:
            raise ValueError(f"finish_frame must be one of {FINISH_FRAMES}, got {finish_frame!r}")
        if field_scale <= 0:
            raise ValueError(f"field_scale must be positive, got {field_scale}")

        try:
            node, column, frame_range, inbetweens = self.check_selection(session)
        except PivotPreconditionError as e:
            logger.warning("[Pivots] %s", e)
            session.show_message(str(e))
            return (_report("skipped", str(e)),)

        if dry_run:
            assignments = self.preview(session, node, column, frame_range, inbetweens, field_scale)
            message = f"Planned drawing pivots on {len(assignments)} cels"
            logger.info("[Pivots] %s", message)
            return (_report("planned", message, frame_range, assignments),)

        session.begin_undo_group(undo_label)
        try:
            assignments = interpolate_pivots(
                session, node, column, frame_range, inbetweens, field_scale
            )
            if finish_frame == "last":
                session.set_current_frame(frame_range.last_frame)
        finally:
            session.end_undo_group()

        message = f"Finished setting drawing pivots on {len(assignments)} cels"
        session.trace(message)
        logger.info("[Pivots] %s", message)
        return (_report("done", message, frame_range, assignments),)


def _report(
    status: str,
    message: str,
    frame_range: Optional[FrameRange] = None,
    assignments: List[PivotAssignment] = ()
) -> Dict[str, Any]:
    return {
        "status": status,
        "message": message,
        "first_frame": frame_range.first_frame if frame_range else None,
        "last_frame": frame_range.last_frame if frame_range else None,
        "cels": len(assignments),
        "assignments": [a.to_dict() for a in assignments],
    }


ACTION_CLASS_MAPPINGS = {
    "Pivots_SetInterpolatedDrawingPivots": SetInterpolatedDrawingPivots,
}

ACTION_DISPLAY_NAME_MAPPINGS = {
    "Pivots_SetInterpolatedDrawingPivots": "Set Interpolated Drawing Pivots",
}
