"""Cel scanning over a frame range: in-between detection and exposures."""

from typing import Callable, Dict, List

from .types import Cel, FrameRange


def build_inbetween_set(
    cel_at: Callable[[int], Cel],
    frame_range: FrameRange
) -> List[Cel]:
    """
    Collect the distinct in-between cels of a frame range.

    Interior frames are scanned in increasing order and each cel is kept at its
    first occurrence. Cels exposed on the first or last frame are boundary cels
    and never count as in-betweens.

    Args:
        cel_at: Returns the cel exposed at a frame
        frame_range: Selected frames, boundaries included

    Returns:
        Cels in first-seen order. Their position in this list is the step index
        used for interpolation, so the order must not change.
    """
    if not frame_range.has_inbetweens:
        return []

    boundary = {cel_at(frame_range.first_frame), cel_at(frame_range.last_frame)}
    scanned = (cel_at(f) for f in frame_range.inner_frames)

    # dict preserves insertion order, so this is an ordered dedup
    return list(dict.fromkeys(cel for cel in scanned if cel not in boundary))


def cel_exposures(
    cel_at: Callable[[int], Cel],
    frame_range: FrameRange
) -> Dict[Cel, List[int]]:
    """Map every cel in the range to the frames it is exposed on, first-seen order."""
    exposures: Dict[Cel, List[int]] = {}
    for f in frame_range.frames:
        exposures.setdefault(cel_at(f), []).append(f)
    return exposures


__all__ = [
    "build_inbetween_set",
    "cel_exposures",
]
