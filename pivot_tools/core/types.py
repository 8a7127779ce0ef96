"""Frame ranges, pivot points and pivot assignments."""

from dataclasses import dataclass
from typing import Hashable, Optional

import numpy as np


# Values of the drawing node's "useDrawingPivot" attribute
APPLY_ON_PARENT_PEG = "Apply Embedded Pivot on Parent Peg"
DONT_USE_EMBEDDED_PIVOT = "Don't Use Embedded Pivot"
APPLY_ON_DRAWING_LAYER = "Apply Embedded Pivot on Drawing Layer"

PIVOT_MODES = (APPLY_ON_PARENT_PEG, DONT_USE_EMBEDDED_PIVOT, APPLY_ON_DRAWING_LAYER)

Cel = Hashable


@dataclass(frozen=True)
class FrameRange:
    """Inclusive, 1-based range of timeline frames."""
    first_frame: int
    last_frame: int

    def __post_init__(self):
        if self.first_frame < 1:
            raise ValueError(f"first_frame must be >= 1, got {self.first_frame}")
        if self.last_frame < self.first_frame:
            raise ValueError(
                f"last_frame ({self.last_frame}) must not precede first_frame ({self.first_frame})"
            )

    @classmethod
    def from_selection(cls, first_frame: int, num_frames: int) -> "FrameRange":
        """Build a range from a timeline selection (first frame + frame count)."""
        if num_frames < 1:
            raise ValueError(f"num_frames must be >= 1, got {num_frames}")
        return cls(first_frame, first_frame + num_frames - 1)

    @property
    def num_frames(self) -> int:
        return self.last_frame - self.first_frame + 1

    @property
    def frames(self) -> range:
        return range(self.first_frame, self.last_frame + 1)

    @property
    def inner_frames(self) -> range:
        return range(self.first_frame + 1, self.last_frame)

    @property
    def has_inbetweens(self) -> bool:
        return self.last_frame >= self.first_frame + 2


@dataclass(frozen=True)
class PivotPoint:
    """Pivot position in scene fields."""
    x: float
    y: float

    @classmethod
    def from_xy(cls, value) -> "PivotPoint":
        """Accept a PivotPoint, an (x, y) pair or any object with x/y attributes."""
        if isinstance(value, cls):
            return value
        if hasattr(value, "x") and hasattr(value, "y"):
            return cls(float(value.x), float(value.y))
        x, y = value
        return cls(float(x), float(y))

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class PixelPoint:
    """Pivot position in the pivot tool's pixel space."""
    x: float
    y: float


@dataclass(frozen=True)
class PivotAssignment:
    """One embedded pivot to commit: which cel, its step, and where."""
    cel: Cel
    index: int
    frame: Optional[int]
    position: PivotPoint
    pixel: PixelPoint

    def to_dict(self) -> dict:
        return {
            "cel": self.cel,
            "index": self.index,
            "frame": self.frame,
            "position": (self.position.x, self.position.y),
            "pixel": (self.pixel.x, self.pixel.y),
        }


__all__ = [
    "APPLY_ON_PARENT_PEG",
    "DONT_USE_EMBEDDED_PIVOT",
    "APPLY_ON_DRAWING_LAYER",
    "PIVOT_MODES",
    "Cel",
    "FrameRange",
    "PivotPoint",
    "PixelPoint",
    "PivotAssignment",
]
