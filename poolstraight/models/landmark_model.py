from pydantic import BaseModel, ConfigDict
from typing import Optional


class Point(BaseModel):
    """
    A single 2-D landmark in normalized image space (top-left origin)
    with detector confidence.

    Out-of-range coordinates are accepted here; consumers check
    `is_valid` and treat such points as absent.
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    confidence: float = 1.0

    @property
    def is_valid(self) -> bool:
        return 0.0 <= self.x <= 1.0 and 0.0 <= self.y <= 1.0

    def as_tuple(self):
        return (self.x, self.y)


class Pose(BaseModel):
    """
    Role-labelled landmarks for one frame.

    - wrist is required for any classification; without it the
      frame is NotDetected.
    - eyes are either both present or both absent.
    - nose is informational only.
    """
    model_config = ConfigDict(frozen=True)

    shoulder: Optional[Point] = None
    elbow: Optional[Point] = None
    wrist: Optional[Point] = None
    left_eye: Optional[Point] = None
    right_eye: Optional[Point] = None
    nose: Optional[Point] = None

    @property
    def has_head(self) -> bool:
        return self.left_eye is not None and self.right_eye is not None

    @property
    def detection_mode(self) -> str:
        if self.wrist is None:
            return "NONE"
        if self.shoulder is not None and self.elbow is not None:
            mode = "3-POINT"
        else:
            mode = "2-POINT"
        if self.has_head:
            mode += "+HEAD"
        return mode
