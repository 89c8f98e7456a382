from pydantic import BaseModel, ConfigDict
from typing import Optional

from poolstraight.models.landmark_model import Pose
from poolstraight.models.status_model import (
    AlignmentStatus,
    FeedbackCue,
    HeadTiltStatus,
)


class AlignmentResult(BaseModel):
    """
    Classifier output for one frame.

    Measurements are informational (overlay / debugging); the verdict
    is carried by `status` and `head_tilt` only.
    """
    model_config = ConfigDict(frozen=True)

    status: AlignmentStatus = AlignmentStatus.NOT_DETECTED
    head_tilt: HeadTiltStatus = HeadTiltStatus.NOT_AVAILABLE

    arm_model: Optional[str] = None
    elbow_discarded: bool = False
    arm_angle_deg: Optional[float] = None
    angle_deviation_deg: Optional[float] = None
    lateral_deviation: Optional[float] = None
    head_tilt_deg: Optional[float] = None


class FrameResult(BaseModel):
    """
    Everything the renderer and audio collaborators need for a frame.
    """
    frame_index: int
    pose: Pose
    alignment: AlignmentResult
    cue: Optional[FeedbackCue] = None

    @property
    def status(self) -> AlignmentStatus:
        return self.alignment.status

    @property
    def head_tilt(self) -> HeadTiltStatus:
        return self.alignment.head_tilt
