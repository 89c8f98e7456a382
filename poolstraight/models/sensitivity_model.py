from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class SensitivityLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Sensitivity(BaseModel):
    """
    Immutable threshold bundle for one skill tier.

    - arm_angle_threshold: max deviation of the arm from vertical (deg)
    - head_tilt_threshold: max eye-line deviation from horizontal (deg)
    - lateral_threshold: max centroid distance from center line
      (fraction of frame width)
    - wrist_weight: share of the two-point lateral centroid given
      to the wrist
    """
    model_config = ConfigDict(frozen=True)

    level: SensitivityLevel
    arm_angle_threshold: float = Field(gt=0)
    head_tilt_threshold: float = Field(gt=0)
    lateral_threshold: float = Field(gt=0)
    wrist_weight: float = Field(ge=0.0, le=1.0)

    @property
    def is_beginner(self) -> bool:
        return self.level == SensitivityLevel.BEGINNER
