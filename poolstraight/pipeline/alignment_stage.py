# poolstraight/pipeline/alignment_stage.py
"""
Alignment Classifier

Principles:
- Pure: same Pose + Sensitivity always gives the same result.
- Geometry first (angle, lateral, head), each compared against its raw
  threshold with no leniency.
- Tier leniency is applied only in the combination step (`_combine`).
- A missing wrist overrides everything: NotDetected. The shoulder is the
  required anchor; without a usable one the frame is NotDetected too.
"""

from typing import Optional, Sequence

from poolstraight.models.landmark_model import Point, Pose
from poolstraight.models.result_model import AlignmentResult
from poolstraight.models.sensitivity_model import Sensitivity
from poolstraight.models.status_model import AlignmentStatus, HeadTiltStatus
from poolstraight.utils.angles import (
    deviation_from_vertical_deg,
    level_angle_deg,
    segment_angle_deg,
    weighted_centroid_x,
)
from poolstraight.utils.logger import debug


# -----------------------------
# Tunables (design-level)
# -----------------------------
CENTER_LINE_X = 0.5
MIN_DOWNWARD_DY = 0.02

# Three-point lateral weights (shoulder, elbow, wrist)
THREE_POINT_WEIGHTS = (0.2, 0.3, 0.5)

LEGACY_LATERAL_THRESHOLD = 0.05


def _usable(p: Optional[Point]) -> Optional[Point]:
    if p is None or not p.is_valid:
        return None
    return p


# ---------------------------------------------------------
# Raw geometric checks
# ---------------------------------------------------------
def _arm_angle(upper: Point, wrist: Point):
    """
    Returns (angle_deg, deviation_deg, pointing_down).
    """
    dy = wrist.y - upper.y
    angle = segment_angle_deg(upper.as_tuple(), wrist.as_tuple())
    deviation = deviation_from_vertical_deg(angle)
    return angle, deviation, dy > MIN_DOWNWARD_DY


def _lateral_deviation(shoulder, elbow, wrist, wrist_weight):
    if elbow is not None:
        xs = [shoulder.x, elbow.x, wrist.x]
        weights = list(THREE_POINT_WEIGHTS)
    else:
        xs = [shoulder.x, wrist.x]
        weights = [1.0 - wrist_weight, wrist_weight]

    return abs(weighted_centroid_x(xs, weights) - CENTER_LINE_X)


def _head_tilt_deg(pose: Pose) -> Optional[float]:
    left = _usable(pose.left_eye)
    right = _usable(pose.right_eye)
    if left is None or right is None:
        return None
    return level_angle_deg(left.as_tuple(), right.as_tuple())


def head_tilt(pose: Pose, sensitivity: Sensitivity) -> HeadTiltStatus:
    tilt = _head_tilt_deg(pose)
    if tilt is None:
        return HeadTiltStatus.NOT_AVAILABLE
    if abs(tilt) <= sensitivity.head_tilt_threshold:
        return HeadTiltStatus.LEVEL
    return HeadTiltStatus.TILTED


# ---------------------------------------------------------
# Policy
# ---------------------------------------------------------
def _combine(angle_ok, lateral_ok, tilt, sensitivity):
    """
    Arm dominates. Beginners get lateral and head leniency; other
    tiers require everything to pass.
    """
    if not angle_ok:
        return AlignmentStatus.MISALIGNED

    if lateral_ok or sensitivity.is_beginner:
        arm = AlignmentStatus.ALIGNED
    else:
        return AlignmentStatus.MISALIGNED

    if tilt == HeadTiltStatus.TILTED and not sensitivity.is_beginner:
        return AlignmentStatus.MISALIGNED

    return arm


# ---------------------------------------------------------
# Public API
# ---------------------------------------------------------
def evaluate(pose: Pose, sensitivity: Sensitivity) -> AlignmentResult:
    """
    Full classification with the measurements that produced it.
    """
    tilt_deg = _head_tilt_deg(pose)
    tilt = head_tilt(pose, sensitivity)

    wrist = _usable(pose.wrist)
    shoulder = _usable(pose.shoulder)
    elbow = _usable(pose.elbow)

    if wrist is None or shoulder is None:
        return AlignmentResult(
            status=AlignmentStatus.NOT_DETECTED,
            head_tilt=tilt,
            head_tilt_deg=tilt_deg,
        )

    # Three-point plausibility: shoulder above elbow above wrist
    elbow_discarded = False
    if elbow is not None and not (shoulder.y < elbow.y < wrist.y):
        elbow = None
        elbow_discarded = True

    upper = elbow if elbow is not None else shoulder
    arm_angle, deviation, pointing_down = _arm_angle(upper, wrist)
    angle_ok = pointing_down and deviation <= sensitivity.arm_angle_threshold

    lateral = _lateral_deviation(shoulder, elbow, wrist, sensitivity.wrist_weight)
    lateral_ok = lateral <= sensitivity.lateral_threshold

    status = _combine(angle_ok, lateral_ok, tilt, sensitivity)
    arm_model = "3-POINT" if elbow is not None else "2-POINT"

    debug(
        f"[Alignment] {sensitivity.level.value} {arm_model} "
        f"dev={deviation:.1f}° lat={lateral:.3f} "
        f"down={pointing_down} head={tilt.value} → {status.value}"
    )

    return AlignmentResult(
        status=status,
        head_tilt=tilt,
        arm_model=arm_model,
        elbow_discarded=elbow_discarded,
        arm_angle_deg=arm_angle,
        angle_deviation_deg=deviation,
        lateral_deviation=lateral,
        head_tilt_deg=tilt_deg,
    )


def classify(pose: Pose, sensitivity: Sensitivity) -> AlignmentStatus:
    return evaluate(pose, sensitivity).status


def classify_lateral_only(
    points: Sequence[Point],
    center_x: float = CENTER_LINE_X,
) -> AlignmentStatus:
    """
    Legacy check: mean x of the first two points against the center line
    with a fixed 5% tolerance. No angle, no tiers.
    """
    if points is None or len(points) < 2:
        return AlignmentStatus.NOT_DETECTED

    avg_x = (points[0].x + points[1].x) / 2.0
    if abs(avg_x - center_x) <= LEGACY_LATERAL_THRESHOLD:
        return AlignmentStatus.ALIGNED
    return AlignmentStatus.MISALIGNED
