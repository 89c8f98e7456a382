# poolstraight/pipeline/landmark_stage.py
"""
Landmark Interpreter

Turns the detector's ordered point list (0-7 entries) into a role-labelled
Pose. Ordering convention at the boundary:

    shoulder, [elbow], wrist, [eye, eye, [nose]]

Roles are assigned from point count and vertical order only. A 3-point
frame is ambiguous (shoulder+elbow+wrist vs shoulder+wrist+single eye);
it is resolved by comparing the y of points 2 and 3, and that order must
not change because the detector side relies on it.

No geometry is computed here.
"""

from typing import Any, List, Optional, Sequence

from poolstraight.models.landmark_model import Point, Pose
from poolstraight.utils.logger import debug, warn


# -----------------------------
# Role confidence cutoffs
# -----------------------------
SHOULDER_MIN_CONF = 0.3
ELBOW_MIN_CONF = 0.3
WRIST_MIN_CONF = 0.3
EYE_MIN_CONF = 0.3
NOSE_MIN_CONF = 0.3

MAX_POINTS = 7


# ---------------------------------------------------------
# Raw point coercion
# ---------------------------------------------------------
def to_point(raw: Any) -> Optional[Point]:
    """
    Accepts a Point, an (x, y[, confidence]) sequence, or a dict with
    "x", "y" and "vis"/"confidence". Anything else is treated as absent.
    """
    if isinstance(raw, Point):
        return raw

    try:
        if isinstance(raw, dict):
            conf = raw.get("vis", raw.get("confidence", 1.0))
            return Point(x=float(raw["x"]), y=float(raw["y"]), confidence=float(conf))

        if len(raw) < 2:
            return None
        conf = raw[2] if len(raw) > 2 else 1.0
        return Point(x=float(raw[0]), y=float(raw[1]), confidence=float(conf))
    except (KeyError, TypeError, ValueError, OverflowError):
        return None


def _accept(p: Optional[Point], min_conf: float) -> Optional[Point]:
    if p is None or p.confidence < min_conf:
        return None
    return p


def _above(a: Optional[Point], b: Optional[Point]) -> bool:
    # smaller y = higher in the frame
    if a is None or b is None:
        return False
    return a.y < b.y


# ---------------------------------------------------------
# Interpreter
# ---------------------------------------------------------
def interpret(raw_points: Sequence[Any]) -> Pose:
    """
    Build a Pose from one detector frame. Never raises for any list
    contents; missing or unusable entries become absent roles.
    """
    if raw_points is None:
        return Pose()
    points: List[Optional[Point]] = [to_point(r) for r in raw_points]
    n = len(points)

    if n < 2:
        return Pose()

    if n > MAX_POINTS:
        warn(f"[Landmarks] {n} points received, ignoring {n - MAX_POINTS} trailing")
        points = points[:MAX_POINTS]
        n = MAX_POINTS

    shoulder = points[0]
    elbow = None

    if n == 2:
        wrist = points[1]
        head = []
    elif _above(points[1], points[2]):
        # shoulder, elbow, wrist, [head...]
        elbow = points[1]
        wrist = points[2]
        head = points[3:] if n > 3 else []
    else:
        # shoulder, wrist, [head...]
        wrist = points[1]
        head = points[2:]

    left_eye = right_eye = nose = None
    if len(head) >= 2:
        left_eye = _accept(head[0], EYE_MIN_CONF)
        right_eye = _accept(head[1], EYE_MIN_CONF)
        if left_eye is None or right_eye is None:
            left_eye = right_eye = None
        elif len(head) >= 3:
            nose = _accept(head[2], NOSE_MIN_CONF)
    elif len(head) == 1:
        debug("[Landmarks] single head point discarded (eyes must arrive as a pair)")

    return Pose(
        shoulder=_accept(shoulder, SHOULDER_MIN_CONF),
        elbow=_accept(elbow, ELBOW_MIN_CONF),
        wrist=_accept(wrist, WRIST_MIN_CONF),
        left_eye=left_eye,
        right_eye=right_eye,
        nose=nose,
    )
