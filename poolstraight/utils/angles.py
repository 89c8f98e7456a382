# poolstraight/utils/angles.py

import numpy as np


# -----------------------------------------------------------
# SEGMENT ANGLE
# -----------------------------------------------------------

def segment_angle_deg(a, b):
    """
    Angle of segment a→b from the +x axis, in degrees (-180, 180].
    Image space: y grows downward, so a straight-down segment is +90°.
    """
    dx = float(b[0]) - float(a[0])
    dy = float(b[1]) - float(a[1])
    return float(np.degrees(np.arctan2(dy, dx)))


# -----------------------------------------------------------
# DEVIATION FROM DOWNWARD VERTICAL
# -----------------------------------------------------------

VERTICAL_DOWN_DEG = 90.0


def deviation_from_vertical_deg(angle_deg):
    """
    Absolute difference between a segment angle and the downward
    vertical, wrapped to [0, 180].
    """
    diff = abs(float(angle_deg) - VERTICAL_DOWN_DEG)
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


# -----------------------------------------------------------
# LEVEL ANGLE (eye line)
# -----------------------------------------------------------

def level_angle_deg(a, b):
    """
    Angle of a→b from horizontal folded into [-90, 90], so the
    result does not depend on which end is listed first.
    """
    ang = segment_angle_deg(a, b)
    if ang > 90.0:
        ang -= 180.0
    elif ang < -90.0:
        ang += 180.0
    return ang


# -----------------------------------------------------------
# WEIGHTED CENTROID
# -----------------------------------------------------------

def weighted_centroid_x(xs, weights):
    """
    Weighted mean of x coordinates. Returns None for empty input
    or a non-positive weight sum.
    """
    if not xs:
        return None
    v = np.array(xs, dtype=float)
    w = np.array(weights, dtype=float)
    s = np.sum(w)
    if s <= 0:
        return None
    return float(np.sum(w * v) / s)
