from poolstraight.utils.logger import debug


class LandmarkMapper:
    """
    Encodes a 33-landmark MediaPipe-style frame into the ordered point list
    the landmark interpreter expects:

        shoulder, [elbow], wrist, [left eye, right eye, [nose]]

    Input landmarks are dicts {"x", "y", ["z"], "vis"} in normalized,
    top-left-origin image space.
    """

    NOSE = 0

    SHOULDER_MIN_VIS = 0.5
    EYE_SHOULDER_MIN_VIS = 0.4
    POINT_MIN_VIS = 0.3

    # Shoulder sits roughly this far below the eyes when leaning over the table
    EYE_TO_SHOULDER_DY = 0.12

    def __init__(self, hand: str = "L", mirror: bool = False):
        self.hand = hand.upper()
        self.mirror = mirror

        self.left = {
            "eye": 2,
            "shoulder": 11,
            "elbow": 13,
            "wrist": 15,
        }

        self.right = {
            "eye": 5,
            "shoulder": 12,
            "elbow": 14,
            "wrist": 16,
        }

        self.primary = self.right if self.hand == "R" else self.left

    # -----------------------------------------------------
    # Safe landmark fetch
    # -----------------------------------------------------

    @staticmethod
    def _get(lm, idx):
        if lm is None or idx >= len(lm) or lm[idx] is None:
            return None
        p = lm[idx]
        return float(p["x"]), float(p["y"]), float(p.get("vis", 0.0))

    def _emit(self, x, y, conf):
        if self.mirror:
            x = 1.0 - x
        return (x, y, conf)

    # -----------------------------------------------------
    # Shoulder (with eye-based fallback when leaning)
    # -----------------------------------------------------

    def shoulder(self, lm):
        raw = self._get(lm, self.primary["shoulder"])
        le = self._get(lm, self.left["eye"])
        re = self._get(lm, self.right["eye"])

        if raw is not None and raw[2] > self.SHOULDER_MIN_VIS:
            return raw

        if (
            le is not None and re is not None
            and le[2] > self.EYE_SHOULDER_MIN_VIS
            and re[2] > self.EYE_SHOULDER_MIN_VIS
        ):
            x = (le[0] + re[0]) / 2.0
            y = (le[1] + re[1]) / 2.0 + self.EYE_TO_SHOULDER_DY
            conf = (le[2] + re[2]) / 2.0
            debug(f"[Mapper] lean detected, eye-based shoulder (conf {conf:.3f})")
            return (x, y, conf)

        return raw

    # -----------------------------------------------------
    # Ordered points
    # -----------------------------------------------------

    def ordered_points(self, lm):
        """
        Returns a list of (x, y, confidence) triples, empty when the
        shoulder or wrist is not trustworthy.
        """
        shoulder = self.shoulder(lm)
        wrist = self._get(lm, self.primary["wrist"])

        if shoulder is None or wrist is None:
            return []
        if shoulder[2] <= self.POINT_MIN_VIS or wrist[2] <= self.POINT_MIN_VIS:
            debug(
                f"[Mapper] pose rejected: shoulder={shoulder[2]:.3f} "
                f"wrist={wrist[2]:.3f}"
            )
            return []

        out = [self._emit(*shoulder)]

        elbow = self._get(lm, self.primary["elbow"])
        if elbow is not None and elbow[2] > self.POINT_MIN_VIS:
            out.append(self._emit(*elbow))

        out.append(self._emit(*wrist))

        le = self._get(lm, self.left["eye"])
        re = self._get(lm, self.right["eye"])
        if (
            le is not None and re is not None
            and le[2] > self.POINT_MIN_VIS
            and re[2] > self.POINT_MIN_VIS
        ):
            out.append(self._emit(*le))
            out.append(self._emit(*re))

            nose = self._get(lm, self.NOSE)
            if nose is not None and nose[2] > self.POINT_MIN_VIS:
                out.append(self._emit(*nose))

        return out
