from enum import Enum


class AlignmentStatus(str, Enum):
    """
    Per-frame arm alignment verdict. This is the unit the feedback
    sequencer tracks across frames.
    """
    ALIGNED = "aligned"
    MISALIGNED = "misaligned"
    NOT_DETECTED = "not_detected"


class HeadTiltStatus(str, Enum):
    """
    Informational only. Folded into AlignmentStatus solely by the
    classifier's combination rule.
    """
    LEVEL = "level"
    TILTED = "tilted"
    NOT_AVAILABLE = "not_available"


class FeedbackCue(str, Enum):
    PLAY_POSITIVE_CUE = "play_positive_cue"
    PLAY_NEGATIVE_CUE = "play_negative_cue"
