# poolstraight/cues/feedback_sequencer.py
"""
Feedback Sequencer

Edge-triggered audio cues. Holds only the previous status.

    into ALIGNED     from MISALIGNED / NOT_DETECTED  → positive cue
    into MISALIGNED  from ALIGNED / NOT_DETECTED     → negative cue
    into NOT_DETECTED, or repeated status            → nothing
"""

from typing import Optional

from poolstraight.models.status_model import AlignmentStatus, FeedbackCue


_TRANSITIONS = {
    (AlignmentStatus.MISALIGNED, AlignmentStatus.ALIGNED): FeedbackCue.PLAY_POSITIVE_CUE,
    (AlignmentStatus.NOT_DETECTED, AlignmentStatus.ALIGNED): FeedbackCue.PLAY_POSITIVE_CUE,
    (AlignmentStatus.ALIGNED, AlignmentStatus.MISALIGNED): FeedbackCue.PLAY_NEGATIVE_CUE,
    (AlignmentStatus.NOT_DETECTED, AlignmentStatus.MISALIGNED): FeedbackCue.PLAY_NEGATIVE_CUE,
}


class FeedbackSequencer:
    """
    Not thread-safe on its own; AlignmentSession serializes access.
    """

    def __init__(self):
        self.previous_status = AlignmentStatus.NOT_DETECTED

    def update(self, status: AlignmentStatus) -> Optional[FeedbackCue]:
        cue = _TRANSITIONS.get((self.previous_status, status))
        self.previous_status = status
        return cue

    def reset(self):
        self.previous_status = AlignmentStatus.NOT_DETECTED
