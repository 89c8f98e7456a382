# poolstraight/pipeline/session.py
"""
Per-session frame pipeline:

    raw points → interpret → evaluate → FeedbackSequencer → FrameResult

One session is active at a time. `process` may be called from a
worker thread; the lock keeps classification and the sequencer's
read-modify-write together.
"""

import threading
from typing import Any, Sequence, Union

from poolstraight.config.sensitivity import get_sensitivity
from poolstraight.cues.feedback_sequencer import FeedbackSequencer
from poolstraight.models.result_model import FrameResult
from poolstraight.models.sensitivity_model import Sensitivity, SensitivityLevel
from poolstraight.pipeline.alignment_stage import evaluate
from poolstraight.pipeline.landmark_stage import interpret
from poolstraight.utils.logger import debug, info

DEBUG_EVERY_N_FRAMES = 30


class AlignmentSession:

    def __init__(
        self,
        sensitivity: Union[Sensitivity, SensitivityLevel, str] = SensitivityLevel.BEGINNER,
        active: bool = True,
    ):
        self._lock = threading.Lock()
        self._sequencer = FeedbackSequencer()
        self._sensitivity = self._resolve(sensitivity)
        self._frame_index = 0
        self.active = active

    # -----------------------------------------------------
    # Configuration
    # -----------------------------------------------------

    @staticmethod
    def _resolve(sensitivity) -> Sensitivity:
        if isinstance(sensitivity, Sensitivity):
            return sensitivity
        return get_sensitivity(sensitivity)

    @property
    def sensitivity(self) -> Sensitivity:
        return self._sensitivity

    def set_sensitivity(self, sensitivity):
        resolved = self._resolve(sensitivity)
        with self._lock:
            self._sensitivity = resolved
        info(f"[Session] sensitivity → {resolved.level.value}")

    # -----------------------------------------------------
    # Lifecycle
    # -----------------------------------------------------

    def start(self):
        self.active = True
        info("[Session] feedback started")

    def stop(self):
        self.active = False
        info("[Session] feedback stopped")

    def reset(self):
        with self._lock:
            self._sequencer.reset()
            self._frame_index = 0

    @property
    def previous_status(self):
        return self._sequencer.previous_status

    # -----------------------------------------------------
    # Frame processing
    # -----------------------------------------------------

    def process(self, raw_points: Sequence[Any]) -> FrameResult:
        pose = interpret(raw_points)

        with self._lock:
            sensitivity = self._sensitivity
            alignment = evaluate(pose, sensitivity)

            previous = self._sequencer.previous_status
            cue = self._sequencer.update(alignment.status)
            if not self.active:
                cue = None

            idx = self._frame_index
            self._frame_index += 1

        if alignment.status != previous:
            debug(f"[Session] alignment change: {previous.value} → {alignment.status.value}")
        if cue is not None:
            info(f"[Session] frame {idx}: {cue.value}")
        if idx % DEBUG_EVERY_N_FRAMES == 0:
            debug(
                f"[Session] frame {idx} mode={pose.detection_mode} "
                f"dev={alignment.angle_deviation_deg} "
                f"lat={alignment.lateral_deviation} "
                f"head={alignment.head_tilt_deg}"
            )

        return FrameResult(
            frame_index=idx,
            pose=pose,
            alignment=alignment,
            cue=cue,
        )
