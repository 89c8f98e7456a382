"""
Replay recorded landmark frames through the alignment pipeline.

Usage:
    poolstraight frames.jsonl --sensitivity intermediate
    poolstraight landmarks.jsonl --raw --hand R --mirror

Each non-blank line is one frame: a JSON array of [x, y, confidence]
triples (or {"x", "y", "vis"} objects) in detector order. With --raw,
each line is a full 33-landmark MediaPipe-style frame that is encoded
into detector order first.
"""

import argparse
import json
import logging
import sys

from poolstraight.models.sensitivity_model import SensitivityLevel
from poolstraight.pipeline.session import AlignmentSession
from poolstraight.utils.landmarks import LandmarkMapper
from poolstraight.utils.logger import error, set_level


def build_parser():
    parser = argparse.ArgumentParser(
        prog="poolstraight",
        description="Classify cue-arm alignment for recorded landmark frames.",
    )
    parser.add_argument("path", help="JSON-lines file, one frame per line")
    parser.add_argument(
        "--sensitivity",
        choices=[lvl.value for lvl in SensitivityLevel],
        default=SensitivityLevel.BEGINNER.value,
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="lines hold 33-landmark frames ({x, y, z, vis} objects)",
    )
    parser.add_argument("--hand", choices=["L", "R"], default="L")
    parser.add_argument("--mirror", action="store_true", help="flip x to 1 - x")
    parser.add_argument("-v", "--verbose", action="store_true", help="per-frame debug logging")
    return parser


def _parse_frame(line, line_no):
    try:
        frame = json.loads(line)
    except json.JSONDecodeError as e:
        error(f"[Replay] line {line_no}: invalid JSON ({e.msg}), treating as empty frame")
        return []
    if not isinstance(frame, list):
        error(f"[Replay] line {line_no}: expected a JSON array, treating as empty frame")
        return []
    return frame


def _encode(mapper, frame, line_no):
    try:
        return mapper.ordered_points(frame)
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        error(f"[Replay] line {line_no}: bad landmark frame ({e!r}), treating as empty frame")
        return []


def replay(lines, session, out=None, mapper=None):
    if out is None:
        out = sys.stdout
    for line_no, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        frame = _parse_frame(line, line_no)
        if mapper is not None:
            frame = _encode(mapper, frame, line_no)

        result = session.process(frame)
        record = {
            "frame": result.frame_index,
            "status": result.status.value,
            "head_tilt": result.head_tilt.value,
            "cue": result.cue.value if result.cue else None,
            "mode": result.pose.detection_mode,
        }
        out.write(json.dumps(record) + "\n")


def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_level(logging.DEBUG)

    session = AlignmentSession(sensitivity=args.sensitivity)
    mapper = LandmarkMapper(hand=args.hand, mirror=args.mirror) if args.raw else None

    try:
        with open(args.path, "r") as f:
            replay(f, session, mapper=mapper)
    except OSError as e:
        error(f"[Replay] cannot read {args.path}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
