import io
import json

from poolstraight.cli import main, replay
from poolstraight.pipeline.session import AlignmentSession


def _records(text):
    return [json.loads(l) for l in text.splitlines() if l.startswith("{")]


def test_replay_writes_one_record_per_frame():
    lines = [
        "[]\n",
        "\n",
        "[[0.5, 0.2, 0.9], [0.8, 0.8, 0.9]]\n",
        "[[0.5, 0.2, 0.9], [0.5, 0.8, 0.9]]\n",
        '[{"x": 0.5, "y": 0.2, "vis": 0.9}, {"x": 0.5, "y": 0.8, "vis": 0.9}]\n',
    ]
    out = io.StringIO()
    replay(lines, AlignmentSession(), out=out)

    records = _records(out.getvalue())
    assert [r["frame"] for r in records] == [0, 1, 2, 3]
    assert [r["status"] for r in records] == [
        "not_detected", "misaligned", "aligned", "aligned",
    ]
    assert [r["cue"] for r in records] == [
        None, "play_negative_cue", "play_positive_cue", None,
    ]
    assert records[2]["mode"] == "2-POINT"
    assert records[2]["head_tilt"] == "not_available"


def test_bad_line_counts_as_empty_frame():
    out = io.StringIO()
    replay(["not json\n", '{"x": 1}\n'], AlignmentSession(), out=out)
    records = _records(out.getvalue())
    assert [r["status"] for r in records] == ["not_detected", "not_detected"]


def test_main(tmp_path, capsys):
    path = tmp_path / "frames.jsonl"
    tilted = [[0.5, 0.2, 0.9], [0.5, 0.5, 0.9], [0.5, 0.8, 0.9],
              [0.45, 0.25, 0.9], [0.55, 0.35, 0.9]]
    path.write_text(json.dumps(tilted) + "\n")

    assert main([str(path), "--sensitivity", "intermediate"]) == 0
    records = _records(capsys.readouterr().out)
    assert records == [{
        "frame": 0,
        "status": "misaligned",
        "head_tilt": "tilted",
        "cue": "play_negative_cue",
        "mode": "3-POINT+HEAD",
    }]


def test_main_missing_file(tmp_path):
    assert main([str(tmp_path / "nope.jsonl")]) == 1


def _landmark_frame(**points):
    index = {"left_eye": 2, "right_eye": 5, "left_shoulder": 11,
             "left_elbow": 13, "left_wrist": 15, "right_shoulder": 12,
             "right_wrist": 16}
    lm = [{"x": 0.0, "y": 0.0, "z": 0.0, "vis": 0.0} for _ in range(33)]
    for name, (x, y, vis) in points.items():
        lm[index[name]] = {"x": x, "y": y, "z": 0.0, "vis": vis}
    return lm


def test_main_raw_landmark_frames(tmp_path, capsys):
    path = tmp_path / "landmarks.jsonl"
    frames = [
        _landmark_frame(left_shoulder=(0.5, 0.2, 0.9), left_elbow=(0.5, 0.5, 0.9),
                        left_wrist=(0.5, 0.8, 0.9), left_eye=(0.45, 0.3, 0.9),
                        right_eye=(0.55, 0.3, 0.9)),
        _landmark_frame(right_shoulder=(0.3, 0.2, 0.9), right_wrist=(0.3, 0.8, 0.9)),
        [{"x": 0.5}] * 33,
    ]
    path.write_text("\n".join(json.dumps(f) for f in frames) + "\n")

    assert main([str(path), "--raw", "--sensitivity", "advanced"]) == 0
    records = _records(capsys.readouterr().out)
    assert [r["mode"] for r in records] == ["3-POINT+HEAD", "NONE", "NONE"]
    assert [r["status"] for r in records] == ["aligned", "not_detected", "not_detected"]


def test_main_raw_with_hand_and_mirror(tmp_path, capsys):
    path = tmp_path / "landmarks.jsonl"
    frame = _landmark_frame(right_shoulder=(0.3, 0.2, 0.9), right_wrist=(0.3, 0.8, 0.9))
    path.write_text(json.dumps(frame) + "\n")

    assert main([str(path), "--raw", "--hand", "R", "--mirror",
                 "--sensitivity", "advanced"]) == 0
    records = _records(capsys.readouterr().out)
    # mirrored to x = 0.7: vertical but off-center
    assert records[0]["mode"] == "2-POINT"
    assert records[0]["status"] == "misaligned"


def test_oversized_number_counts_as_absent_point():
    line = "[[1" + "0" * 400 + ", 0.2, 0.9], [0.5, 0.8, 0.9]]\n"
    out = io.StringIO()
    replay([line], AlignmentSession(), out=out)
    assert _records(out.getvalue())[0]["status"] == "not_detected"


def test_stdout_carries_only_records(tmp_path, capsys):
    path = tmp_path / "frames.jsonl"
    path.write_text("not json\n[[0.5, 0.2, 0.9], [0.5, 0.8, 0.9]]\n")

    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert out.strip()
    assert all(line.startswith("{") for line in out.splitlines())
