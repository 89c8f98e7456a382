import pytest
from pydantic import ValidationError

from poolstraight.config.sensitivity import get_sensitivity, load_tiers
from poolstraight.models.sensitivity_model import SensitivityLevel


def test_packaged_tiers():
    tiers = load_tiers()
    assert set(tiers) == set(SensitivityLevel)

    beginner = tiers[SensitivityLevel.BEGINNER]
    intermediate = tiers[SensitivityLevel.INTERMEDIATE]
    advanced = tiers[SensitivityLevel.ADVANCED]

    assert intermediate.arm_angle_threshold == 8.0
    assert intermediate.lateral_threshold == 0.08
    assert advanced.arm_angle_threshold == 5.0
    assert beginner.arm_angle_threshold == 12.0

    for looser, stricter in [(beginner, intermediate), (intermediate, advanced)]:
        assert looser.arm_angle_threshold >= stricter.arm_angle_threshold
        assert looser.head_tilt_threshold >= stricter.head_tilt_threshold
        assert looser.lateral_threshold >= stricter.lateral_threshold


@pytest.mark.parametrize("name", ["advanced", "Advanced", " ADVANCED "])
def test_lookup_by_name(name):
    assert get_sensitivity(name).level == SensitivityLevel.ADVANCED


def test_unknown_level():
    with pytest.raises(ValueError):
        get_sensitivity("expert")


def test_sensitivity_is_immutable():
    s = get_sensitivity(SensitivityLevel.BEGINNER)
    with pytest.raises(ValidationError):
        s.arm_angle_threshold = 90.0


def _write(tmp_path, body):
    path = tmp_path / "tiers.yaml"
    path.write_text(body)
    return path


def test_invalid_wrist_weight_rejected(tmp_path):
    body = """
tiers:
  beginner: {arm_angle_threshold: 12, head_tilt_threshold: 10, lateral_threshold: 0.12, wrist_weight: 1.5}
  intermediate: {arm_angle_threshold: 8, head_tilt_threshold: 7, lateral_threshold: 0.08, wrist_weight: 0.7}
  advanced: {arm_angle_threshold: 5, head_tilt_threshold: 5, lateral_threshold: 0.05, wrist_weight: 0.75}
"""
    with pytest.raises(ValidationError):
        load_tiers(_write(tmp_path, body))


def test_missing_tier_rejected(tmp_path):
    body = """
tiers:
  beginner: {arm_angle_threshold: 12, head_tilt_threshold: 10, lateral_threshold: 0.12, wrist_weight: 0.6}
"""
    with pytest.raises(ValueError):
        load_tiers(_write(tmp_path, body))
