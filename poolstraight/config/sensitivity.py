import yaml
from functools import lru_cache
from pathlib import Path
from typing import Dict, Union

from poolstraight.models.sensitivity_model import Sensitivity, SensitivityLevel

TIERS_PATH = Path(__file__).parent / "tiers.yaml"


def load_tiers(path=TIERS_PATH) -> Dict[SensitivityLevel, Sensitivity]:
    """
    Read the tier table and validate every entry.
    Raises pydantic.ValidationError on a malformed table and
    ValueError when a tier is missing.
    """
    with open(path, "r") as f:
        raw = yaml.safe_load(f) or {}

    table = raw.get("tiers") or {}
    tiers = {}
    for level in SensitivityLevel:
        entry = table.get(level.value)
        if entry is None:
            raise ValueError(f"Missing sensitivity tier: {level.value}")
        tiers[level] = Sensitivity(level=level, **entry)
    return tiers


@lru_cache(maxsize=1)
def _default_tiers():
    return load_tiers()


def get_sensitivity(level: Union[SensitivityLevel, str]) -> Sensitivity:
    """
    Look up a tier by enum or name ("beginner", "intermediate",
    "advanced"). Unknown names raise ValueError.
    """
    if not isinstance(level, SensitivityLevel):
        try:
            level = SensitivityLevel(str(level).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown sensitivity level: {level!r}") from None
    return _default_tiers()[level]
