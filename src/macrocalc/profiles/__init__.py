"""Biometric profiles and the calorie/macro estimator."""

from macrocalc.profiles.body_calc import (
    ACTIVITY_MULTIPLIERS,
    EstimateResult,
    calculate_bmr,
    calculate_tdee,
    estimate,
    result_to_dict,
)
from macrocalc.profiles.models import (
    ACTIVITY_DESCRIPTIONS,
    ACTIVITY_LABELS,
    ActivityLevel,
    Profile,
    Sex,
)

__all__ = [
    "ACTIVITY_DESCRIPTIONS",
    "ACTIVITY_LABELS",
    "ACTIVITY_MULTIPLIERS",
    "ActivityLevel",
    "EstimateResult",
    "Profile",
    "Sex",
    "calculate_bmr",
    "calculate_tdee",
    "estimate",
    "result_to_dict",
]
