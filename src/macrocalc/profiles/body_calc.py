"""Body metrics calculator for calorie, macro, water and salt targets.

Calculates TDEE (Total Daily Energy Expenditure) from a biometric profile
and splits it into protein, fat and carbohydrate targets.

Uses Mifflin-St Jeor equation for BMR as it's widely validated for
calculating resting metabolic rate.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Union

from macrocalc.errors import ValidationError
from macrocalc.profiles.models import ActivityLevel, Profile, Sex, coerce_number

# Activity level multipliers (Harris-Benedict activity factors)
ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
}

PROTEIN_GRAMS_PER_KG = 1.6
FAT_CALORIE_SHARE = 0.25

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_FAT = 9
KCAL_PER_GRAM_CARB = 4

# 35 ml of water per kg bodyweight
WATER_LITERS_PER_KG = 0.035

# General guideline of 2.3 g/day, plus 0.5 g per 500 kcal above sedentary TDEE
BASE_SALT_GRAMS = 2.3
SALT_GRAMS_PER_STEP = 0.5
SALT_STEP_KCAL = 500

INVALID_PROFILE_MESSAGE = "Please enter valid numbers for age, weight, and height."


@dataclass(frozen=True)
class EstimateResult:
    """Daily targets computed from a single profile snapshot."""

    energy_target: int      # kcal/day (rounded TDEE)
    protein_grams: int
    fat_grams: int
    carb_grams: int         # may be negative for extreme inputs
    water_liters: float
    salt_grams: float


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def round_2dp(value: float) -> float:
    """Round to two decimals, halves away from zero on the exact float value."""
    return float(Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def calculate_bmr(
    age: int,
    sex: Sex,
    height_cm: float,
    weight_kg: float,
) -> float:
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Args:
        age: Age in years
        sex: Biological sex
        height_cm: Height in centimeters
        weight_kg: Weight in kilograms

    Returns:
        BMR in calories per day
    """
    if sex == Sex.MALE:
        bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * age) + 5
    else:
        bmr = (10 * weight_kg) + (6.25 * height_cm) - (5 * age) - 161

    return bmr


def calculate_tdee(
    bmr: float,
    activity_level: ActivityLevel,
) -> float:
    """Calculate Total Daily Energy Expenditure.

    Args:
        bmr: Basal Metabolic Rate
        activity_level: Activity level

    Returns:
        TDEE in calories per day
    """
    multiplier = ACTIVITY_MULTIPLIERS[activity_level]
    return bmr * multiplier


def _require_positive(value: Any, integer: bool = False) -> Union[int, float]:
    number = coerce_number(value, integer=integer)
    if not number or number <= 0:
        raise ValidationError(INVALID_PROFILE_MESSAGE)
    return number


def estimate(profile: Profile) -> EstimateResult:
    """Calculate daily energy, macro, water and salt targets.

    Rounding is applied once, to the final values. Carbohydrate grams are
    whatever energy remains after protein and fat, and are negative when
    those two already exceed TDEE.

    Args:
        profile: Biometric profile

    Returns:
        EstimateResult for this profile

    Raises:
        ValidationError: If age, weight or height is missing, zero or not a
            positive number
    """
    age = _require_positive(profile.age, integer=True)
    weight = _require_positive(profile.weight)
    height = _require_positive(profile.height)

    bmr = calculate_bmr(age, profile.sex, height, weight)
    tdee = calculate_tdee(bmr, profile.activity_level)

    protein_grams = weight * PROTEIN_GRAMS_PER_KG
    protein_calories = protein_grams * KCAL_PER_GRAM_PROTEIN
    fat_calories = tdee * FAT_CALORIE_SHARE
    fat_grams = fat_calories / KCAL_PER_GRAM_FAT
    carb_calories = tdee - (protein_calories + fat_calories)
    carb_grams = carb_calories / KCAL_PER_GRAM_CARB

    water_liters = round_2dp(weight * WATER_LITERS_PER_KG)

    # Surcharge is always measured against the sedentary multiplier
    sedentary_tdee = calculate_tdee(bmr, ActivityLevel.SEDENTARY)
    extra_salt = max(0.0, (tdee - sedentary_tdee) / SALT_STEP_KCAL) * SALT_GRAMS_PER_STEP
    salt_grams = round_2dp(BASE_SALT_GRAMS + extra_salt)

    return EstimateResult(
        energy_target=round_half_up(tdee),
        protein_grams=round_half_up(protein_grams),
        fat_grams=round_half_up(fat_grams),
        carb_grams=round_half_up(carb_grams),
        water_liters=water_liters,
        salt_grams=salt_grams,
    )


def result_to_dict(result: EstimateResult) -> dict:
    """Convert EstimateResult to dict for JSON output."""
    return {
        "tdee": result.energy_target,
        "protein_grams": result.protein_grams,
        "fat_grams": result.fat_grams,
        "carb_grams": result.carb_grams,
        "water_liters": result.water_liters,
        "salt_grams": result.salt_grams,
    }
