"""Biometric profile model used as estimator input."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Optional, Union

from macrocalc.errors import ValidationError

logger = logging.getLogger(__name__)


class Sex(Enum):
    """Biological sex for BMR calculation."""
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(Enum):
    """Activity level multipliers for TDEE calculation."""
    SEDENTARY = "sedentary"          # Little or no exercise
    LIGHT = "light"                  # Light exercise 1-3 days/week
    MODERATE = "moderate"            # Moderate exercise 3-5 days/week
    ACTIVE = "active"                # Hard exercise 6-7 days/week
    VERY_ACTIVE = "veryActive"       # Very hard exercise, physical job


ACTIVITY_LABELS = {
    ActivityLevel.SEDENTARY: "Sedentary",
    ActivityLevel.LIGHT: "Lightly active",
    ActivityLevel.MODERATE: "Moderately active",
    ActivityLevel.ACTIVE: "Active",
    ActivityLevel.VERY_ACTIVE: "Very active",
}

ACTIVITY_DESCRIPTIONS = {
    ActivityLevel.SEDENTARY: "Little or no exercise, desk job.",
    ActivityLevel.LIGHT: "Light exercise or sports 1-3 days/week.",
    ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week.",
    ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week.",
    ActivityLevel.VERY_ACTIVE: "Very hard exercise & physical job or training twice daily.",
}

Number = Union[int, float]


def parse_sex(value: Union[str, Sex]) -> Sex:
    """Parse a sex value, accepting enum members or case-insensitive names."""
    if isinstance(value, Sex):
        return value
    try:
        return Sex(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"sex must be 'male' or 'female', got '{value}'") from None


def parse_activity_level(value: Union[str, ActivityLevel]) -> ActivityLevel:
    """Parse an activity level.

    Accepts enum members, the stored values (``veryActive``) and the
    snake_case spelling (``very_active``).
    """
    if isinstance(value, ActivityLevel):
        return value
    text = str(value).strip()
    for level in ActivityLevel:
        if text == level.value or text.lower() in (level.value.lower(), level.name.lower()):
            return level
    valid = ", ".join(level.value for level in ActivityLevel)
    raise ValidationError(f"activity level must be one of {valid}, got '{value}'")


def coerce_number(value: Any, integer: bool = False) -> Optional[Number]:
    """Convert a form value to a number, or None when absent or unreadable.

    Integers are truncated toward zero, so ``"30.7"`` becomes ``30``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    if integer:
        return int(number)
    return number


@dataclass(frozen=True)
class Profile:
    """Biometric profile as last entered by the user.

    Age, weight and height may be absent while the profile is being edited;
    the estimator rejects such profiles.
    """

    age: Optional[int] = None
    sex: Sex = Sex.MALE
    weight: Optional[float] = None   # kg
    height: Optional[float] = None   # cm
    activity_level: ActivityLevel = ActivityLevel.SEDENTARY

    def with_changes(self, **changes: Any) -> "Profile":
        """Return a copy with the given fields replaced.

        ``None`` values are ignored, so callers can pass optional CLI
        arguments straight through.
        """
        updates: dict[str, Any] = {}
        for name, value in changes.items():
            if value is None:
                continue
            if name == "age":
                updates["age"] = coerce_number(value, integer=True)
            elif name in ("weight", "height"):
                updates[name] = coerce_number(value)
            elif name == "sex":
                updates["sex"] = parse_sex(value)
            elif name in ("activity_level", "activity"):
                updates["activity_level"] = parse_activity_level(value)
            else:
                raise TypeError(f"Unknown profile field: {name}")
        return replace(self, **updates)

    def to_record(self) -> dict[str, Any]:
        """Convert to the persisted JSON record."""
        return {
            "age": self.age,
            "sex": self.sex.value,
            "weight": self.weight,
            "height": self.height,
            "activity": self.activity_level.value,
        }

    @classmethod
    def from_record(cls, record: Optional[dict[str, Any]]) -> "Profile":
        """Build a profile from a persisted record.

        Missing or unreadable fields fall back to the defaults, including the
        empty strings written by earlier form-based versions.
        """
        if not record:
            return cls()
        if not isinstance(record, dict):
            logger.warning("Stored profile is not a record, using defaults: %r", record)
            return cls()

        sex = Sex.MALE
        if record.get("sex"):
            try:
                sex = parse_sex(record["sex"])
            except ValidationError as e:
                logger.warning("Stored profile: %s", e)

        activity = ActivityLevel.SEDENTARY
        if record.get("activity"):
            try:
                activity = parse_activity_level(record["activity"])
            except ValidationError as e:
                logger.warning("Stored profile: %s", e)

        return cls(
            age=coerce_number(record.get("age"), integer=True),
            sex=sex,
            weight=coerce_number(record.get("weight")),
            height=coerce_number(record.get("height")),
            activity_level=activity,
        )
