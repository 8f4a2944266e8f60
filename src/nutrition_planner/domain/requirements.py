"""Domain models for daily nutrition requirements."""

import math
from dataclasses import dataclass
from enum import StrEnum

MAX_AGE_YEARS = 150
MAX_WEIGHT_KG = 700
MAX_HEIGHT_CM = 300


class InvalidInputError(ValueError):
    """Raised when biometric or intake values cannot be used."""


class SexCategory(StrEnum):
    """Sex category used to select formulas and targets."""

    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, raw: str | None) -> "SexCategory":
        """Parse a stored gender value, mapping anything unknown to unspecified."""
        if raw is None:
            return cls.UNSPECIFIED
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return cls.UNSPECIFIED


class ActivityLevel(StrEnum):
    """Self-reported activity level."""

    SEDENTARY = "sedentary"
    LIGHTLY_ACTIVE = "lightly_active"
    MODERATELY_ACTIVE = "moderately_active"
    VERY_ACTIVE = "very_active"
    SUPER_ACTIVE = "super_active"

    @classmethod
    def parse(cls, raw: str) -> "ActivityLevel | str":
        """Parse an activity level, keeping unrecognized text as-is."""
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return raw


class Goal(StrEnum):
    """Body-weight goal."""

    WEIGHT_LOSS = "weight_loss"
    WEIGHT_GAIN = "weight_gain"
    MAINTENANCE = "maintenance"

    @classmethod
    def parse(cls, raw: str | None) -> "Goal | None":
        """Parse a goal, returning None for free text that names no goal."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().lower())
        except ValueError:
            return None


@dataclass(frozen=True)
class UserBiometricInput:
    """Biometric and lifestyle inputs for a requirement calculation.

    ``activity_level`` keeps unrecognized strings as-is; they are costed
    with the sedentary multiplier.
    """

    sex: SexCategory
    age_years: int
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevel | str = ActivityLevel.SEDENTARY
    goal: Goal | None = None

    def __post_init__(self) -> None:
        if not _in_range(self.weight_kg, MAX_WEIGHT_KG):
            raise InvalidInputError(
                f"weight_kg must be in (0, {MAX_WEIGHT_KG}], got {self.weight_kg}"
            )
        if not _in_range(self.height_cm, MAX_HEIGHT_CM):
            raise InvalidInputError(
                f"height_cm must be in (0, {MAX_HEIGHT_CM}], got {self.height_cm}"
            )
        if self.age_years <= 0 or self.age_years > MAX_AGE_YEARS:
            raise InvalidInputError(
                f"age_years must be in 1..{MAX_AGE_YEARS}, got {self.age_years}"
            )


def _in_range(value: float, upper: float) -> bool:
    return math.isfinite(value) and 0 < value <= upper


@dataclass(frozen=True)
class NutritionRequirement:
    """Recommended daily nutrient budget."""

    calories: int
    protein_g: int
    carbs_g: int
    fats_g: int
    fiber_g: int
    water_glasses: int
    micronutrients: dict[str, float]


MICRONUTRIENT_UNITS = {
    "iron": "mg",
    "calcium": "mg",
    "vitaminD": "mcg",
    "folate": "mcg",
    "zinc": "mg",
    "magnesium": "mg",
    "potassium": "mg",
    "vitaminB12": "mcg",
}
