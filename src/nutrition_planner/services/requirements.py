"""Daily nutrition requirement calculator."""

import logging
import math
from dataclasses import dataclass

from nutrition_planner.domain.requirements import (
    ActivityLevel,
    Goal,
    NutritionRequirement,
    SexCategory,
    UserBiometricInput,
)

_logger = logging.getLogger(__name__)

ACTIVITY_MULTIPLIERS = {
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHTLY_ACTIVE: 1.375,
    ActivityLevel.MODERATELY_ACTIVE: 1.55,
    ActivityLevel.VERY_ACTIVE: 1.725,
    ActivityLevel.SUPER_ACTIVE: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS[ActivityLevel.SEDENTARY]

GOAL_CALORIE_OFFSET = 500
CALORIE_FLOOR = {SexCategory.MALE: 1500, SexCategory.FEMALE: 1200}

# protein, carbs, fat as fractions of total energy
MACRO_SPLIT = {
    SexCategory.MALE: (0.25, 0.45, 0.30),
    SexCategory.FEMALE: (0.20, 0.45, 0.35),
}
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9

FIBER_G = {SexCategory.MALE: 38, SexCategory.FEMALE: 25}
WATER_GLASSES = {SexCategory.MALE: 12, SexCategory.FEMALE: 9}


def resolve_sex(sex: SexCategory, fallback: SexCategory) -> SexCategory:
    """Return the formula profile to use for a sex category."""
    if sex is SexCategory.UNSPECIFIED:
        if fallback is SexCategory.UNSPECIFIED:
            raise ValueError("sex fallback must be male or female")
        return fallback
    return sex


def calculate_bmr(
    sex: SexCategory, weight_kg: float, height_cm: float, age_years: int
) -> float:
    """Basal metabolic rate via the Mifflin-St Jeor equation."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age_years
    if sex is SexCategory.MALE:
        return base + 5
    return base - 161


def activity_multiplier(activity_level: ActivityLevel | str) -> float:
    """Return the TDEE multiplier, defaulting to sedentary for unknown levels."""
    try:
        level = ActivityLevel(activity_level)
    except ValueError:
        return DEFAULT_ACTIVITY_MULTIPLIER
    return ACTIVITY_MULTIPLIERS[level]


def calculate_tdee(bmr: float, activity_level: ActivityLevel | str) -> float:
    """Total daily energy expenditure."""
    return bmr * activity_multiplier(activity_level)


def adjust_for_goal(tdee: float, goal: Goal | None) -> float:
    if goal is Goal.WEIGHT_LOSS:
        return tdee - GOAL_CALORIE_OFFSET
    if goal is Goal.WEIGHT_GAIN:
        return tdee + GOAL_CALORIE_OFFSET
    return tdee


def micronutrient_targets(sex: SexCategory, age_years: int) -> dict[str, float]:
    """Return sex-specific micronutrient targets.

    Female and male profiles track different nutrients; the key sets are
    disjoint.
    """
    if sex is SexCategory.FEMALE:
        return {
            "iron": 18 if age_years <= 50 else 8,
            "calcium": 1000 if age_years <= 50 else 1200,
            "vitaminD": 15,
            "folate": 400,
        }
    return {
        "zinc": 11,
        "magnesium": 400 if age_years <= 30 else 420,
        "potassium": 3400,
        "vitaminB12": 2.4,
    }


def compute_requirements(
    biometrics: UserBiometricInput,
    sex_fallback: SexCategory = SexCategory.FEMALE,
) -> NutritionRequirement:
    """Compute the recommended daily nutrient budget for a user."""
    sex = resolve_sex(biometrics.sex, sex_fallback)
    bmr = calculate_bmr(
        sex, biometrics.weight_kg, biometrics.height_cm, biometrics.age_years
    )
    tdee = calculate_tdee(bmr, biometrics.activity_level)
    target = max(adjust_for_goal(tdee, biometrics.goal), CALORIE_FLOOR[sex])

    protein_pct, carbs_pct, fat_pct = MACRO_SPLIT[sex]
    return NutritionRequirement(
        calories=_round_half_up(target),
        protein_g=_round_half_up(target * protein_pct / KCAL_PER_G_PROTEIN),
        carbs_g=_round_half_up(target * carbs_pct / KCAL_PER_G_CARBS),
        fats_g=_round_half_up(target * fat_pct / KCAL_PER_G_FAT),
        fiber_g=FIBER_G[sex],
        water_glasses=WATER_GLASSES[sex],
        micronutrients=micronutrient_targets(sex, biometrics.age_years),
    )


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


@dataclass
class RequirementService:
    """Application service applying the configured sex fallback policy."""

    sex_fallback: SexCategory = SexCategory.FEMALE

    def compute(self, biometrics: UserBiometricInput) -> NutritionRequirement:
        """Compute requirements for the given biometrics."""
        requirement = compute_requirements(biometrics, self.sex_fallback)
        _logger.debug(
            "Computed requirements: sex=%s activity=%s goal=%s calories=%s",
            biometrics.sex,
            biometrics.activity_level,
            biometrics.goal,
            requirement.calories,
        )
        return requirement

    def profile_sex(self, sex: SexCategory) -> SexCategory:
        """Return the male/female profile a sex category is served with."""
        return resolve_sex(sex, self.sex_fallback)
