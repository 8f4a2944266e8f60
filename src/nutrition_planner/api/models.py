"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field

from nutrition_planner.domain.progress import DailyIntake
from nutrition_planner.domain.requirements import (
    ActivityLevel,
    Goal,
    SexCategory,
    UserBiometricInput,
)


class BiometricsPayload(BaseModel):
    """User biometrics as submitted by clients."""

    sex: str | None = Field(default=None, alias="gender")
    age_years: int
    weight_kg: float
    height_cm: float
    activity_level: str = ActivityLevel.SEDENTARY.value
    goal: str | None = None

    model_config = {"populate_by_name": True}

    def to_domain(self) -> UserBiometricInput:
        """Convert to the calculator input, validating ranges."""
        return UserBiometricInput(
            sex=SexCategory.parse(self.sex),
            age_years=self.age_years,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
            activity_level=ActivityLevel.parse(self.activity_level),
            goal=Goal.parse(self.goal),
        )


class IntakePayload(BaseModel):
    """What the user consumed today."""

    calories: float = 0
    protein_g: float = 0
    carbs_g: float = 0
    fats_g: float = 0
    water_glasses: float = 0
    micronutrients: dict[str, float] = Field(default_factory=dict)

    def to_domain(self) -> DailyIntake:
        return DailyIntake(
            calories=self.calories,
            protein_g=self.protein_g,
            carbs_g=self.carbs_g,
            fats_g=self.fats_g,
            water_glasses=self.water_glasses,
            micronutrients=dict(self.micronutrients),
        )


class ProgressPayload(BaseModel):
    """Biometrics and intake for a progress check."""

    biometrics: BiometricsPayload
    intake: IntakePayload
