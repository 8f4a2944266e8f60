"""Daily intake scoring against nutrition requirements."""

import math
from dataclasses import dataclass

from nutrition_planner.domain.progress import (
    DailyIntake,
    MicronutrientProgress,
    MicronutrientStatus,
    NutrientProgress,
    ProgressReport,
)
from nutrition_planner.domain.requirements import (
    MICRONUTRIENT_UNITS,
    InvalidInputError,
    NutritionRequirement,
)

LOW_THRESHOLD_PERCENT = 70
EXCELLENT_THRESHOLD_PERCENT = 90


@dataclass
class ProgressService:
    """Compares what a user ate with what they should eat."""

    low_threshold: float = LOW_THRESHOLD_PERCENT
    excellent_threshold: float = EXCELLENT_THRESHOLD_PERCENT

    def score(
        self, requirement: NutritionRequirement, intake: DailyIntake
    ) -> ProgressReport:
        """Return capped progress percentages for each tracked nutrient."""
        _ensure_non_negative(intake)
        macros = [
            _progress("calories", intake.calories, requirement.calories),
            _progress("protein_g", intake.protein_g, requirement.protein_g),
            _progress("carbs_g", intake.carbs_g, requirement.carbs_g),
            _progress("fats_g", intake.fats_g, requirement.fats_g),
            _progress(
                "water_glasses", intake.water_glasses, requirement.water_glasses
            ),
        ]
        micronutrients = []
        for name, target in requirement.micronutrients.items():
            progress = _progress(name, intake.micronutrients.get(name, 0), target)
            micronutrients.append(
                MicronutrientProgress(
                    progress=progress,
                    unit=MICRONUTRIENT_UNITS.get(name, ""),
                    status=self.status_for(progress.percent),
                )
            )
        return ProgressReport(macros=macros, micronutrients=micronutrients)

    def status_for(self, percent: float) -> MicronutrientStatus:
        if percent < self.low_threshold:
            return MicronutrientStatus.LOW
        if percent < self.excellent_threshold:
            return MicronutrientStatus.GOOD
        return MicronutrientStatus.EXCELLENT


def _progress(name: str, consumed: float, target: float) -> NutrientProgress:
    percent = 0.0 if target <= 0 else min(consumed / target * 100, 100.0)
    return NutrientProgress(
        name=name, consumed=consumed, target=target, percent=percent
    )


def _ensure_non_negative(intake: DailyIntake) -> None:
    values = {
        "calories": intake.calories,
        "protein_g": intake.protein_g,
        "carbs_g": intake.carbs_g,
        "fats_g": intake.fats_g,
        "water_glasses": intake.water_glasses,
        **intake.micronutrients,
    }
    for name, value in values.items():
        if not math.isfinite(value) or value < 0:
            raise InvalidInputError(
                f"{name} intake must be a finite non-negative number, got {value}"
            )
