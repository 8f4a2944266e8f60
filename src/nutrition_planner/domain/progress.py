"""Domain models for daily progress against requirements."""

from dataclasses import dataclass, field
from enum import StrEnum


class MicronutrientStatus(StrEnum):
    """Coarse rating of micronutrient coverage."""

    LOW = "low"
    GOOD = "good"
    EXCELLENT = "excellent"


@dataclass(frozen=True)
class DailyIntake:
    """What a user consumed over one day."""

    calories: float = 0
    protein_g: float = 0
    carbs_g: float = 0
    fats_g: float = 0
    water_glasses: float = 0
    micronutrients: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class NutrientProgress:
    """Consumption of a single nutrient relative to its target."""

    name: str
    consumed: float
    target: float
    percent: float


@dataclass(frozen=True)
class MicronutrientProgress:
    """Micronutrient progress with a coverage rating."""

    progress: NutrientProgress
    unit: str
    status: MicronutrientStatus


@dataclass(frozen=True)
class ProgressReport:
    """Daily progress across macros, water and micronutrients."""

    macros: list[NutrientProgress]
    micronutrients: list[MicronutrientProgress]
