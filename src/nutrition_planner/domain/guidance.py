"""Guidance domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodRecommendations:
    """Foods to eat broadly and foods to focus on."""

    recommended: tuple[str, ...]
    focus: tuple[str, ...]


@dataclass(frozen=True)
class SexGuidance:
    """Tips and food recommendations for one sex category."""

    tips: tuple[str, ...]
    foods: FoodRecommendations
