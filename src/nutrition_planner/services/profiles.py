"""Assemble calculator inputs from stored profile records."""

from collections.abc import Mapping
from dataclasses import dataclass

from nutrition_planner.domain.requirements import (
    ActivityLevel,
    Goal,
    InvalidInputError,
    SexCategory,
    UserBiometricInput,
)


@dataclass(frozen=True)
class ProfileDefaults:
    """Values used for profile fields the user has not filled in."""

    gender: str = "female"
    age_years: int = 30
    weight_kg: float = 70
    height_cm: float = 170
    activity_level: str = ActivityLevel.MODERATELY_ACTIVE.value
    goal: str = Goal.MAINTENANCE.value


def build_biometric_input(
    profile: Mapping[str, object], defaults: ProfileDefaults | None = None
) -> UserBiometricInput:
    """Map a profile record to biometric input.

    Accepts both camelCase and snake_case keys. Empty fields take the
    defaults; filled but unusable fields raise ``InvalidInputError``.
    """
    resolved = defaults or ProfileDefaults()
    gender = _text(profile, "gender") or resolved.gender
    activity = (
        _text(profile, "activityLevel", "activity_level") or resolved.activity_level
    )
    goal = _text(profile, "healthGoals", "goal") or resolved.goal
    age = _number(profile, "age", "age_years")
    weight = _number(profile, "weight", "weight_kg")
    height = _number(profile, "height", "height_cm")

    return UserBiometricInput(
        sex=SexCategory.parse(gender),
        age_years=resolved.age_years if age is None else _whole_years(age),
        weight_kg=resolved.weight_kg if weight is None else weight,
        height_cm=resolved.height_cm if height is None else height,
        activity_level=ActivityLevel.parse(activity),
        goal=Goal.parse(goal),
    )


def _first(profile: Mapping[str, object], *keys: str) -> object | None:
    for key in keys:
        value = profile.get(key)
        if value is not None and value != "":
            return value
    return None


def _text(profile: Mapping[str, object], *keys: str) -> str | None:
    value = _first(profile, *keys)
    if value is None:
        return None
    return str(value).strip() or None


def _number(profile: Mapping[str, object], *keys: str) -> float | None:
    value = _first(profile, *keys)
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidInputError(f"{keys[0]} must be numeric, got {value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"{keys[0]} must be numeric, got {value!r}") from exc


def _whole_years(age: float) -> int:
    if not age.is_integer():
        raise InvalidInputError(f"age must be a whole number of years, got {age}")
    return int(age)
