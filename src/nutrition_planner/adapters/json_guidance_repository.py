"""JSON file implementation of the guidance repository."""

import json
from dataclasses import dataclass
from pathlib import Path

from nutrition_planner.domain.guidance import FoodRecommendations, SexGuidance
from nutrition_planner.domain.requirements import SexCategory
from nutrition_planner.services.guidance import GuidanceCatalogError

DEFAULT_GUIDANCE_PATH = Path(__file__).resolve().parents[1] / "data" / "guidance.json"

_PROFILES = (SexCategory.MALE, SexCategory.FEMALE)


@dataclass
class JsonGuidanceRepository:
    """Reads the guidance catalog from a JSON document on disk."""

    path: Path = DEFAULT_GUIDANCE_PATH

    @classmethod
    def create(cls, path: str | None = None) -> "JsonGuidanceRepository":
        if path is None:
            return cls()
        return cls(path=Path(path))

    def load(self) -> dict[SexCategory, SexGuidance]:
        """Parse the catalog, failing loudly on missing sections."""
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise GuidanceCatalogError(
                f"Cannot read guidance catalog {self.path}: {exc}"
            ) from exc
        if not isinstance(payload, dict):
            raise GuidanceCatalogError("Guidance catalog must be a JSON object")
        return {sex: _parse_section(payload, sex) for sex in _PROFILES}


def _parse_section(payload: dict[str, object], sex: SexCategory) -> SexGuidance:
    section = payload.get(sex.value)
    if not isinstance(section, dict):
        raise GuidanceCatalogError(f"Guidance catalog has no '{sex.value}' section")
    return SexGuidance(
        tips=_string_list(section, "tips", sex),
        foods=FoodRecommendations(
            recommended=_string_list(section, "recommended", sex),
            focus=_string_list(section, "focus", sex),
        ),
    )


def _string_list(
    section: dict[str, object], key: str, sex: SexCategory
) -> tuple[str, ...]:
    values = section.get(key)
    if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
        raise GuidanceCatalogError(f"'{sex.value}.{key}' must be a list of strings")
    return tuple(values)
