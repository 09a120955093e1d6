"""Match scoring weights and reference tables.

Weights, the related-category synonym table and the city whitelist are
versioned configuration, loadable from JSON or YAML.
"""

import json
import yaml
from pathlib import Path
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator


DEFAULT_RELATED_CATEGORIES: Dict[str, List[str]] = {
    "health": ["health", "medical", "healthcare", "hospital"],
    "education": ["education", "teaching", "school", "university"],
    "agriculture": ["agriculture", "farming", "agritech", "food"],
    "tech": ["tech", "technology", "software", "it", "digital"],
    "administration": ["administration", "government", "public", "policy"],
    "logistics": ["logistics", "supply", "transport", "delivery"],
    "finance": ["finance", "banking", "fintech", "investment"],
}

DEFAULT_MOROCCAN_CITIES: List[str] = [
    "casablanca",
    "rabat",
    "marrakech",
    "kenitra",
    "tangier",
    "agadir",
    "fes",
    "meknes",
    "oujda",
]


class MatchWeights(BaseModel):
    """Points awarded by each match component.

    Component maxima (exact expertise + skills + exact location +
    willingness cap) must not exceed the total cap.
    """

    expertise_exact: int = 40
    expertise_related: int = 25
    skill_max: int = 30
    location_exact: int = 15
    location_same_country: int = 10
    willing_to_mentor: int = 8
    willing_to_cofund: int = 7
    workshop_bonus: int = 2
    willingness_cap: int = 15
    total_cap: int = 100

    related_categories: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_RELATED_CATEGORIES.items()}
    )
    moroccan_cities: List[str] = Field(default_factory=lambda: list(DEFAULT_MOROCCAN_CITIES))

    version: str = "1.0"

    @field_validator(
        "expertise_exact", "expertise_related", "skill_max", "location_exact",
        "location_same_country", "willing_to_mentor", "willing_to_cofund",
        "workshop_bonus", "willingness_cap", "total_cap",
    )
    @classmethod
    def non_negative(cls, v: int) -> int:
        """Ensure points are between 0 and 100."""
        if not 0 <= v <= 100:
            raise ValueError(f"Points must be between 0 and 100, got {v}")
        return v

    @field_validator("related_categories")
    @classmethod
    def lowercase_related(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        return {k.lower(): [s.lower() for s in synonyms] for k, synonyms in v.items()}

    @field_validator("moroccan_cities")
    @classmethod
    def lowercase_cities(cls, v: List[str]) -> List[str]:
        return [c.lower() for c in v]

    def model_post_init(self, __context) -> None:
        """Validate ordering of partial vs full credit and the overall budget."""
        if self.expertise_related > self.expertise_exact:
            raise ValueError(
                f"expertise_related ({self.expertise_related}) cannot exceed "
                f"expertise_exact ({self.expertise_exact})"
            )
        if self.location_same_country > self.location_exact:
            raise ValueError(
                f"location_same_country ({self.location_same_country}) cannot exceed "
                f"location_exact ({self.location_exact})"
            )

        total = self.expertise_exact + self.skill_max + self.location_exact + self.willingness_cap
        if total > self.total_cap:
            raise ValueError(
                f"Component maxima sum to {total}, above total_cap {self.total_cap}. "
                f"(E:{self.expertise_exact}, S:{self.skill_max}, "
                f"L:{self.location_exact}, W:{self.willingness_cap})"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump()


DEFAULT_WEIGHTS = MatchWeights()


def load_match_config(filepath: Optional[str] = None) -> MatchWeights:
    """Load match weights and tables from file or return defaults.

    Supports JSON and YAML formats. Missing keys keep their defaults.

    Args:
        filepath: Optional path to a match configuration file

    Returns:
        MatchWeights instance

    Raises:
        FileNotFoundError: If filepath provided but doesn't exist
        ValueError: If the configuration is invalid
    """

    if not filepath:
        return DEFAULT_WEIGHTS

    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Match config file not found: {filepath}")

    if path.suffix == '.json':
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")

    return MatchWeights(**(data or {}))


def save_match_config(weights: MatchWeights, filepath: str) -> None:
    """Save match weights and tables to file (extension determines format)."""

    path = Path(filepath)
    data = weights.to_dict()

    if path.suffix == '.json':
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
    elif path.suffix in ['.yaml', '.yml']:
        with open(path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, default_flow_style=False, allow_unicode=True)
    else:
        raise ValueError(f"Unsupported file format: {path.suffix}")
