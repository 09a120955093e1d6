"""Categorization rule tables and heuristics.

Maps idea vocabulary (mostly French, some English) to Morocco's national
priority programmes, and derives budget tier, location type and complexity.
"""

import re
from typing import Dict, List, Optional

# Declared order matters: priorities are detected and truncated in this order.
PRIORITY_CODES: List[str] = [
    "green_morocco",
    "digital_morocco",
    "vision_2030",
    "youth_employment",
    "women_entrepreneurship",
    "rural_development",
    "healthcare_improvement",
]

MOROCCAN_PRIORITIES_MAP: Dict[str, Dict[str, List[str]]] = {
    # Green Morocco Plan
    "green_morocco": {
        "keywords": [
            "solaire",
            "renouvelable",
            "énergie verte",
            "recyclage",
            "déchets",
            "pollution",
            "carbone",
            "écologique",
            "durable",
            "agriculture durable",
            "eau",
            "hydrique",
            "climat",
        ],
        "categories": ["agriculture", "sustainability", "environment", "energy", "infrastructure"],
    },
    # Digital Morocco 2030
    "digital_morocco": {
        "keywords": [
            "ia",
            "intelligence artificielle",
            "app",
            "digital",
            "numérique",
            "tech",
            "automatisation",
            "blockchain",
            "iot",
            "streaming",
            "api",
            "smart",
        ],
        "categories": [
            "tech",
            "e-commerce",
            "media",
            "education",
            "finance",
            "infrastructure",
            "customer_service",
        ],
    },
    # Vision 2030 (economic development)
    "vision_2030": {
        "keywords": [
            "port",
            "logistique",
            "compétitivité",
            "export",
            "qualité",
            "standard",
            "productivité",
            "efficacité",
            "optimisation",
            "performance",
        ],
        "categories": ["logistics", "infrastructure", "agriculture", "commerce"],
    },
    # Youth employment
    "youth_employment": {
        "keywords": [
            "emploi",
            "job",
            "étudiant",
            "jeunes",
            "entrepreneur",
            "startup",
            "compétences",
            "formation",
            "recrutement",
            "talent",
            "chômage",
            "opportunité",
        ],
        "categories": ["education", "tech", "finance", "inclusion", "media"],
    },
    # Women entrepreneurship
    "women_entrepreneurship": {
        "keywords": [
            "femme",
            "femmes",
            "maman",
            "artisan femme",
            "coopérative",
            "maternel",
            "égalité",
            "gender",
        ],
        "categories": ["agriculture", "e-commerce", "commerce"],
    },
    # Rural development
    "rural_development": {
        "keywords": [
            "rural",
            "village",
            "campagne",
            "agriculteur",
            "agriculture",
            "zones reculées",
            "infrastructure rurale",
            "accès rural",
        ],
        "categories": ["agriculture", "infrastructure"],
    },
    # Healthcare improvement
    "healthcare_improvement": {
        "keywords": [
            "santé",
            "health",
            "télémédecine",
            "thérapie",
            "psychologie",
            "clinique",
            "docteur",
            "médical",
            "hôpital",
            "santé mentale",
            "anxiété",
            "depression",
        ],
        "categories": ["health", "santé"],
    },
}

# Audience markers checked after the keyword lists
AUDIENCE_MARKERS: Dict[str, List[str]] = {
    "youth_employment": ["genz", "jeune", "étudiant"],
    "women_entrepreneurship": ["femme", "femmes"],
}

BUDGET_TIERS: List[str] = ["<1K", "1K-5K", "5K-10K", "10K+"]
LOCATION_TYPES: List[str] = ["urban", "rural", "both"]
COMPLEXITY_LEVELS: List[str] = ["beginner", "intermediate", "advanced"]

# Cost labels used by the submission form, checked before parsing numbers
_BUDGET_LABELS: List[tuple] = [
    (("<1K", "1K-3K"), "<1K"),
    (("1K-5K", "3K-5K"), "1K-5K"),
    (("5K-10K",), "5K-10K"),
    (("10K+",), "10K+"),
]

RURAL_MARKERS: List[str] = [
    "rural",
    "village",
    "campagne",
    "agriculteur",
    "montagne",
    "atlas",
    "reculée",
]

# A text mentioning "maroc" without one of these reads as nationwide
MAJOR_CITIES: List[str] = ["casablanca", "rabat", "marrakech", "tanger", "fès", "agadir"]

URBAN_CITIES: List[str] = [
    "casablanca",
    "rabat",
    "marrakech",
    "marrakesh",
    "fès",
    "tanger",
    "tetouan",
    "tétouan",
    "essaouira",
    "agadir",
    "oujda",
    "meknès",
    "beni mellal",
    "khouribga",
    "el jadida",
    "safi",
]

ADVANCED_CAPABILITY_MARKERS: List[str] = [
    "blockchain",
    "optimization",
    "optimisation",
    "nlp",
    "computer_vision",
    "vision par ordinateur",
]


def map_budget_tier(estimated_cost: Optional[str]) -> Optional[str]:
    """Map a free-form cost estimate to a budget tier.

    Form labels ("3K-5K", "<1K", ...) win; otherwise the largest number
    in the string decides.

    Args:
        estimated_cost: Cost string as entered, e.g. "3K-5K" or "2000 MAD"

    Returns:
        One of BUDGET_TIERS, or None when nothing can be parsed
    """

    if not estimated_cost or not estimated_cost.strip():
        return None

    for labels, tier in _BUDGET_LABELS:
        if any(label in estimated_cost for label in labels):
            return tier

    numbers = re.findall(r"\d+", estimated_cost)
    if not numbers:
        return None

    max_budget = max(int(n) for n in numbers)
    if max_budget < 1000:
        return "<1K"
    elif max_budget <= 5000:
        return "1K-5K"
    elif max_budget <= 10000:
        return "5K-10K"
    else:
        return "10K+"


def determine_location_type(
    location: Optional[str],
    category: Optional[str],
    problem: Optional[str],
) -> Optional[str]:
    """Classify where an idea is meant to operate.

    Rural markers win over everything, then a nationwide "maroc" mention,
    then known cities. Agriculture defaults to rural, anything else to urban.

    Returns:
        "rural", "both", "urban", or None when all inputs are blank
    """

    if not any((value or "").strip() for value in (location, category, problem)):
        return None

    normalized = f"{location or ''} {problem or ''}".lower()

    if any(marker in normalized for marker in RURAL_MARKERS):
        return "rural"

    if "maroc" in normalized and not any(city in normalized for city in MAJOR_CITIES):
        return "both"

    if any(city in normalized for city in URBAN_CITIES):
        return "urban"

    cat = (category or "").lower()
    if cat == "agriculture":
        return "rural"

    return "urban"


def determine_complexity(
    ai_capabilities: Optional[List[str]],
    integration_points: Optional[List[str]],
    budget_tier: Optional[str],
) -> Optional[str]:
    """Estimate delivery complexity from scope and budget.

    Needs the budget tier, so call it after map_budget_tier. A missing tier
    is read as the lowest one.

    Returns:
        "advanced", "intermediate" or "beginner"
    """

    capabilities = ai_capabilities or []
    integrations = integration_points or []
    tier = budget_tier or "<1K"

    advanced = (
        len(capabilities) >= 3
        or any(
            marker in str(c).lower()
            for c in capabilities
            for marker in ADVANCED_CAPABILITY_MARKERS
        )
        or len(integrations) >= 4
        or tier == "10K+"
    )
    if advanced:
        return "advanced"

    beginner = (
        len(capabilities) <= 1
        and len(integrations) <= 2
        and tier in ("<1K", "1K-5K")
    )
    if beginner:
        return "beginner"

    return "intermediate"
