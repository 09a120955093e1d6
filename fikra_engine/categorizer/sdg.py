"""Morocco priority to UN Sustainable Development Goal mapping."""

from typing import Dict, List, Tuple

MAX_SDG_TAGS = 5

# Rule-derived tags are treated as high confidence
RULE_CONFIDENCE = 0.9

PRIORITY_TO_SDG: Dict[str, List[int]] = {
    "green_morocco": [7, 13, 15],  # Clean Energy, Climate Action, Life on Land
    "digital_morocco": [9],  # Industry, Innovation, Infrastructure
    "vision_2030": [8, 9],  # Decent Work, Innovation
    "youth_employment": [8],  # Decent Work
    "women_entrepreneurship": [5, 8],  # Gender Equality, Decent Work
    "rural_development": [1, 2, 6, 11],  # No Poverty, Zero Hunger, Clean Water, Sustainable Cities
    "healthcare_improvement": [3],  # Good Health
}

SDG_INFO: Dict[int, Dict[str, str]] = {
    1: {"name": "No Poverty", "name_fr": "Pas de pauvreté"},
    2: {"name": "Zero Hunger", "name_fr": "Faim zéro"},
    3: {"name": "Good Health and Well-being", "name_fr": "Bonne santé et bien-être"},
    4: {"name": "Quality Education", "name_fr": "Éducation de qualité"},
    5: {"name": "Gender Equality", "name_fr": "Égalité entre les sexes"},
    6: {"name": "Clean Water and Sanitation", "name_fr": "Eau propre et assainissement"},
    7: {"name": "Affordable and Clean Energy", "name_fr": "Énergie propre et d'un coût abordable"},
    8: {"name": "Decent Work and Economic Growth", "name_fr": "Travail décent et croissance économique"},
    9: {"name": "Industry, Innovation and Infrastructure", "name_fr": "Industrie, innovation et infrastructure"},
    10: {"name": "Reduced Inequalities", "name_fr": "Inégalités réduites"},
    11: {"name": "Sustainable Cities and Communities", "name_fr": "Villes et communautés durables"},
    12: {"name": "Responsible Consumption and Production", "name_fr": "Consommation et production responsables"},
    13: {"name": "Climate Action", "name_fr": "Mesures relatives à la lutte contre les changements climatiques"},
    14: {"name": "Life Below Water", "name_fr": "Vie aquatique"},
    15: {"name": "Life on Land", "name_fr": "Vie terrestre"},
    16: {"name": "Peace, Justice and Strong Institutions", "name_fr": "Paix, justice et institutions efficaces"},
    17: {"name": "Partnerships for the Goals", "name_fr": "Partenariats pour la réalisation des objectifs"},
}


def map_priorities_to_sdgs(priorities: List[str]) -> Tuple[List[int], Dict[str, float]]:
    """Derive SDG tags from national priority codes.

    Tags are collected in encounter order, deduplicated and cut to the
    first five. Unknown codes contribute nothing.

    Args:
        priorities: Priority codes, e.g. ["green_morocco"]

    Returns:
        (sdg_tags, confidence) where confidence maps "sdg_<n>" to 0.9
    """

    sdg_tags: List[int] = []
    for priority in priorities:
        for sdg in PRIORITY_TO_SDG.get(priority, []):
            if sdg not in sdg_tags:
                sdg_tags.append(sdg)

    sdg_tags = sdg_tags[:MAX_SDG_TAGS]
    confidence = {f"sdg_{sdg}": RULE_CONFIDENCE for sdg in sdg_tags}

    return sdg_tags, confidence


def describe_sdgs(sdg_tags: List[int], lang: str = "en") -> List[str]:
    """Render SDG ids as "SDG 7: Affordable and Clean Energy" labels."""
    key = "name_fr" if lang == "fr" else "name"
    labels = []
    for sdg in sdg_tags:
        info = SDG_INFO.get(sdg)
        if info is None:
            labels.append(f"SDG {sdg}")
        else:
            labels.append(f"SDG {sdg}: {info[key]}")
    return labels
