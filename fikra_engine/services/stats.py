"""Categorization coverage statistics for the admin dashboard."""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, Iterable, List

from ..models import CategorizationStats, FieldCoverage, UncategorizedIdea

COVERAGE_FIELDS = (
    "moroccan_priorities",
    "budget_tier",
    "location_type",
    "complexity",
    "sdg_alignment",
)

# Fields whose joint absence marks an idea as uncategorized
CORE_FIELDS = ("moroccan_priorities", "budget_tier", "location_type", "complexity")

MAX_UNCATEGORIZED = 50


def _percentage(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(count * 100 / total + 0.5)


def compute_categorization_stats(rows: Iterable[Dict[str, Any]]) -> CategorizationStats:
    """Summarize categorization coverage over idea rows.

    A column counts as covered when it is not null. Distributions count
    each priority code, budget tier and complexity level.

    Args:
        rows: Idea rows with id, title, created_at and the derived columns

    Returns:
        CategorizationStats with coverage percentages rounded to integers
    """
    rows = list(rows)
    total = len(rows)

    coverage: Dict[str, FieldCoverage] = {}
    for name in COVERAGE_FIELDS:
        count = sum(1 for row in rows if row.get(name) is not None)
        coverage[name] = FieldCoverage(count=count, percentage=_percentage(count, total))

    priorities: Counter = Counter()
    budget_tiers: Counter = Counter()
    complexities: Counter = Counter()
    for row in rows:
        codes = row.get("moroccan_priorities") or []
        if isinstance(codes, list):
            priorities.update(str(c) for c in codes)
        if row.get("budget_tier"):
            budget_tiers[row["budget_tier"]] += 1
        if row.get("complexity"):
            complexities[row["complexity"]] += 1

    uncategorized_rows: List[Dict[str, Any]] = [
        row for row in rows
        if all(row.get(name) is None for name in CORE_FIELDS)
    ]
    uncategorized_rows.sort(key=lambda r: str(r.get("created_at") or ""), reverse=True)

    return CategorizationStats(
        total=total,
        coverage=coverage,
        priorities=dict(priorities),
        budget_tiers=dict(budget_tiers),
        complexities=dict(complexities),
        uncategorized=[
            UncategorizedIdea(
                id=str(row.get("id")),
                title=row.get("title"),
                created_at=str(row["created_at"]) if row.get("created_at") else None,
            )
            for row in uncategorized_rows[:MAX_UNCATEGORIZED]
        ],
    )


def categorization_report(db) -> CategorizationStats:
    """Fetch derived columns from the idea store and summarize them."""
    return compute_categorization_stats(db.get_categorization_rows())
