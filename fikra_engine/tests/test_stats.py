"""Tests for categorization coverage statistics."""

from fikra_engine.services import categorization_report, compute_categorization_stats


def _row(idea_id, created_at, **fields):
    row = {
        "id": idea_id,
        "title": f"Idea {idea_id}",
        "created_at": created_at,
        "moroccan_priorities": None,
        "budget_tier": None,
        "location_type": None,
        "complexity": None,
        "sdg_alignment": None,
    }
    row.update(fields)
    return row


ROWS = [
    _row(
        "1", "2025-01-01T00:00:00Z",
        moroccan_priorities=["green_morocco", "rural_development"],
        budget_tier="<1K",
        location_type="rural",
        complexity="beginner",
        sdg_alignment={"sdgTags": [7, 13, 15, 1, 2]},
    ),
    _row(
        "2", "2025-02-01T00:00:00Z",
        moroccan_priorities=["green_morocco"],
        budget_tier="1K-5K",
        complexity="beginner",
    ),
    _row("3", "2025-03-01T00:00:00Z"),
    _row("4", "2025-04-01T00:00:00Z"),
]


def test_coverage_and_distributions():
    stats = compute_categorization_stats(ROWS)

    assert stats.total == 4
    assert stats.coverage["moroccan_priorities"].count == 2
    assert stats.coverage["moroccan_priorities"].percentage == 50
    assert stats.coverage["location_type"].percentage == 25
    assert stats.coverage["sdg_alignment"].count == 1
    assert stats.priorities == {"green_morocco": 2, "rural_development": 1}
    assert stats.budget_tiers == {"<1K": 1, "1K-5K": 1}
    assert stats.complexities == {"beginner": 2}


def test_uncategorized_newest_first():
    stats = compute_categorization_stats(ROWS)

    assert [idea.id for idea in stats.uncategorized] == ["4", "3"]
    assert stats.uncategorized[0].title == "Idea 4"


def test_percentages_are_rounded():
    rows = [_row("1", None, budget_tier="<1K"), _row("2", None, budget_tier="<1K"), _row("3", None)]

    stats = compute_categorization_stats(rows)

    assert stats.coverage["budget_tier"].percentage == 67
    assert stats.coverage["budget_tier"].count == 2


def test_uncategorized_list_is_capped():
    rows = [_row(str(i), f"2025-01-{i % 28 + 1:02d}") for i in range(60)]

    stats = compute_categorization_stats(rows)

    assert stats.total == 60
    assert len(stats.uncategorized) == 50


def test_empty_store():
    stats = compute_categorization_stats([])

    assert stats.total == 0
    assert all(c.percentage == 0 for c in stats.coverage.values())
    assert stats.uncategorized == []


def test_report_reads_from_store(mock_db):
    mock_db.get_categorization_rows.return_value = ROWS

    stats = categorization_report(mock_db)

    assert stats.total == 4
    mock_db.get_categorization_rows.assert_called_once_with()
