from collections import defaultdict

import pytest


def test_totals_match_sum_of_expenses(seeded_services):
    expected = defaultdict(float)
    for e in seeded_services.expenses.get_all():
        expected[e.category_id] += e.amount

    rows = seeded_services.reports.get_spending_by_category()

    assert [r.category_id for r in rows] == [c.id for c in seeded_services.categories.get_all()]
    for row in rows:
        assert row.total_spending == pytest.approx(expected.get(row.category_id, 0.0))


def test_seeded_rows(seeded_services):
    rows = {r.category_id: r for r in seeded_services.reports.get_spending_by_category()}

    assert rows["cat1"].total_spending == 1275.0
    assert rows["cat1"].budget_limit == 1300.0
    assert rows["cat8"].budget_limit is None
    assert rows["cat4"].total_spending == 375.0


def test_category_without_expenses_reports_zero(services):
    cat = services.categories.create("Empty")
    row = services.reports.get_spending_by_category()[0]
    assert row.category_id == cat.id
    assert row.total_spending == 0.0
    assert row.budget_limit == 0.0


def test_over_budget_scenario(services):
    food = services.categories.create("Food")
    services.expenses.create("Lunch", 30, food.id, "2024-06-01")
    services.expenses.create("Dinner", 20, food.id, "2024-06-02")
    services.budgets.set_limit(food.id, 40)

    row = services.reports.get_spending_by_category()[0]

    assert row.total_spending == 50.0
    assert row.budget_limit == 40.0
    assert row.is_over_budget
    assert row.over_amount == 10.0
    assert row.progress_percentage == 100.0


def test_progress_clamped(services):
    cat = services.categories.create("Big")
    services.expenses.create("Splurge", 500, cat.id, "2024-06-01")
    services.budgets.set_limit(cat.id, 100)

    row = services.reports.get_spending_by_category()[0]

    assert row.progress_percentage == 100.0
    assert row.over_amount == 400.0


def test_orphan_expenses_are_ignored(services):
    cat = services.categories.create("Real")
    services.expenses.create("Real one", 10, cat.id, "2024-06-01")
    services.expenses.create("Orphan", 99, "ghost", "2024-06-01")

    rows = services.reports.get_spending_by_category()
    assert len(rows) == 1
    assert rows[0].total_spending == 10.0


def test_deleting_category_removes_its_row(seeded_services):
    seeded_services.categories.delete("cat5")
    ids = [r.category_id for r in seeded_services.reports.get_spending_by_category()]
    assert "cat5" not in ids


def test_budget_progress_only_positive_limits(seeded_services):
    rows = seeded_services.reports.get_budget_progress()
    assert [r.category_id for r in rows] == [f"cat{i}" for i in range(1, 8)]


def test_chart_segments_exclude_zero_spending(services):
    a = services.categories.create("A", color="#111111")
    b = services.categories.create("B", color="#222222")
    services.categories.create("C")
    services.expenses.create("x", 75, a.id, "2024-06-01")
    services.expenses.create("y", 25, b.id, "2024-06-01")

    segments = services.reports.get_chart_segments()

    assert [s.name for s in segments] == ["A", "B"]
    assert [s.color for s in segments] == ["#111111", "#222222"]
    assert [s.percent for s in segments] == [75.0, 25.0]
    assert sum(s.value for s in segments) == 100.0


def test_chart_segments_empty_when_nothing_spent(services):
    services.categories.create("A")
    assert services.reports.get_chart_segments() == []


def test_summary(seeded_services):
    spending = seeded_services.reports.get_spending_by_category()
    summary = seeded_services.reports.get_summary(spending)

    assert summary.total_spending == pytest.approx(sum(r.total_spending for r in spending))
    assert summary.total_budget == 2500.0
    assert summary.over_budget_count == 0
    assert summary.remaining == pytest.approx(2500.0 - summary.total_spending)


def test_expense_counts(seeded_services):
    counts = seeded_services.reports.get_expense_counts()
    assert counts["cat2"] == 3
    assert counts["cat4"] == 3
    assert sum(counts.values()) == 18
