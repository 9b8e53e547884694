import math

import pytest

from models.budget import BudgetGoal
from services.budget_service import coerce_limit, default_goal_id


@pytest.mark.parametrize("value, expected", [
    (250, 250.0),
    (12.5, 12.5),
    ("300", 300.0),
    (" $1,200.50 ", 1200.5),
    (None, 0.0),
    ("abc", 0.0),
    ("", 0.0),
    (-5, 0.0),
    (math.nan, 0.0),
    (math.inf, 0.0),
])
def test_coerce_limit(value, expected):
    assert coerce_limit(value) == expected


def test_upsert_updates_existing_goal_by_category(seeded_services):
    saved = seeded_services.budgets.upsert(
        BudgetGoal(id="whatever", category_id="cat2", limit=500)
    )

    assert saved.id == "goal2"
    assert saved.limit == 500.0
    assert saved.start_date == "2024-06-01"
    goals = [g for g in seeded_services.budgets.get_all() if g.category_id == "cat2"]
    assert len(goals) == 1
    assert goals[0].limit == 500.0


def test_upsert_is_idempotent(seeded_services):
    goal = BudgetGoal(id="goal3", category_id="cat3", limit=75)
    seeded_services.budgets.upsert(goal)
    once = seeded_services.budgets.get_all()
    seeded_services.budgets.upsert(goal)
    assert seeded_services.budgets.get_all() == once


def test_upsert_inserts_when_category_has_no_goal(services):
    saved = services.budgets.upsert(BudgetGoal(id="", category_id="cat-x", limit="80"))

    assert saved.id == default_goal_id("cat-x")
    assert saved.limit == 80.0
    assert saved.start_date and saved.end_date
    assert len(services.store.budget_goals) == 1


def test_upsert_never_overwrites_another_categorys_goal(seeded_services):
    saved = seeded_services.budgets.upsert(
        BudgetGoal(id="goal1", category_id="cat-new", limit=10)
    )

    assert saved.id != "goal1"
    housing = seeded_services.budgets.get_for_category("cat1")
    assert housing.id == "goal1"
    assert housing.limit == 1300.0


def test_upsert_coerces_negative_limit(seeded_services):
    saved = seeded_services.budgets.upsert(BudgetGoal(id="", category_id="cat4", limit=-20))
    assert saved.limit == 0.0


def test_set_limit(seeded_services):
    seeded_services.budgets.set_limit("cat8", "250")
    assert seeded_services.budgets.get_for_category("cat8").limit == 250.0


def test_get_all_backfills_missing_goals(seeded_services):
    assert seeded_services.budgets.get_for_category("cat8") is None

    goals = seeded_services.budgets.get_all()

    assert len(goals) == 10
    travel = seeded_services.budgets.get_for_category("cat8")
    assert travel.limit == 0.0
    assert travel.id == "goal-cat8"


def test_ensure_default_returns_existing(seeded_services):
    assert seeded_services.budgets.ensure_default("cat1").id == "goal1"
    assert len(seeded_services.store.budget_goals) == 7
