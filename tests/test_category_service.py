import pytest

from models.category import DEFAULT_ICON
from services.errors import NotFoundError
from utils.constants import DEFAULT_CATEGORY_COLOR
from utils.validation import is_hex_color


def test_create_appends_category_with_fresh_id(services):
    first = services.categories.create("Pets", "gift", "#123456")
    second = services.categories.create("Pets", "gift", "#123456")

    assert first.id != second.id
    assert first.id.startswith("cat-")
    assert [c.name for c in services.categories.get_all()] == ["Pets", "Pets"]


def test_create_strips_name_and_falls_back_to_default_icon(services):
    cat = services.categories.create("  Books  ", "no-such-icon")
    assert cat.name == "Books"
    assert cat.icon == DEFAULT_ICON
    assert cat.color == "#cccccc"


def test_create_adds_zero_limit_goal(services):
    cat = services.categories.create("Pets", "gift", "#123456")

    goals = [g for g in services.budgets.get_all() if g.category_id == cat.id]
    assert len(goals) == 1
    assert goals[0].limit == 0.0
    assert goals[0].id == f"goal-{cat.id}"
    assert goals[0].start_date <= goals[0].end_date


def test_get_all_returns_copies(seeded_services):
    cats = seeded_services.categories.get_all()
    cats[0].name = "Changed"
    cats.clear()
    assert seeded_services.categories.get_all()[0].name == "Housing"


def test_get_by_id(seeded_services):
    assert seeded_services.categories.get_by_id("cat2").name == "Food & Dining"
    assert seeded_services.categories.get_by_id("missing") is None


def test_update_replaces_entry_in_place(seeded_services):
    cat = seeded_services.categories.get_by_id("cat3")
    cat.name = "Transit"
    cat.color = "#000000"

    updated = seeded_services.categories.update(cat)

    assert updated.name == "Transit"
    cats = seeded_services.categories.get_all()
    assert cats[2].id == "cat3"
    assert cats[2].name == "Transit"
    assert len(cats) == 10


def test_update_missing_raises_not_found(seeded_services):
    cat = seeded_services.categories.get_by_id("cat1")
    cat.id = "nope"
    with pytest.raises(NotFoundError) as exc:
        seeded_services.categories.update(cat)
    assert exc.value.kind == "Category"
    assert exc.value.entity_id == "nope"
    assert str(exc.value) == "Category not found: nope"


def test_delete_cascades_to_expenses_and_goal(seeded_services):
    seeded_services.categories.delete("cat2")

    assert seeded_services.categories.get_by_id("cat2") is None
    assert all(e.category_id != "cat2" for e in seeded_services.expenses.get_all())
    assert all(g.category_id != "cat2" for g in seeded_services.budgets.get_all())
    assert len(seeded_services.expenses.get_all()) == 15


def test_delete_leaves_other_categories_alone(seeded_services):
    seeded_services.categories.delete("cat10")
    assert len(seeded_services.categories.get_all()) == 9
    assert len(seeded_services.expenses.get_all()) == 17


def test_delete_missing_raises_not_found(seeded_services):
    with pytest.raises(NotFoundError):
        seeded_services.categories.delete("nope")
    assert len(seeded_services.categories.get_all()) == 10


def test_not_found_is_a_value_error(services):
    with pytest.raises(ValueError):
        services.categories.delete("nope")


def test_update_falls_back_to_default_icon(seeded_services):
    cat = seeded_services.categories.get_by_id("cat1")
    cat.icon = "no-such-icon"
    assert seeded_services.categories.update(cat).icon == DEFAULT_ICON
    assert seeded_services.categories.get_by_id("cat1").icon == DEFAULT_ICON


@pytest.mark.parametrize("color", ["#blue", "blue", "#12345"])
def test_malformed_color_is_replaced_with_default(services, color):
    cat = services.categories.create("Pets", "gift", color)
    assert cat.color == DEFAULT_CATEGORY_COLOR


def test_color_without_hash_is_normalized(services):
    assert services.categories.create("Pets", "gift", "ff9800").color == "#ff9800"


def test_update_replaces_malformed_color(seeded_services):
    cat = seeded_services.categories.get_by_id("cat2")
    cat.color = "#blue"
    seeded_services.categories.update(cat)
    assert seeded_services.categories.get_by_id("cat2").color == DEFAULT_CATEGORY_COLOR


def test_chart_colors_are_always_hex(services):
    cat = services.categories.create("Pets", "gift", "#blue")
    services.expenses.create("Food", 10, cat.id, "2024-06-02")
    segments = services.reports.get_chart_segments()
    assert all(is_hex_color(s.color) for s in segments)
