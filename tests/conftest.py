from unittest.mock import MagicMock

import pytest

from services.budget_service import BudgetService
from services.category_service import CategoryService
from services.expense_service import ExpenseService
from services.report_service import ReportService
from store.budget_dao import BudgetGoalDAO
from store.category_dao import CategoryDAO
from store.expense_dao import ExpenseDAO
import store.memory_store as memory_store
from store.memory_store import MemoryStore


class Services:
    """All four services wired over one store, the way main.py wires them."""

    def __init__(self, store: MemoryStore):
        self.store = store
        category_dao = CategoryDAO(store)
        expense_dao = ExpenseDAO(store)
        budget_dao = BudgetGoalDAO(store)
        self.budgets = BudgetService(budget_dao, category_dao, store)
        self.categories = CategoryService(
            category_dao, expense_dao, budget_dao, self.budgets, store
        )
        self.expenses = ExpenseService(expense_dao, store)
        self.reports = ReportService(category_dao, expense_dao, budget_dao, store)


@pytest.fixture
def store():
    """Empty store with latency simulation off."""
    return MemoryStore(simulate_latency=False)


@pytest.fixture
def seeded_store(store):
    store.seed_defaults()
    return store


@pytest.fixture
def services(store):
    return Services(store)


@pytest.fixture
def seeded_services(seeded_store):
    return Services(seeded_store)


@pytest.fixture
def slow_services():
    """Services over an empty store that still simulates latency."""
    return Services(MemoryStore(simulate_latency=True))


@pytest.fixture
def fake_sleep_services(monkeypatch, seeded_store):
    """Seeded services with latency on and time.sleep replaced by a mock."""
    sleep = MagicMock()
    monkeypatch.setattr(memory_store.time, "sleep", sleep)
    seeded_store.simulate_latency = True
    return Services(seeded_store), sleep
