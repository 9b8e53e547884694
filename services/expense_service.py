import logging
from dataclasses import replace

from models.category import Category
from models.expense import Expense
from services.errors import NotFoundError
from store.expense_dao import ExpenseDAO
from store.memory_store import MemoryStore
from utils.constants import READ_LATENCY_MS, WRITE_LATENCY_MS
from utils.validation import validate_amount

logger = logging.getLogger(__name__)


def filter_expenses(expenses: list[Expense], categories: list[Category], query: str) -> list[Expense]:
    """Case-insensitive match on description or category name; blank query keeps all."""
    query = (query or "").strip().lower()
    if not query:
        return list(expenses)
    names = {c.id: c.name.lower() for c in categories}
    return [
        e for e in expenses
        if query in e.description.lower() or query in names.get(e.category_id, "")
    ]


class ExpenseService:
    def __init__(self, expense_dao: ExpenseDAO, store: MemoryStore):
        self._dao = expense_dao
        self._store = store

    def get_all(self) -> list[Expense]:
        self._store.delay(READ_LATENCY_MS)
        return self._dao.get_all()

    def get_recent(self, limit: int | None = None) -> list[Expense]:
        """Newest first; ties keep insertion order."""
        expenses = sorted(self.get_all(), key=lambda e: e.date, reverse=True)
        return expenses if limit is None else expenses[:limit]

    def create(
        self,
        description: str,
        amount: float,
        category_id: str,
        date: str,
    ) -> Expense:
        """Raises ValueError unless amount is finite and positive.

        category_id is not checked against stored categories.
        """
        self._store.delay(WRITE_LATENCY_MS)
        amount = validate_amount(amount)
        expense = self._dao.create(description.strip(), amount, category_id, date)
        logger.info(
            "Added expense %s: %s %.2f in %s",
            expense.id, expense.description, expense.amount, expense.category_id,
        )
        return expense

    def update(self, expense: Expense) -> Expense:
        self._store.delay(WRITE_LATENCY_MS)
        expense = replace(expense, amount=validate_amount(expense.amount))
        updated = self._dao.update(expense)
        if updated is None:
            raise NotFoundError("Expense", expense.id)
        logger.info("Updated expense %s", updated.id)
        return updated

    def delete(self, expense_id: str):
        self._store.delay(WRITE_LATENCY_MS)
        deleted = self._dao.delete(expense_id)
        if deleted is None:
            raise NotFoundError("Expense", expense_id)
        logger.info("Deleted expense %s (%s)", expense_id, deleted.description)
