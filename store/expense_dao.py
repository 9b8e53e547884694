from dataclasses import replace
from typing import Optional
from store.memory_store import MemoryStore
from models.expense import Expense


class ExpenseDAO:
    def __init__(self, store: MemoryStore):
        self._store = store

    def _index_of(self, expense_id: str) -> int:
        for i, e in enumerate(self._store.expenses):
            if e.id == expense_id:
                return i
        return -1

    def get_all(self) -> list[Expense]:
        return [replace(e) for e in self._store.expenses]

    def create(self, description: str, amount: float, category_id: str, date: str) -> Expense:
        expense = Expense(
            id=self._store.new_id("exp"),
            description=description,
            amount=float(amount),
            category_id=category_id,
            date=date,
        )
        self._store.expenses.append(expense)
        return replace(expense)

    def update(self, expense: Expense) -> Optional[Expense]:
        i = self._index_of(expense.id)
        if i == -1:
            return None
        self._store.expenses[i] = replace(expense, amount=float(expense.amount))
        return replace(self._store.expenses[i])

    def delete(self, expense_id: str) -> Optional[Expense]:
        i = self._index_of(expense_id)
        if i == -1:
            return None
        return self._store.expenses.pop(i)

    def delete_by_category(self, category_id: str) -> int:
        """Remove every expense in the category, in place. Returns count removed."""
        before = len(self._store.expenses)
        self._store.expenses[:] = [
            e for e in self._store.expenses if e.category_id != category_id
        ]
        return before - len(self._store.expenses)
