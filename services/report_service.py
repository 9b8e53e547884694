from models.spending import ChartSegment, SpendingByCategory, SpendingSummary
from store.budget_dao import BudgetGoalDAO
from store.category_dao import CategoryDAO
from store.expense_dao import ExpenseDAO
from store.memory_store import MemoryStore
from utils.constants import SPENDING_LATENCY_MS


class ReportService:
    def __init__(
        self,
        category_dao: CategoryDAO,
        expense_dao: ExpenseDAO,
        budget_dao: BudgetGoalDAO,
        store: MemoryStore,
    ):
        self._category_dao = category_dao
        self._expense_dao = expense_dao
        self._budget_dao = budget_dao
        self._store = store

    def get_spending_by_category(self) -> list[SpendingByCategory]:
        """Return one row per category, in category order, with spending totals
        and the category's budget limit (None when it has no goal)."""
        self._store.delay(SPENDING_LATENCY_MS)
        spending: dict[str, float] = {}
        for expense in self._expense_dao.get_all():
            spending[expense.category_id] = spending.get(expense.category_id, 0.0) + expense.amount
        limits = self._budget_dao.limits_by_category()

        return [
            SpendingByCategory(
                category_id=cat.id,
                name=cat.name,
                total_spending=spending.get(cat.id, 0.0),
                color=cat.color,
                budget_limit=limits.get(cat.id),
            )
            for cat in self._category_dao.get_all()
        ]

    def get_budget_progress(
        self, spending: list[SpendingByCategory] | None = None
    ) -> list[SpendingByCategory]:
        """Rows with a positive limit, for the progress bars."""
        rows = self.get_spending_by_category() if spending is None else spending
        return [r for r in rows if r.has_budget]

    def get_chart_segments(
        self, spending: list[SpendingByCategory] | None = None
    ) -> list[ChartSegment]:
        """Pie/legend data. Categories with no spending are left out."""
        rows = self.get_spending_by_category() if spending is None else spending
        rows = [r for r in rows if r.total_spending > 0]
        total = sum(r.total_spending for r in rows)
        return [
            ChartSegment(
                category_id=r.category_id,
                name=r.name,
                value=r.total_spending,
                color=r.color,
                percent=r.total_spending / total * 100 if total else 0.0,
            )
            for r in rows
        ]

    def get_summary(
        self, spending: list[SpendingByCategory] | None = None
    ) -> SpendingSummary:
        rows = self.get_spending_by_category() if spending is None else spending
        return SpendingSummary(
            total_spending=sum(r.total_spending for r in rows),
            total_budget=sum(r.budget_limit for r in rows if r.has_budget),
            over_budget_count=sum(1 for r in rows if r.has_budget and r.is_over_budget),
        )

    def get_expense_counts(self) -> dict[str, int]:
        """{category_id: number of expenses} for categories that have any."""
        counts: dict[str, int] = {}
        for expense in self._expense_dao.get_all():
            counts[expense.category_id] = counts.get(expense.category_id, 0) + 1
        return counts
