import logging
from dataclasses import replace

from models.category import Category, CATEGORY_ICONS, DEFAULT_ICON
from services.budget_service import BudgetService
from services.errors import NotFoundError
from store.budget_dao import BudgetGoalDAO
from store.category_dao import CategoryDAO
from store.expense_dao import ExpenseDAO
from store.memory_store import MemoryStore
from utils.constants import DEFAULT_CATEGORY_COLOR, READ_LATENCY_MS, WRITE_LATENCY_MS
from utils.validation import validate_color

logger = logging.getLogger(__name__)


def _normalize_style(icon: str, color: str) -> tuple[str, str]:
    """Unknown icon keys and malformed colors fall back to the defaults."""
    if icon not in CATEGORY_ICONS:
        icon = DEFAULT_ICON
    try:
        color = validate_color(color)
    except ValueError:
        logger.warning("Replacing invalid category color %r", color)
        color = DEFAULT_CATEGORY_COLOR
    return icon, color


class CategoryService:
    def __init__(
        self,
        category_dao: CategoryDAO,
        expense_dao: ExpenseDAO,
        budget_dao: BudgetGoalDAO,
        budget_service: BudgetService,
        store: MemoryStore,
    ):
        self._dao = category_dao
        self._expense_dao = expense_dao
        self._budget_dao = budget_dao
        self._budget_svc = budget_service
        self._store = store

    def get_all(self) -> list[Category]:
        self._store.delay(READ_LATENCY_MS)
        return self._dao.get_all()

    def get_by_id(self, category_id: str) -> Category | None:
        return self._dao.get_by_id(category_id)

    def create(
        self,
        name: str,
        icon: str = DEFAULT_ICON,
        color: str = DEFAULT_CATEGORY_COLOR,
    ) -> Category:
        """Add a category along with a zero-limit budget goal for this month."""
        self._store.delay(WRITE_LATENCY_MS)
        icon, color = _normalize_style(icon, color)
        category = self._dao.create(name.strip(), icon, color)
        self._budget_svc.ensure_default(category.id)
        logger.info("Added category %s (%s)", category.id, category.name)
        return category

    def update(self, category: Category) -> Category:
        self._store.delay(WRITE_LATENCY_MS)
        icon, color = _normalize_style(category.icon, category.color)
        updated = self._dao.update(replace(category, icon=icon, color=color))
        if updated is None:
            raise NotFoundError("Category", category.id)
        logger.info("Updated category %s (%s)", updated.id, updated.name)
        return updated

    def delete(self, category_id: str):
        """Remove the category, its budget goal and every expense filed under it."""
        self._store.delay(WRITE_LATENCY_MS)
        deleted = self._dao.delete(category_id)
        if deleted is None:
            raise NotFoundError("Category", category_id)
        goals = self._budget_dao.delete_by_category(category_id)
        expenses = self._expense_dao.delete_by_category(category_id)
        logger.info(
            "Deleted category %s (%s) with %d budget goal(s) and %d expense(s)",
            category_id, deleted.name, goals, expenses,
        )
