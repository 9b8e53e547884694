import logging
import math
from dataclasses import replace

from models.budget import BudgetGoal
from store.budget_dao import BudgetGoalDAO
from store.category_dao import CategoryDAO
from store.memory_store import MemoryStore
from utils.constants import READ_LATENCY_MS, WRITE_LATENCY_MS
from utils.date_helpers import current_month_range

logger = logging.getLogger(__name__)


def coerce_limit(value) -> float:
    """Turn user input into a usable limit; anything invalid becomes 0.0."""
    if isinstance(value, str):
        value = value.strip().replace(",", "").lstrip("$")
    try:
        limit = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(limit) or limit < 0:
        return 0.0
    return limit


def default_goal_id(category_id: str) -> str:
    return f"goal-{category_id}"


class BudgetService:
    def __init__(
        self,
        budget_dao: BudgetGoalDAO,
        category_dao: CategoryDAO,
        store: MemoryStore,
    ):
        self._budget_dao = budget_dao
        self._category_dao = category_dao
        self._store = store

    def get_all(self) -> list[BudgetGoal]:
        """Return all goals, first creating a zero-limit goal for any category without one."""
        self._store.delay(READ_LATENCY_MS)
        for cat in self._category_dao.get_all():
            if self._budget_dao.get_by_category(cat.id) is None:
                goal = self.ensure_default(cat.id)
                logger.debug("Backfilled budget goal %s for category %s", goal.id, cat.id)
        return self._budget_dao.get_all()

    def get_for_category(self, category_id: str) -> BudgetGoal | None:
        return self._budget_dao.get_by_category(category_id)

    def ensure_default(self, category_id: str) -> BudgetGoal:
        """Return the category's goal, inserting a zero limit for this month if absent."""
        existing = self._budget_dao.get_by_category(category_id)
        if existing:
            return existing
        start, end = current_month_range()
        return self._budget_dao.insert(BudgetGoal(
            id=default_goal_id(category_id),
            category_id=category_id,
            limit=0.0,
            start_date=start,
            end_date=end,
        ))

    def upsert(self, goal: BudgetGoal) -> BudgetGoal:
        """Create or update the goal for goal.category_id.

        category_id is the only match key: a goal whose id belongs to some
        other category never gets overwritten. The stored id is kept on
        update; a new goal gets goal.id or the default id.
        """
        self._store.delay(WRITE_LATENCY_MS)
        limit = coerce_limit(goal.limit)
        existing = self._budget_dao.get_by_category(goal.category_id)
        if existing:
            merged = replace(
                existing,
                limit=limit,
                start_date=goal.start_date or existing.start_date,
                end_date=goal.end_date or existing.end_date,
            )
            saved = self._budget_dao.upsert(merged)
            logger.info("Updated budget goal %s: limit=%.2f", saved.id, saved.limit)
            return saved

        goal_id = goal.id or default_goal_id(goal.category_id)
        owner = self._budget_dao.get_by_id(goal_id)
        if owner and owner.category_id != goal.category_id:
            goal_id = self._store.new_id("goal")
        start, end = current_month_range()
        saved = self._budget_dao.insert(replace(
            goal,
            id=goal_id,
            limit=limit,
            start_date=goal.start_date or start,
            end_date=goal.end_date or end,
        ))
        logger.info("Added budget goal %s: limit=%.2f", saved.id, saved.limit)
        return saved

    def set_limit(self, category_id: str, limit) -> BudgetGoal:
        return self.upsert(BudgetGoal(id="", category_id=category_id, limit=limit))
