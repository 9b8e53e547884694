import logging
import time
import uuid

from models.budget import BudgetGoal
from models.category import Category
from models.expense import Expense
from store.seed_data import (
    DEFAULT_BUDGET_GOALS, DEFAULT_CATEGORIES, DEFAULT_EXPENSES, DEFAULT_GOAL_PERIOD,
)
from utils.app_config import get_setting

logger = logging.getLogger(__name__)


class MemoryStore:
    """Process-local stand-in for a database: three ordered entity lists.

    No locking; callers mutate sequentially from one UI session.
    """

    def __init__(self, simulate_latency: bool = True):
        self.simulate_latency = simulate_latency
        self.categories: list[Category] = []
        self.expenses: list[Expense] = []
        self.budget_goals: list[BudgetGoal] = []

    def delay(self, ms: int):
        """Fixed-delay suspension point standing in for network latency."""
        if self.simulate_latency and ms > 0:
            time.sleep(ms / 1000)

    @staticmethod
    def new_id(prefix: str) -> str:
        return f"{prefix}-{uuid.uuid4().hex[:12]}"

    def seed_defaults(self):
        """Load the demo categories, expenses and budget goals."""
        start, end = DEFAULT_GOAL_PERIOD
        self.categories.extend(Category(**c) for c in DEFAULT_CATEGORIES)
        self.expenses.extend(Expense(**e) for e in DEFAULT_EXPENSES)
        self.budget_goals.extend(
            BudgetGoal(start_date=start, end_date=end, **g) for g in DEFAULT_BUDGET_GOALS
        )
        logger.info(
            "Seeded %d categories, %d expenses, %d budget goals",
            len(self.categories), len(self.expenses), len(self.budget_goals),
        )

    @staticmethod
    def open_default() -> "MemoryStore":
        """Startup factory: builds the store according to the user's config."""
        store = MemoryStore(simulate_latency=bool(get_setting("simulate_latency", True)))
        if get_setting("seed_demo_data", True):
            store.seed_defaults()
        return store
