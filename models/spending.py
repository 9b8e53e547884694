from dataclasses import dataclass
from typing import Optional

from utils.constants import PIE_LABEL_MIN_PERCENT


@dataclass
class SpendingByCategory:
    """Per-category spending joined with its budget limit. Never stored."""

    category_id: str
    name: str
    total_spending: float
    color: str
    budget_limit: Optional[float] = None

    @property
    def has_budget(self) -> bool:
        return self.budget_limit is not None and self.budget_limit > 0

    @property
    def progress_percentage(self) -> float:
        """Spending as a percentage of the limit, clamped to [0, 100]."""
        if not self.has_budget:
            return 0.0
        return max(0.0, min(self.total_spending / self.budget_limit * 100, 100.0))

    @property
    def is_over_budget(self) -> bool:
        if self.budget_limit is None:
            return False
        return self.total_spending > self.budget_limit

    @property
    def remaining_amount(self) -> float:
        return (self.budget_limit or 0.0) - self.total_spending

    @property
    def over_amount(self) -> float:
        if not self.is_over_budget:
            return 0.0
        return self.total_spending - self.budget_limit


@dataclass
class ChartSegment:
    category_id: str
    name: str
    value: float
    color: str
    percent: float = 0.0    # share of total spending, 0-100

    @property
    def show_label(self) -> bool:
        return self.percent >= PIE_LABEL_MIN_PERCENT


@dataclass
class SpendingSummary:
    total_spending: float = 0.0
    total_budget: float = 0.0
    over_budget_count: int = 0

    @property
    def remaining(self) -> float:
        return self.total_budget - self.total_spending
