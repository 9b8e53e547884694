from dataclasses import replace
from typing import Optional
from store.memory_store import MemoryStore
from models.budget import BudgetGoal


class BudgetGoalDAO:
    def __init__(self, store: MemoryStore):
        self._store = store

    def get_all(self) -> list[BudgetGoal]:
        return [replace(g) for g in self._store.budget_goals]

    def get_by_category(self, category_id: str) -> Optional[BudgetGoal]:
        goal = next(
            (g for g in self._store.budget_goals if g.category_id == category_id), None
        )
        return replace(goal) if goal else None

    def get_by_id(self, goal_id: str) -> Optional[BudgetGoal]:
        goal = next((g for g in self._store.budget_goals if g.id == goal_id), None)
        return replace(goal) if goal else None

    def limits_by_category(self) -> dict[str, float]:
        return {g.category_id: g.limit for g in self._store.budget_goals}

    def insert(self, goal: BudgetGoal) -> BudgetGoal:
        self._store.budget_goals.append(replace(goal))
        return replace(goal)

    def upsert(self, goal: BudgetGoal) -> BudgetGoal:
        """Insert, or replace the goal with the same category_id."""
        for i, g in enumerate(self._store.budget_goals):
            if g.category_id == goal.category_id:
                self._store.budget_goals[i] = replace(goal)
                return replace(goal)
        return self.insert(goal)

    def delete_by_category(self, category_id: str) -> int:
        before = len(self._store.budget_goals)
        self._store.budget_goals[:] = [
            g for g in self._store.budget_goals if g.category_id != category_id
        ]
        return before - len(self._store.budget_goals)
