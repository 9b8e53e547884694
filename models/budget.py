from dataclasses import dataclass


@dataclass
class BudgetGoal:
    id: str
    category_id: str
    limit: float = 0.0
    start_date: str = ""    # 'YYYY-MM-DD'
    end_date: str = ""      # 'YYYY-MM-DD'
