from dataclasses import dataclass


@dataclass
class Expense:
    id: str
    description: str
    amount: float
    category_id: str
    date: str               # 'YYYY-MM-DD'
