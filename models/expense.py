from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass
class Expense:
    id: int
    name: str  # also the report category, e.g. "Groceries"
    amount: Decimal  # may be fractional
    budget_id: int
    created_at: date

    def to_dict(self) -> dict:
        """Convert expense to dictionary for display and export."""
        return {
            "id": self.id,
            "name": self.name,
            "amount": float(self.amount),
            "budget_id": self.budget_id,
            "created_at": self.created_at.isoformat(),
        }
