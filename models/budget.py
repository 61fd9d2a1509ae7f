"""Budget models."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

DEFAULT_ICON = "😀"
DEFAULT_EDIT_ICON = "🎯"


@dataclass
class Budget:
    """Represents a named spending allocation owned by a user.

    Attributes:
        id: Unique identifier (auto-generated).
        name: Budget name, never empty.
        amount: Target amount in currency-agnostic base units.
        created_by: Email of the owning user.
        icon: Glyph shown next to the budget.
        created_at: Timestamp when the budget was created.
    """

    id: int
    name: str
    amount: Decimal
    created_by: Optional[str]
    icon: Optional[str] = DEFAULT_ICON
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert budget to dictionary for display and export."""
        return {
            "id": self.id,
            "name": self.name,
            "amount": float(self.amount),
            "created_by": self.created_by,
            "icon": self.icon,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


@dataclass
class BudgetSummary:
    """A budget together with the spend recorded against it."""

    budget: Budget
    total_spend: Decimal
    total_items: int

    @property
    def remaining(self) -> Decimal:
        return self.budget.amount - self.total_spend

    def to_dict(self) -> dict:
        data = self.budget.to_dict()
        data["total_spend"] = float(self.total_spend)
        data["total_items"] = self.total_items
        data["remaining"] = float(self.remaining)
        return data
