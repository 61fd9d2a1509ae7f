"""Derived report models. None of these are persisted."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

from models.budget import BudgetSummary


@dataclass
class ReportCategory:
    """One expense group in a spending report.

    Attributes:
        name: Group label (expense name or budget name).
        amount: Converted total for the group.
        percentage: Share of total spend, rounded to 2 decimals. NaN when
            total spend is zero.
    """

    name: str
    amount: Decimal
    percentage: Decimal

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "amount": str(self.amount),
            "percentage": str(self.percentage),
        }


@dataclass
class SpendingReport:
    """Spending analysis in a single display currency."""

    currency: str
    total_spend: Decimal
    categories: List[ReportCategory]
    top_category: Optional[ReportCategory]
    budgets: List[BudgetSummary] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "currency": self.currency,
            "total_spend": str(self.total_spend),
            "categories": [c.to_dict() for c in self.categories],
            "top_category": self.top_category.to_dict() if self.top_category else None,
            "budgets": [b.to_dict() for b in self.budgets],
        }
