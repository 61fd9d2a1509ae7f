from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class DashboardTotals:
    total_budget: Decimal = Decimal("0")
    total_expense: Decimal = Decimal("0")
