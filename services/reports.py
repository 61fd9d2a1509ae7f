"""Report generator for spending analysis."""

from typing import List, Optional
from currency import RateProvider
from logger import get_logger
from models.budget import BudgetSummary
from models.expense import Expense
from models.report import SpendingReport
from tools.reports import (
    GROUP_BY_CHOICES,
    GROUP_BY_NAME,
    build_categories,
    build_chart_data,
    group_expenses,
    top_category,
)

logger = get_logger()


class ReportGenerator:
    """Builds spending reports for one user in a selectable currency.

    Data is fetched once by load(). Changing the display currency with
    select_currency() recomputes the report from the expenses already in
    memory without querying the database again.

    Args:
        budgets: BudgetService for per-budget spend summaries.
        expenses: ExpenseService for the user's expenses.
        rates: RateProvider used for conversion.
        group_by: "name" to group expenses by their name, "budget" to group
            them by the budget they belong to.
        currency: Initial display currency (defaults to the provider's base).
    """

    def __init__(
        self,
        budgets,
        expenses,
        rates: RateProvider,
        group_by: str = GROUP_BY_NAME,
        currency: Optional[str] = None,
    ):
        if group_by not in GROUP_BY_CHOICES:
            raise ValueError(f"Unknown report grouping: {group_by}")

        self.budgets = budgets
        self.expenses = expenses
        self.rates = rates
        self.group_by = group_by
        self.budget_list: List[BudgetSummary] = []
        self.expense_list: List[Expense] = []
        self.report: Optional[SpendingReport] = None
        self.selected_currency = (currency or rates.base_currency).upper()
        # Fail early on an unknown starting currency
        self.rates.rate(self.selected_currency)

    def load(self, owner: Optional[str]) -> SpendingReport:
        """Fetch the user's budgets and expenses and build the report.

        Args:
            owner: Email of the signed-in user, or None.

        Returns:
            The report in the currently selected currency.
        """
        self.budget_list = self.budgets.find_summaries(owner)
        self.expense_list = self.expenses.find_by_owner(owner)
        logger.debug(
            f"Loaded {len(self.budget_list)} budgets and "
            f"{len(self.expense_list)} expenses for report"
        )
        return self._recompute()

    def select_currency(self, code: str) -> SpendingReport:
        """Switch the display currency and rebuild from fetched data.

        Args:
            code: Currency code, e.g. "EUR".

        Returns:
            The report in the new currency.

        Raises:
            UnknownCurrencyError: If the rate provider does not know the code.
        """
        code = code.upper()
        self.rates.rate(code)
        self.selected_currency = code
        return self._recompute()

    def chart_data(self) -> dict:
        """Pie chart payload for the current expenses and currency."""
        return build_chart_data(self._group_totals())

    def _group_totals(self):
        budget_names = {s.budget.id: s.budget.name for s in self.budget_list}
        return group_expenses(
            self.expense_list,
            self.rates.rate(self.selected_currency),
            group_by=self.group_by,
            budget_names=budget_names,
        )

    def _recompute(self) -> SpendingReport:
        total_spend, categories = build_categories(self._group_totals())

        self.report = SpendingReport(
            currency=self.selected_currency,
            total_spend=total_spend,
            categories=categories,
            top_category=top_category(categories),
            budgets=self.budget_list,
        )
        return self.report
