"""Spending report calculations.

Pure functions over already-fetched expenses. Nothing here touches the
database; ReportGenerator in services/reports.py does the fetching and
feeds the results through these.
"""

from decimal import Decimal, ROUND_HALF_UP
from itertools import cycle, islice
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models.expense import Expense
from models.report import ReportCategory

GROUP_BY_NAME = "name"
GROUP_BY_BUDGET = "budget"
GROUP_BY_CHOICES = (GROUP_BY_NAME, GROUP_BY_BUDGET)

CHART_COLORS = [
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#C9CBCF",
]

_CENTS = Decimal("0.01")


def quantize_cents(value: Decimal) -> Decimal:
    """Round to 2 decimal places, half up. NaN passes through unchanged."""
    if value.is_nan():
        return value
    return value.quantize(_CENTS, rounding=ROUND_HALF_UP)


def group_expenses(
    expenses: Iterable[Expense],
    rate: Decimal,
    group_by: str = GROUP_BY_NAME,
    budget_names: Optional[Mapping[int, str]] = None,
) -> Dict[str, Decimal]:
    """Sum converted expense amounts per group.

    Grouping by name merges same-named expenses across different budgets.
    Grouping by budget keeps them apart and labels each group with its
    budget's name; two budgets with the same name get their id appended.

    Args:
        expenses: Expenses to group.
        rate: Conversion rate applied to every amount.
        group_by: GROUP_BY_NAME or GROUP_BY_BUDGET.
        budget_names: Budget id -> name, used to label budget groups.

    Returns:
        Ordered mapping of group label to converted total, in order of
        first appearance.

    Raises:
        ValueError: If group_by is not a known grouping.
    """
    if group_by not in GROUP_BY_CHOICES:
        raise ValueError(f"Unknown report grouping: {group_by}")

    budget_names = budget_names or {}
    totals: Dict[object, Decimal] = {}
    labels: Dict[object, str] = {}

    for expense in expenses:
        if group_by == GROUP_BY_NAME:
            key = expense.name
            label = expense.name
        else:
            key = expense.budget_id
            label = budget_names.get(expense.budget_id, f"Budget {expense.budget_id}")

        if key not in totals:
            totals[key] = Decimal("0")
            labels[key] = label
        totals[key] += expense.amount * rate

    # Disambiguate budget groups that share a display name
    seen: Dict[str, int] = {}
    for label in labels.values():
        seen[label] = seen.get(label, 0) + 1

    result: Dict[str, Decimal] = {}
    for key, total in totals.items():
        label = labels[key]
        if seen[label] > 1:
            label = f"{label} (#{key})"
        result[label] = total
    return result


def percentage_of(amount: Decimal, total: Decimal) -> Decimal:
    """Share of total as a percentage rounded to 2 decimals.

    Returns NaN when total is zero.
    """
    if total == 0:
        return Decimal("NaN")
    return quantize_cents(amount / total * 100)


def build_categories(
    group_totals: Mapping[str, Decimal],
) -> Tuple[Decimal, List[ReportCategory]]:
    """Turn group totals into ranked report categories.

    Args:
        group_totals: Label -> converted total, as from group_expenses.

    Returns:
        Tuple of (total spend, categories sorted by amount descending). Ties
        keep their input order.
    """
    total_spend = sum(group_totals.values(), Decimal("0"))

    ranked = sorted(group_totals.items(), key=lambda item: item[1], reverse=True)

    categories = [
        ReportCategory(
            name=name,
            amount=quantize_cents(amount),
            percentage=percentage_of(amount, total_spend),
        )
        for name, amount in ranked
    ]
    return quantize_cents(total_spend), categories


def top_category(categories: List[ReportCategory]) -> Optional[ReportCategory]:
    """The category with the largest amount, or None if there are none."""
    return categories[0] if categories else None


def build_chart_data(group_totals: Mapping[str, Decimal]) -> dict:
    """Build the pie chart payload for the presentation layer.

    Args:
        group_totals: Label -> converted total, in display order.

    Returns:
        Dictionary with "labels" and a single-entry "datasets" list. Colours
        cycle through CHART_COLORS when there are more groups than colours.
    """
    colors = list(islice(cycle(CHART_COLORS), len(group_totals)))
    return {
        "labels": list(group_totals.keys()),
        "datasets": [
            {
                "data": [float(quantize_cents(v)) for v in group_totals.values()],
                "backgroundColor": colors,
                "hoverBackgroundColor": list(colors),
            }
        ],
    }
