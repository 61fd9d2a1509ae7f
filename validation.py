"""Form validation for budgets and expenses.

These functions are pure: they take raw user input (strings from a form or
the command line, or numbers from a caller) and either return cleaned values
or raise ValidationError with a message suitable for showing to the user.

Budget creation and budget editing deliberately apply different amount
rules. Creation accepts only positive whole amounts; editing accepts any
amount >= 0, including fractional ones.
"""

from decimal import Decimal, InvalidOperation
from typing import Optional, Tuple, Union

AmountInput = Union[str, int, float, Decimal, None]

INVALID_BUDGET_NAME = "Please enter a valid budget name."
INVALID_BUDGET_AMOUNT = (
    "Please enter a valid budget amount (positive integer, no decimals)."
)
EMPTY_BUDGET_NAME = "Budget name cannot be empty!"
NEGATIVE_BUDGET_AMOUNT = "Budget amount must be greater than or equal to 0!"
UNPARSABLE_BUDGET_AMOUNT = "Budget amount must be a number!"
INVALID_EXPENSE_NAME = "Please enter a valid expense name."
INVALID_EXPENSE_AMOUNT = "Please enter a valid expense amount (greater than 0)."


class ValidationError(ValueError):
    """Raised when form input is rejected.

    Attributes:
        message: User-facing description of the problem.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def parse_amount(value: AmountInput) -> Optional[Decimal]:
    """Parse an amount from user input.

    Args:
        value: A string, int, float, or Decimal.

    Returns:
        The amount as a Decimal, or None if it is missing, unparsable,
        infinite, or NaN.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = Decimal(str(value))
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None

    if not parsed.is_finite():
        return None
    return parsed


def _is_blank(value: AmountInput) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_new_budget(name: Optional[str], amount: AmountInput) -> Tuple[str, Decimal]:
    """Validate input for creating a budget.

    Args:
        name: Budget name; surrounding whitespace is stripped.
        amount: Budget amount; must be a positive whole number. "5000.0" is
            accepted as 5000.

    Returns:
        Tuple of (clean name, integral Decimal amount).

    Raises:
        ValidationError: If the name is empty or the amount is invalid.
    """
    clean_name = (name or "").strip()
    if not clean_name:
        raise ValidationError(INVALID_BUDGET_NAME)

    parsed = parse_amount(amount)
    if parsed is None or parsed <= 0 or parsed != parsed.to_integral_value():
        raise ValidationError(INVALID_BUDGET_AMOUNT)

    return clean_name, Decimal(int(parsed))


def validate_budget_edit(name: Optional[str], amount: AmountInput) -> Tuple[str, Decimal]:
    """Validate input for editing a budget.

    An empty amount is treated as 0.

    Args:
        name: Budget name; surrounding whitespace is stripped.
        amount: Budget amount; any number >= 0.

    Returns:
        Tuple of (clean name, Decimal amount).

    Raises:
        ValidationError: If the name is empty or the amount is negative or
            not a number.
    """
    clean_name = (name or "").strip()
    if not clean_name:
        raise ValidationError(EMPTY_BUDGET_NAME)

    if _is_blank(amount):
        return clean_name, Decimal("0")

    parsed = parse_amount(amount)
    if parsed is None:
        raise ValidationError(UNPARSABLE_BUDGET_AMOUNT)
    if parsed < 0:
        raise ValidationError(NEGATIVE_BUDGET_AMOUNT)

    return clean_name, parsed


def validate_new_expense(name: Optional[str], amount: AmountInput) -> Tuple[str, Decimal]:
    """Validate input for recording an expense.

    Args:
        name: Expense name; surrounding whitespace is stripped.
        amount: Expense amount; any number > 0, fractional allowed.

    Returns:
        Tuple of (clean name, Decimal amount).

    Raises:
        ValidationError: If the name is empty or the amount is invalid.
    """
    clean_name = (name or "").strip()
    if not clean_name:
        raise ValidationError(INVALID_EXPENSE_NAME)

    parsed = parse_amount(amount)
    if parsed is None or parsed <= 0:
        raise ValidationError(INVALID_EXPENSE_AMOUNT)

    return clean_name, parsed
