"""Budget create/edit form handling.

A form submission is validated, persisted through BudgetService, and turned
into a FormResult. Nothing is raised to the caller: validation and
persistence failures both come back as an unsuccessful result carrying a
message to show the user.
"""

from dataclasses import dataclass
from typing import Callable, Optional
from identity import IdentityProvider, owner_key
from logger import get_logger
from models.budget import Budget, DEFAULT_EDIT_ICON, DEFAULT_ICON
from validation import AmountInput, ValidationError, validate_budget_edit, validate_new_budget

logger = get_logger()

BUDGET_CREATED = "New Budget Created!"
BUDGET_CREATE_FAILED = "An error occurred while creating the budget."
BUDGET_UPDATED = "Budget Updated!"
BUDGET_UPDATE_FAILED = "Failed to update budget. Please try again."
SIGN_IN_REQUIRED = "Please sign in first to create a budget."


@dataclass
class FormResult:
    """Outcome of a form submission.

    Attributes:
        success: Whether the budget was written.
        message: Notice to show the user.
        budget: The created or updated budget on success.
    """

    success: bool
    message: str
    budget: Optional[Budget] = None

    @property
    def close_dialog(self) -> bool:
        """The form is dismissed only when the submission succeeded."""
        return self.success


class BudgetFormController:
    """Handles create and edit submissions for budgets.

    Args:
        budgets: BudgetService used to persist budgets.
        identity: Identity provider for the current user.
        refresh_data: Optional callback invoked after every successful write
            so views can re-fetch.
    """

    def __init__(
        self,
        budgets,
        identity: IdentityProvider,
        refresh_data: Optional[Callable[[], None]] = None,
    ):
        self.budgets = budgets
        self.identity = identity
        self.refresh_data = refresh_data

    def create(
        self, name: Optional[str], amount: AmountInput, icon: Optional[str] = None
    ) -> FormResult:
        """Create a budget owned by the current user.

        Args:
            name: Budget name from the form.
            amount: Budget amount from the form; positive whole numbers only.
            icon: Glyph for the budget (defaults to DEFAULT_ICON).

        Returns:
            FormResult describing the outcome.
        """
        try:
            clean_name, clean_amount = validate_new_budget(name, amount)
        except ValidationError as e:
            logger.debug(f"Rejected budget creation: {e.message}")
            return FormResult(success=False, message=e.message)

        owner = owner_key(self.identity)
        if owner is None:
            logger.warning("Budget creation attempted while signed out")
            return FormResult(success=False, message=SIGN_IN_REQUIRED)

        try:
            budget = self.budgets.create(
                clean_name, clean_amount, owner, icon or DEFAULT_ICON
            )
        except Exception as e:
            logger.error(f"Error creating budget: {e}")
            return FormResult(success=False, message=BUDGET_CREATE_FAILED)

        logger.info(f"Created budget '{budget.name}' (ID: {budget.id})")
        self._refresh()
        return FormResult(success=True, message=BUDGET_CREATED, budget=budget)

    def edit(
        self,
        budget: Budget,
        name: Optional[str],
        amount: AmountInput,
        icon: Optional[str] = None,
    ) -> FormResult:
        """Update an existing budget.

        The update is keyed by budget.id only; the caller is expected to
        have loaded the budget for the current user.

        Args:
            budget: The budget being edited.
            name: New name from the form.
            amount: New amount from the form; empty means 0.
            icon: New glyph (defaults to the budget's current icon).

        Returns:
            FormResult describing the outcome.
        """
        try:
            clean_name, clean_amount = validate_budget_edit(name, amount)
        except ValidationError as e:
            logger.debug(f"Rejected budget update for ID {budget.id}: {e.message}")
            return FormResult(success=False, message=e.message)

        new_icon = icon or budget.icon or DEFAULT_EDIT_ICON

        try:
            updated = self.budgets.update(budget.id, clean_name, clean_amount, new_icon)
        except Exception as e:
            logger.error(f"Error updating budget {budget.id}: {e}")
            return FormResult(success=False, message=BUDGET_UPDATE_FAILED)

        logger.info(f"Updated budget '{updated.name}' (ID: {updated.id})")
        self._refresh()
        return FormResult(success=True, message=BUDGET_UPDATED, budget=updated)

    def _refresh(self) -> None:
        if self.refresh_data is not None:
            self.refresh_data()
