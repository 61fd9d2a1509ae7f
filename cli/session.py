"""Helpers for commands that act on the signed-in user's data."""

import sys
from logger import get_logger

logger = get_logger()


def require_owner(services):
    """Get the signed-in user's ownership key, or exit if signed out."""
    owner = services.current_owner()
    if owner is None:
        logger.error("Please sign in first (set [identity] email in the config).")
        sys.exit(1)
    return owner


def find_owned_budget(services, budget_id, owner):
    """Look up a budget belonging to owner, or exit if there is none."""
    budget = services.budgets.find(budget_id)
    if not budget or budget.created_by != owner:
        logger.error(f"Budget with ID {budget_id} not found.")
        logger.info("Use 'python -m cli budgets list' to see your budgets.")
        sys.exit(1)
    return budget
