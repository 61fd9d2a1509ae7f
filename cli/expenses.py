#!/usr/bin/env python3

import sys
from dateutil import parser as date_parser
from cli.session import find_owned_budget, require_owner
from logger import get_logger
from validation import ValidationError, validate_new_expense

logger = get_logger()


def cmd_list(args, services):
    """List expenses, either for one budget or for all of the user's budgets."""
    owner = require_owner(services)

    if args.budget_id is not None:
        budget = find_owned_budget(services, args.budget_id, owner)
        expenses = services.expenses.find_by_budget(budget.id)
        logger.info(f"\nExpenses for {budget.name}:")
    else:
        expenses = services.expenses.find_by_owner(owner)
        logger.info("\nExpenses:")

    if not expenses:
        logger.info("No expenses found.")
        return

    logger.info("=" * 80)
    for expense in expenses:
        logger.info(
            f"{expense.id:>5}  {expense.created_at.isoformat()}  "
            f"{expense.name:<40} {expense.amount:>12}  (budget {expense.budget_id})"
        )
    logger.info("-" * 80)
    logger.info(f"Total expenses: {len(expenses)}")


def cmd_add(args, services):
    """Record an expense against one of the user's budgets."""
    owner = require_owner(services)

    budget = find_owned_budget(services, args.budget_id, owner)

    try:
        name, amount = validate_new_expense(args.name, args.amount)
    except ValidationError as e:
        logger.error(e.message)
        sys.exit(1)

    created_at = None
    if args.date:
        try:
            created_at = date_parser.parse(args.date).date()
        except (ValueError, OverflowError):
            logger.error(f"Invalid date: {args.date}")
            sys.exit(1)

    try:
        expense = services.expenses.create(name, amount, budget.id, created_at)
    except Exception as e:
        logger.error(f"Error adding expense: {e}")
        sys.exit(1)

    logger.info(f"✓ New Expense Added! ID: {expense.id}")
    logger.info(f"  {expense.name}: {expense.amount} on {budget.name}")


def cmd_delete(args, services):
    """Delete an expense by ID."""
    owner = require_owner(services)

    expense = services.expenses.find(args.expense_id)
    budget = services.budgets.find(expense.budget_id) if expense else None
    if not expense or not budget or budget.created_by != owner:
        logger.error(f"Expense with ID {args.expense_id} not found.")
        sys.exit(1)

    try:
        if services.expenses.delete(expense.id):
            logger.info(f"✓ Expense '{expense.name}' deleted.")
        else:
            logger.error("Failed to delete expense.")
            sys.exit(1)
    except Exception as e:
        logger.error(f"Error deleting expense: {e}")
        sys.exit(1)


def setup_parser(subparsers):
    """Setup expenses subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "expenses",
        help="Record and manage expenses",
        description="Record expenses against budgets",
    )

    expenses_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available expense commands",
        dest="subcommand",
        required=True,
    )

    # expenses list
    list_parser = expenses_subparsers.add_parser("list", help="List expenses")
    list_parser.add_argument(
        "--budget-id", type=int, help="Only show expenses for this budget"
    )
    list_parser.set_defaults(func=cmd_list)

    # expenses add
    add_parser = expenses_subparsers.add_parser(
        "add",
        help="Record an expense",
        epilog="""
Examples:
  python -m cli expenses add 3 --name Groceries --amount 42.50
  python -m cli expenses add 3 --name Rent --amount 1200 --date 2025-10-01
        """,
    )
    add_parser.add_argument("budget_id", type=int, help="Budget ID")
    add_parser.add_argument("--name", required=True, help="Expense name")
    add_parser.add_argument("--amount", required=True, help="Expense amount")
    add_parser.add_argument(
        "--date", help="Date of the expense (defaults to today)"
    )
    add_parser.set_defaults(func=cmd_add)

    # expenses delete
    delete_parser = expenses_subparsers.add_parser("delete", help="Delete an expense")
    delete_parser.add_argument("expense_id", type=int, help="Expense ID")
    delete_parser.set_defaults(func=cmd_delete)
