#!/usr/bin/env python3

import sys
from cli.session import find_owned_budget, require_owner
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List the signed-in user's budgets with their spend."""
    owner = require_owner(services)
    summaries = services.budgets.find_summaries(owner)

    if not summaries:
        logger.info("No budgets found.")
        return

    logger.info("\nBudgets:")
    logger.info("=" * 80)
    for summary in summaries:
        budget = summary.budget
        logger.info(f"ID: {budget.id}")
        logger.info(f"Name: {budget.name}")
        if budget.icon:
            logger.info(f"Icon: {budget.icon}")
        logger.info(f"Amount: {budget.amount}")
        logger.info(f"Spent: {summary.total_spend} ({summary.total_items} items)")
        logger.info(f"Remaining: {summary.remaining}")
        logger.info("-" * 80)

    logger.info(f"\nTotal budgets: {len(summaries)}")


def cmd_create(args, services):
    """Create a new budget, prompting for anything not given as an option."""
    require_owner(services)

    name = args.name
    amount = args.amount
    if name is None or amount is None:
        print("\nCreate New Budget")
        print("=" * 80)
    if name is None:
        name = input("Budget name (e.g., Home Decor): ")
    if amount is None:
        amount = input("Budget amount (e.g., 5000): ")

    result = services.budget_form().create(name, amount, args.icon)

    if not result.success:
        logger.error(result.message)
        sys.exit(1)

    budget = result.budget
    logger.info(f"\n✓ {result.message} ID: {budget.id}")
    logger.info(f"  Name: {budget.name}")
    logger.info(f"  Amount: {budget.amount}")
    logger.info(f"  Icon: {budget.icon}")


def cmd_edit(args, services):
    """Update a budget's name, amount, or icon."""
    owner = require_owner(services)
    budget = find_owned_budget(services, args.budget_id, owner)

    # Unspecified options keep their current value
    name = args.name if args.name is not None else budget.name
    amount = args.amount if args.amount is not None else budget.amount

    result = services.budget_form().edit(budget, name, amount, args.icon)

    if not result.success:
        logger.error(result.message)
        sys.exit(1)

    updated = result.budget
    logger.info(f"✓ {result.message}")
    logger.info(f"  Name: {updated.name}")
    logger.info(f"  Amount: {updated.amount}")
    logger.info(f"  Icon: {updated.icon}")


def setup_parser(subparsers):
    """Setup budgets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budgets",
        help="Manage budgets",
        description="Create, edit and list budgets",
    )

    budgets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    # budgets list
    list_parser = budgets_subparsers.add_parser(
        "list", help="List your budgets and what has been spent"
    )
    list_parser.set_defaults(func=cmd_list)

    # budgets create
    create_parser = budgets_subparsers.add_parser(
        "create",
        help="Create a new budget",
        epilog="""
Examples:
  python -m cli budgets create --name "Home Decor" --amount 5000
  python -m cli budgets create   # prompts for name and amount
        """,
    )
    create_parser.add_argument("--name", help="Budget name")
    create_parser.add_argument(
        "--amount", help="Budget amount (positive whole number)"
    )
    create_parser.add_argument("--icon", help="Icon for the budget (emoji)")
    create_parser.set_defaults(func=cmd_create)

    # budgets edit
    edit_parser = budgets_subparsers.add_parser(
        "edit",
        help="Edit an existing budget",
        epilog="""
Examples:
  python -m cli budgets edit 3 --amount 4500.50
  python -m cli budgets edit 3 --name Groceries --icon 🛒
        """,
    )
    edit_parser.add_argument("budget_id", type=int, help="Budget ID")
    edit_parser.add_argument("--name", help="New budget name")
    edit_parser.add_argument("--amount", help="New budget amount (0 or more)")
    edit_parser.add_argument("--icon", help="New icon (emoji)")
    edit_parser.set_defaults(func=cmd_edit)
