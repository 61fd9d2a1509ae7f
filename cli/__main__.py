#!/usr/bin/env python3
"""
Budgetbook CLI - command-line front end for budgets, expenses and reports.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    budgets      Create, edit and list budgets
    expenses     Record and manage expenses
    dashboard    Show total budget and total spend
    report       Spending analysis by category
    migrate      Database migrations

Examples:
    python -m cli migrate apply
    python -m cli budgets create --name "Home Decor" --amount 5000
    python -m cli expenses add 1 --name Lamp --amount 79.99
    python -m cli dashboard --watch
    python -m cli report --currency EUR
"""

import sys
import argparse
from cli import budgets, expenses, dashboard, reports, migrate
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging

SERVICE_COMMANDS = ("budgets", "expenses", "dashboard", "report")


def build_parser():
    """Build the top-level argument parser with every command registered."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Budgetbook - Personal budgets and spending reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    budgets.setup_parser(subparsers)
    expenses.setup_parser(subparsers)
    dashboard.setup_parser(subparsers)
    reports.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    return parser


def main():
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    try:
        config = load_config()
        setup_logging(config)

        # Migrate commands need db_manager for raw database operations
        if args.command in SERVICE_COMMANDS:
            args.func(args, Services(config))
        elif args.command == "migrate":
            args.func(args, DatabaseManager(config))
        else:
            args.func(args)
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
