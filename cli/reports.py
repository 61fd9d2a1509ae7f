#!/usr/bin/env python3

import sys
import json
from logger import get_logger
from tools.reports import GROUP_BY_CHOICES

logger = get_logger()


def cmd_report(args, services):
    """Print a spending analysis for the signed-in user."""
    owner = services.current_owner()
    if owner is None:
        logger.warning("Not signed in; the report will be empty.")

    try:
        generator = services.report_generator(group_by=args.group_by)
        generator.load(owner)
        if args.currency:
            generator.select_currency(args.currency)
        report = generator.report
    except ValueError as e:
        logger.error(str(e))
        logger.info(f"Available currencies: {', '.join(services.rates.currencies())}")
        sys.exit(1)

    if args.json:
        payload = report.to_dict()
        if args.chart:
            payload["chart"] = generator.chart_data()
        print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    currency = report.currency
    logger.info("\nSpending Analysis")
    logger.info("=" * 80)
    logger.info(f"Total Spending: {currency} {report.total_spend}")

    if not report.categories:
        logger.info("No expenses recorded yet.")
        return

    logger.info("")
    logger.info(f"{'#':>3}  {'Category':<40} {'Amount':>18} {'% of Total':>12}")
    logger.info("-" * 80)
    for index, category in enumerate(report.categories, start=1):
        logger.info(
            f"{index:>3}  {category.name:<40} "
            f"{currency + ' ' + str(category.amount):>18} {str(category.percentage) + '%':>12}"
        )

    top = report.top_category
    logger.info("-" * 80)
    logger.info(
        f"Highest Spending: {top.name} ({currency} {top.amount}, {top.percentage}%)"
    )
    logger.info("Consider optimizing this category if it's not essential.")

    if args.chart:
        logger.info("\nChart data:")
        logger.info(json.dumps(generator.chart_data(), ensure_ascii=False))


def setup_parser(subparsers):
    """Setup report subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "report",
        help="Spending analysis by category",
        description="Break down spending by category in a chosen currency",
        epilog="""
Examples:
  python -m cli report
  python -m cli report --currency EUR
  python -m cli report --group-by budget --json --chart
        """,
    )
    parser.add_argument(
        "--currency",
        help="Display currency (default from config, e.g. USD, EUR, GBP, INR, JPY)",
    )
    parser.add_argument(
        "--group-by",
        choices=GROUP_BY_CHOICES,
        help="Group expenses by their name or by budget (default from config)",
    )
    parser.add_argument(
        "--chart",
        action="store_true",
        help="Also output pie chart data",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the report as JSON",
    )
    parser.set_defaults(func=cmd_report)
