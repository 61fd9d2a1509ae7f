#!/usr/bin/env python3

import asyncio
from logger import get_logger

logger = get_logger()


def _show_totals(user, totals):
    name = user.full_name if user and user.full_name else "there"
    logger.info(f"Hi, {name}")
    logger.info(f"  Total budget:  {totals.total_budget}")
    logger.info(f"  Total spent:   {totals.total_expense}")


def cmd_show(args, services):
    """Show total budget and total spend for the signed-in user."""
    user = services.identity.current_user()
    if user is None:
        logger.warning("Not signed in; totals will be empty.")

    if not args.watch:
        totals = services.dashboard.fetch(services.current_owner())
        _show_totals(user, totals)
        return

    try:
        asyncio.run(_watch(services, args.interval))
    except KeyboardInterrupt:
        logger.info("Stopped watching.")


async def _watch(services, interval):
    """Print totals every time the poller refreshes, until interrupted."""
    poller = services.dashboard_poller(
        on_update=lambda totals: _show_totals(services.identity.current_user(), totals),
        interval=interval,
    )
    logger.info(f"Refreshing every {poller.interval}s (Ctrl-C to stop)")
    async with poller:
        while True:
            await asyncio.sleep(3600)


def setup_parser(subparsers):
    """Setup dashboard subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "dashboard",
        help="Show budget and spending totals",
        description="Show total budget and total spend for the signed-in user",
    )
    parser.add_argument(
        "--watch",
        action="store_true",
        help="Keep refreshing the totals until interrupted",
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between refreshes with --watch (default from config)",
    )
    parser.set_defaults(func=cmd_show)
