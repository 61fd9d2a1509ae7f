"""Helper utilities for tests."""

from decimal import Decimal
from pathlib import Path
import sqlite3


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())

    conn.commit()


def seed_budget(services, name="Groceries", amount=500, owner="alice@example.com"):
    """Insert a budget directly through the service, bypassing form rules."""
    return services.budgets.create(name, Decimal(str(amount)), owner, "🛒")


def seed_expenses(services, budget, *items):
    """Record (name, amount) pairs against a budget."""
    return [
        services.expenses.create(name, Decimal(str(amount)), budget.id)
        for name, amount in items
    ]
