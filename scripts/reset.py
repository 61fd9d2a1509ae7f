#!/usr/bin/env python3
"""Reset script for Budgetbook.

This script will:
1. Delete the data directory (including database and logs)
2. Run migrations to create a fresh database
"""

import shutil
import sys

from config import load_config
from db.manager import DatabaseManager
from cli.migrate import apply_pending_migrations


def reset():
    """Reset the application state."""
    print("Budgetbook Reset Script")
    print("=" * 50)

    config = load_config()

    if not config.enable_reset:
        print("\nReset is disabled in configuration (enable_reset=false).")
        print("To enable reset, set enable_reset=true in ~/.config/budgetbook.toml")
        sys.exit(1)

    print(f"\nData directory: {config.base_dir}")
    print(f"Database: {config.db_path}")
    print(f"Logs: {config.log_dir}")

    response = input("\nThis will delete ALL budgets and expenses. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Reset cancelled.")
        sys.exit(0)

    if config.base_dir.exists():
        print(f"\nDeleting {config.base_dir}...")
        shutil.rmtree(config.base_dir)
        print("✓ Data directory deleted")
    else:
        print(f"\n✓ Data directory does not exist: {config.base_dir}")

    print("\nRunning migrations...")
    applied = apply_pending_migrations(DatabaseManager(config))

    print("\n" + "=" * 50)
    print(f"Reset complete! Applied {len(applied)} migration(s).")
    print(f"Database location: {config.db_path}")


if __name__ == "__main__":
    reset()
