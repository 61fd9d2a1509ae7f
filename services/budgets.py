"""Budget service for database operations."""

from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional
from db.amounts import sum_amounts, to_db_amount, to_decimal
from models.budget import Budget, BudgetSummary, DEFAULT_ICON

_BUDGET_SELECT_FIELDS = "id, name, amount, created_by, icon, created_at"


class BudgetService:
    """Service for managing budgets.

    Every read that takes an ``owner`` is scoped to that user's email. An
    owner of ``None`` (signed out) matches no rows.
    """

    def __init__(self, db_manager):
        """Initialize the budget service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find(self, budget_id: int) -> Optional[Budget]:
        """Get a single budget by ID.

        Args:
            budget_id: The budget ID to find.

        Returns:
            Budget object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_BUDGET_SELECT_FIELDS} FROM budgets WHERE id = ?",
                (budget_id,),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_budget(row)
            return None

    def find_by_owner(self, owner: Optional[str]) -> List[Budget]:
        """Get all budgets created by a user.

        Args:
            owner: Email of the owning user.

        Returns:
            List of Budget objects, newest first.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_BUDGET_SELECT_FIELDS}
                FROM budgets
                WHERE created_by = ?
                ORDER BY id DESC
                """,
                (owner,),
            )
            rows = cursor.fetchall()

            return [self._row_to_budget(row) for row in rows]

    def find_summaries(self, owner: Optional[str]) -> List[BudgetSummary]:
        """Get a user's budgets joined with the spend recorded against each.

        Args:
            owner: Email of the owning user.

        Returns:
            List of BudgetSummary objects, newest budget first. Budgets with
            no expenses have a total spend of 0.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_BUDGET_SELECT_FIELDS}
                FROM budgets
                WHERE created_by = ?
                ORDER BY id DESC
                """,
                (owner,),
            )
            budgets = [self._row_to_budget(row) for row in cursor.fetchall()]

            cursor = conn.execute(
                """
                SELECT e.budget_id, e.amount
                FROM expenses e
                JOIN budgets b ON b.id = e.budget_id
                WHERE b.created_by = ?
                """,
                (owner,),
            )
            spend: Dict[int, List[str]] = {}
            for budget_id, amount in cursor.fetchall():
                spend.setdefault(budget_id, []).append(amount)

        return [
            BudgetSummary(
                budget=budget,
                total_spend=sum_amounts(spend.get(budget.id, [])),
                total_items=len(spend.get(budget.id, [])),
            )
            for budget in budgets
        ]

    def create(
        self,
        name: str,
        amount: Decimal,
        created_by: Optional[str],
        icon: Optional[str] = DEFAULT_ICON,
    ) -> Budget:
        """Create a new budget.

        Args:
            name: Budget name.
            amount: Budget amount.
            created_by: Email of the owning user.
            icon: Glyph for the budget.

        Returns:
            The created Budget, read back from the database.

        Raises:
            Exception: If budget creation fails.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "INSERT INTO budgets (name, amount, created_by, icon) VALUES (?, ?, ?, ?)",
                (name, to_db_amount(amount), created_by, icon),
            )
            conn.commit()
            budget_id = cursor.lastrowid

            # Fetch the created record to get the created_at timestamp
            cursor = conn.execute(
                f"SELECT {_BUDGET_SELECT_FIELDS} FROM budgets WHERE id = ?",
                (budget_id,),
            )
            return self._row_to_budget(cursor.fetchone())

    def update(
        self, budget_id: int, name: str, amount: Decimal, icon: Optional[str]
    ) -> Budget:
        """Update an existing budget.

        Ownership is not re-checked; callers only pass budgets they have
        already loaded for the current user.

        Args:
            budget_id: The budget ID to update.
            name: New budget name.
            amount: New budget amount.
            icon: New glyph.

        Returns:
            The updated Budget object.

        Raises:
            Exception: If budget not found or update fails.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "UPDATE budgets SET name = ?, amount = ?, icon = ? WHERE id = ?",
                (name, to_db_amount(amount), icon, budget_id),
            )
            conn.commit()

            if cursor.rowcount == 0:
                raise Exception(f"Budget with ID {budget_id} not found")

            cursor = conn.execute(
                f"SELECT {_BUDGET_SELECT_FIELDS} FROM budgets WHERE id = ?",
                (budget_id,),
            )
            return self._row_to_budget(cursor.fetchone())

    def total_amount(self, owner: Optional[str]) -> Decimal:
        """Sum the amounts of all budgets created by a user.

        Args:
            owner: Email of the owning user.

        Returns:
            The total, or 0 when the user has no budgets.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT amount FROM budgets WHERE created_by = ?",
                (owner,),
            )
            return sum_amounts(row[0] for row in cursor.fetchall())

    def _row_to_budget(self, row: tuple) -> Budget:
        """Convert a database row to a Budget object."""
        return Budget(
            id=row[0],
            name=row[1],
            amount=to_decimal(row[2]),
            created_by=row[3],
            icon=row[4],
            created_at=datetime.fromisoformat(row[5]) if row[5] else None,
        )

