"""Expense service for database operations."""

from datetime import date
from decimal import Decimal
from typing import List, Optional
from db.amounts import sum_amounts, to_db_amount, to_decimal
from models.expense import Expense

_EXPENSE_SELECT_FIELDS = "e.id, e.name, e.amount, e.budget_id, e.created_at"


class ExpenseService:
    """Service for managing expenses.

    Expenses have no owner column of their own; they belong to whoever
    created the budget they are recorded against.
    """

    def __init__(self, db_manager):
        """Initialize the expense service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def create(
        self,
        name: str,
        amount: Decimal,
        budget_id: int,
        created_at: Optional[date] = None,
    ) -> Expense:
        """Record a new expense against a budget.

        Args:
            name: Expense name, used as the report category.
            amount: Expense amount.
            budget_id: ID of the budget the expense belongs to.
            created_at: Date of the expense (defaults to today).

        Returns:
            The created Expense object with id populated.

        Raises:
            sqlite3.IntegrityError: If the budget does not exist.
        """
        created_at = created_at or date.today()

        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO expenses (name, amount, budget_id, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (name, to_db_amount(amount), budget_id, created_at.isoformat()),
            )
            conn.commit()

            return Expense(
                id=cursor.lastrowid,
                name=name,
                amount=amount,
                budget_id=budget_id,
                created_at=created_at,
            )

    def find(self, expense_id: int) -> Optional[Expense]:
        """Get a single expense by ID.

        Args:
            expense_id: The expense ID to find.

        Returns:
            Expense object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_EXPENSE_SELECT_FIELDS} FROM expenses e WHERE e.id = ?",
                (expense_id,),
            )
            row = cursor.fetchone()

            if row:
                return self._row_to_expense(row)
            return None

    def find_by_budget(self, budget_id: int) -> List[Expense]:
        """Get all expenses recorded against a budget.

        Args:
            budget_id: The budget ID to filter by.

        Returns:
            List of Expense objects, newest first.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_EXPENSE_SELECT_FIELDS}
                FROM expenses e
                WHERE e.budget_id = ?
                ORDER BY e.id DESC
                """,
                (budget_id,),
            )
            rows = cursor.fetchall()

            return [self._row_to_expense(row) for row in rows]

    def find_by_owner(self, owner: Optional[str]) -> List[Expense]:
        """Get all expenses on budgets created by a user.

        Args:
            owner: Email of the owning user.

        Returns:
            List of Expense objects in insertion order.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"""
                SELECT {_EXPENSE_SELECT_FIELDS}
                FROM expenses e
                LEFT JOIN budgets b ON b.id = e.budget_id
                WHERE b.created_by = ?
                ORDER BY e.id
                """,
                (owner,),
            )
            rows = cursor.fetchall()

            return [self._row_to_expense(row) for row in rows]

    def delete(self, expense_id: int) -> bool:
        """Delete an expense by ID.

        Args:
            expense_id: The expense ID to delete.

        Returns:
            True if expense was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM expenses WHERE id = ?", (expense_id,))
            conn.commit()
            return cursor.rowcount > 0

    def total_amount(self, owner: Optional[str]) -> Decimal:
        """Sum the amounts of all expenses on budgets created by a user.

        Args:
            owner: Email of the owning user.

        Returns:
            The total, or 0 when there are no matching expenses.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                """
                SELECT e.amount
                FROM expenses e
                LEFT JOIN budgets b ON b.id = e.budget_id
                WHERE b.created_by = ?
                """,
                (owner,),
            )
            return sum_amounts(row[0] for row in cursor.fetchall())

    def _row_to_expense(self, row: tuple) -> Expense:
        """Convert a database row to an Expense object."""
        return Expense(
            id=row[0],
            name=row[1],
            amount=to_decimal(row[2]),
            budget_id=row[3],
            created_at=date.fromisoformat(row[4]),
        )
