import sqlite3
from datetime import date
from decimal import Decimal

import pytest

from tests.helpers import seed_budget, seed_expenses


class TestExpenseService:
    """Tests for ExpenseService."""

    def test_create_expense(self, services):
        """Test recording an expense against a budget."""
        budget = seed_budget(services)

        expense = services.expenses.create(
            "Milk", Decimal("3.49"), budget.id, date(2025, 10, 1)
        )

        assert expense.id > 0
        assert expense.name == "Milk"
        assert expense.amount == Decimal("3.49")
        assert expense.budget_id == budget.id
        assert expense.created_at == date(2025, 10, 1)

    def test_create_expense_defaults_to_today(self, services):
        """Test that the date defaults to today."""
        budget = seed_budget(services)

        expense = services.expenses.create("Bread", Decimal("2"), budget.id)

        assert expense.created_at == date.today()

    def test_create_expense_unknown_budget_raises(self, services):
        """Test that expenses must reference an existing budget."""
        with pytest.raises(sqlite3.IntegrityError):
            services.expenses.create("Ghost", Decimal("1"), 9999)

    def test_find_expense(self, services):
        """Test finding an expense by ID."""
        budget = seed_budget(services)
        (created,) = seed_expenses(services, budget, ("Eggs", "4.25"))

        found = services.expenses.find(created.id)

        assert found == created

    def test_find_expense_not_found(self, services):
        """Test finding a non-existent expense returns None."""
        assert services.expenses.find(9999) is None

    def test_find_by_budget(self, services):
        """Test listing expenses for a single budget, newest first."""
        food = seed_budget(services, "Food")
        fun = seed_budget(services, "Fun")
        first, second = seed_expenses(services, food, ("A", 1), ("B", 2))
        seed_expenses(services, fun, ("Cinema", 12))

        expenses = services.expenses.find_by_budget(food.id)

        assert [e.id for e in expenses] == [second.id, first.id]

    def test_find_by_owner_joins_through_budget(self, services):
        """Test that expenses are scoped by their budget's owner."""
        mine = seed_budget(services, "Mine", owner="alice@example.com")
        theirs = seed_budget(services, "Theirs", owner="bob@example.com")
        seed_expenses(services, mine, ("Food", 100), ("Food", 50))
        seed_expenses(services, theirs, ("Food", 999))

        expenses = services.expenses.find_by_owner("alice@example.com")

        assert [e.amount for e in expenses] == [Decimal("100"), Decimal("50")]
        assert all(e.budget_id == mine.id for e in expenses)

    def test_find_by_owner_none(self, services):
        """Test that a signed-out owner sees no expenses."""
        budget = seed_budget(services)
        seed_expenses(services, budget, ("Food", 1))

        assert services.expenses.find_by_owner(None) == []

    def test_delete_expense(self, services):
        """Test deleting an expense."""
        budget = seed_budget(services)
        (expense,) = seed_expenses(services, budget, ("Oops", 10))

        assert services.expenses.delete(expense.id) is True
        assert services.expenses.find(expense.id) is None

    def test_delete_nonexistent_expense(self, services):
        """Test deleting a non-existent expense returns False."""
        assert services.expenses.delete(9999) is False

    def test_total_amount(self, services):
        """Test summing expenses across a user's budgets."""
        food = seed_budget(services, "Food")
        rent = seed_budget(services, "Rent")
        other = seed_budget(services, "Other", owner="bob@example.com")
        seed_expenses(services, food, ("Groceries", "10.25"))
        seed_expenses(services, rent, ("Rent", "1000"))
        seed_expenses(services, other, ("Rent", "5000"))

        assert services.expenses.total_amount("alice@example.com") == Decimal("1010.25")

    def test_total_amount_no_expenses_is_zero(self, services):
        """Test that an empty sum is 0 rather than None."""
        seed_budget(services)

        assert services.expenses.total_amount("alice@example.com") == Decimal("0")

    def test_total_amount_sums_fractions_exactly(self, services):
        """Test that 0.1 + 0.2 in expenses totals exactly 0.3."""
        budget = seed_budget(services)
        seed_expenses(services, budget, ("Gum", "0.1"), ("Mint", "0.2"))

        total = services.expenses.total_amount("alice@example.com")

        assert total == Decimal("0.3")
        assert str(total) == "0.3"
