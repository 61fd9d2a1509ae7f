from decimal import Decimal

import pytest

from models.budget import DEFAULT_ICON
from tests.helpers import seed_budget, seed_expenses


class TestBudgetService:
    """Tests for BudgetService."""

    def test_create_budget(self, services):
        """Test creating a new budget."""
        budget = services.budgets.create(
            "Home Decor", Decimal("5000"), "alice@example.com", "🏠"
        )

        assert budget.id is not None
        assert budget.id > 0
        assert budget.name == "Home Decor"
        assert budget.amount == Decimal("5000")
        assert budget.created_by == "alice@example.com"
        assert budget.icon == "🏠"
        assert budget.created_at is not None

    def test_create_budget_default_icon(self, services):
        """Test that the icon defaults when not given."""
        budget = services.budgets.create("Travel", Decimal("800"), "alice@example.com")

        assert budget.icon == DEFAULT_ICON

    def test_create_budget_keeps_fractional_amount(self, services):
        """Test that fractional amounts survive a round trip through the db."""
        budget = services.budgets.create("Coffee", Decimal("42.5"), "alice@example.com")

        found = services.budgets.find(budget.id)

        assert found.amount == Decimal("42.5")

    def test_find_budget_by_id(self, services):
        """Test finding a budget by ID."""
        created = seed_budget(services, "Groceries", 500)

        found = services.budgets.find(created.id)

        assert found is not None
        assert found.id == created.id
        assert found.name == "Groceries"
        assert found.amount == Decimal("500")

    def test_find_budget_by_id_not_found(self, services):
        """Test finding a non-existent budget returns None."""
        assert services.budgets.find(9999) is None

    def test_find_by_owner_newest_first(self, services):
        """Test that a user's budgets are returned newest first."""
        first = seed_budget(services, "First")
        second = seed_budget(services, "Second")

        budgets = services.budgets.find_by_owner("alice@example.com")

        assert [b.id for b in budgets] == [second.id, first.id]

    def test_find_by_owner_excludes_other_users(self, services):
        """Test that budgets are scoped to their creator."""
        seed_budget(services, "Alice's", owner="alice@example.com")
        seed_budget(services, "Bob's", owner="bob@example.com")

        budgets = services.budgets.find_by_owner("alice@example.com")

        assert [b.name for b in budgets] == ["Alice's"]

    def test_find_by_owner_none_returns_nothing(self, services):
        """Test that a signed-out owner sees no budgets, even ownerless ones."""
        services.budgets.create("Orphan", Decimal("10"), None)

        assert services.budgets.find_by_owner(None) == []

    def test_find_summaries_with_and_without_expenses(self, services):
        """Test per-budget spend and item counts."""
        food = seed_budget(services, "Food", 400)
        rent = seed_budget(services, "Rent", 1000)
        seed_expenses(services, food, ("Groceries", "120.50"), ("Snacks", "9.50"))

        summaries = services.budgets.find_summaries("alice@example.com")
        by_name = {s.budget.name: s for s in summaries}

        assert by_name["Food"].total_spend == Decimal("130")
        assert by_name["Food"].total_items == 2
        assert by_name["Food"].remaining == Decimal("270")
        assert by_name["Rent"].total_spend == Decimal("0")
        assert by_name["Rent"].total_items == 0
        assert by_name["Rent"].remaining == Decimal("1000")
        assert summaries[0].budget.id == rent.id

    def test_update_budget(self, services):
        """Test updating name, amount, and icon."""
        budget = seed_budget(services, "Old", 100)

        updated = services.budgets.update(budget.id, "New", Decimal("250.75"), "🎯")

        assert updated.id == budget.id
        assert updated.name == "New"
        assert updated.amount == Decimal("250.75")
        assert updated.icon == "🎯"
        assert services.budgets.find(budget.id).name == "New"

    def test_update_budget_keeps_owner(self, services):
        """Test that an update does not change ownership."""
        budget = seed_budget(services, "Mine", owner="alice@example.com")

        updated = services.budgets.update(budget.id, "Still mine", Decimal("1"), None)

        assert updated.created_by == "alice@example.com"

    def test_update_nonexistent_budget_raises(self, services):
        """Test that updating a missing budget raises."""
        with pytest.raises(Exception, match="Budget with ID 9999 not found"):
            services.budgets.update(9999, "Nope", Decimal("1"), None)

    def test_total_amount(self, services):
        """Test summing a user's budgets."""
        seed_budget(services, "A", 100)
        seed_budget(services, "B", 250)
        seed_budget(services, "Other", 999, owner="bob@example.com")

        assert services.budgets.total_amount("alice@example.com") == Decimal("350")

    def test_total_amount_no_budgets_is_zero(self, services):
        """Test that an empty sum is 0 rather than None."""
        total = services.budgets.total_amount("alice@example.com")

        assert total == Decimal("0")
        assert total is not None

    def test_budget_to_dict(self, services):
        """Test that Budget.to_dict() works correctly."""
        budget = seed_budget(services, "Test", 10)

        data = budget.to_dict()

        assert data["id"] == budget.id
        assert data["name"] == "Test"
        assert data["amount"] == 10.0
        assert data["created_by"] == "alice@example.com"
        assert data["icon"] == "🛒"

    def test_amount_stored_as_exact_text(self, services):
        """Test that amounts keep their exact decimal text in the database."""
        budget = services.budgets.create("Coffee", Decimal("0.10"), "alice@example.com")

        with services.db_manager.connect() as conn:
            stored, kind = conn.execute(
                "SELECT amount, typeof(amount) FROM budgets WHERE id = ?", (budget.id,)
            ).fetchone()

        assert (stored, kind) == ("0.10", "text")

    def test_find_summaries_sums_fractions_exactly(self, services):
        """Test that 0.1 + 0.2 spend is exactly 0.3, with no float drift."""
        budget = seed_budget(services, "Snacks", 1)
        seed_expenses(services, budget, ("Gum", "0.1"), ("Mint", "0.2"))

        (summary,) = services.budgets.find_summaries("alice@example.com")

        assert summary.total_spend == Decimal("0.3")
        assert summary.remaining == Decimal("0.7")
        assert str(summary.remaining) == "0.7"

    def test_total_amount_after_fractional_edits_is_exact(self, services):
        """Test that budget totals stay exact after fractional edits."""
        first = seed_budget(services, "A", 1)
        second = seed_budget(services, "B", 1)
        services.budgets.update(first.id, "A", Decimal("0.1"), None)
        services.budgets.update(second.id, "B", Decimal("0.2"), None)

        total = services.budgets.total_amount("alice@example.com")

        assert total == Decimal("0.3")
        assert str(total) == "0.3"

    def test_very_large_amount_round_trips(self, services):
        """Test that amounts beyond 64-bit integers are stored exactly."""
        budget = services.budgets.create(
            "Moonshot", Decimal("100000000000000000000"), "alice@example.com"
        )

        assert services.budgets.find(budget.id).amount == Decimal("100000000000000000000")
        assert services.budgets.total_amount("alice@example.com") == Decimal(
            "100000000000000000000"
        )
