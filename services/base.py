"""Base services container for dependency injection."""

from typing import Callable, Optional
from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject test doubles.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If None, one is
            created from config.
        identity: Optional identity provider. If None, one is created from
            config.
        rates: Optional currency rate provider. If None, one is created from
            config.
    """

    def __init__(self, config: Config, db_manager=None, identity=None, rates=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from identity import get_identity_provider
        from currency import get_rate_provider
        from services.budgets import BudgetService
        from services.expenses import ExpenseService
        from services.dashboard import DashboardAggregator

        self.identity = identity or get_identity_provider(config)
        self.rates = rates or get_rate_provider(config)

        self.budgets = BudgetService(self.db_manager)
        self.expenses = ExpenseService(self.db_manager)
        self.dashboard = DashboardAggregator(self.budgets, self.expenses)

    def current_owner(self) -> Optional[str]:
        """Get the ownership key of the signed-in user, or None."""
        from identity import owner_key

        return owner_key(self.identity)

    def budget_form(self, refresh_data: Optional[Callable[[], None]] = None):
        """Create a budget form controller for the current user."""
        from forms.budgets import BudgetFormController

        return BudgetFormController(self.budgets, self.identity, refresh_data)

    def report_generator(
        self, group_by: Optional[str] = None, currency: Optional[str] = None
    ):
        """Create a report generator using configured defaults."""
        from services.reports import ReportGenerator

        return ReportGenerator(
            self.budgets,
            self.expenses,
            self.rates,
            group_by=group_by or self.config.report_group_by,
            currency=currency or self.config.default_currency,
        )

    def dashboard_poller(self, on_update=None, interval: Optional[float] = None):
        """Create a dashboard poller for the signed-in user."""
        from services.dashboard import DashboardPoller

        return DashboardPoller(
            self.dashboard,
            self.current_owner,
            interval=interval or self.config.refresh_interval,
            on_update=on_update,
        )
