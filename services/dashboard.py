"""Dashboard totals and their periodic refresh."""

import asyncio
from typing import Callable, Optional
from models.dashboard import DashboardTotals
from logger import get_logger

logger = get_logger()


class DashboardAggregator:
    """Computes the header totals shown on the dashboard."""

    def __init__(self, budgets, expenses):
        """Initialize the aggregator.

        Args:
            budgets: BudgetService for the budget total.
            expenses: ExpenseService for the expense total.
        """
        self.budgets = budgets
        self.expenses = expenses

    def fetch(self, owner: Optional[str]) -> DashboardTotals:
        """Sum a user's budgets and expenses.

        Args:
            owner: Email of the signed-in user, or None.

        Returns:
            DashboardTotals; both totals are 0 when nothing matches.
        """
        return DashboardTotals(
            total_budget=self.budgets.total_amount(owner),
            total_expense=self.expenses.total_amount(owner),
        )


class DashboardPoller:
    """Keeps dashboard totals fresh by polling on an interval.

    The poller runs as a single asyncio task that is started explicitly and
    cancelled on teardown. At most one fetch is in flight at any time: a
    refresh requested while another is running waits for and returns the
    running one's result instead of issuing a second query.

    Database work runs in a worker thread so the event loop is not blocked.

    Args:
        aggregator: DashboardAggregator used to compute totals.
        owner_provider: Callable returning the current owner key. It is
            called on every fetch so sign-in changes are picked up.
        interval: Seconds between refreshes.
        on_update: Optional callback receiving each new DashboardTotals.
    """

    def __init__(
        self,
        aggregator: DashboardAggregator,
        owner_provider: Callable[[], Optional[str]],
        interval: float = 5.0,
        on_update: Optional[Callable[[DashboardTotals], None]] = None,
    ):
        if interval <= 0:
            raise ValueError("interval must be positive")

        self.aggregator = aggregator
        self.owner_provider = owner_provider
        self.interval = interval
        self.on_update = on_update
        self.totals = DashboardTotals()
        self.last_error: Optional[BaseException] = None
        self.fetch_count = 0
        self._task: Optional[asyncio.Task] = None
        self._inflight: Optional[asyncio.Future] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling. Must be called from inside a running event loop.

        The first refresh happens immediately.
        """
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.debug(f"Dashboard polling started (every {self.interval}s)")

    async def stop(self) -> None:
        """Cancel polling and any fetch still in flight."""
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            try:
                await task
            except asyncio.CancelledError:
                pass

        inflight, self._inflight = self._inflight, None
        if inflight is not None and not inflight.done():
            inflight.cancel()
            try:
                await inflight
            except asyncio.CancelledError:
                pass

        logger.debug("Dashboard polling stopped")

    async def refresh(self) -> DashboardTotals:
        """Fetch fresh totals, joining a fetch that is already running.

        Returns:
            The totals produced by the fetch.

        Raises:
            Exception: Whatever the underlying queries raised.
        """
        if self._inflight is None or self._inflight.done():
            self._inflight = asyncio.ensure_future(self._fetch())
        else:
            logger.debug("Dashboard refresh already in flight, joining it")

        # shield so one impatient caller cannot cancel the shared fetch
        return await asyncio.shield(self._inflight)

    async def _fetch(self) -> DashboardTotals:
        owner = self.owner_provider()
        self.fetch_count += 1
        totals = await asyncio.to_thread(self.aggregator.fetch, owner)

        self.totals = totals
        self.last_error = None
        if self.on_update is not None:
            self.on_update(totals)
        return totals

    async def _run(self) -> None:
        while True:
            try:
                await self.refresh()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                # keep the previous totals and try again next tick
                self.last_error = e
                logger.error(f"Dashboard refresh failed: {e}")
            await asyncio.sleep(self.interval)

    async def __aenter__(self) -> "DashboardPoller":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.stop()
