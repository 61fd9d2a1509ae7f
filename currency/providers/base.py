"""Base provider interface for currency conversion rates."""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import List


class UnknownCurrencyError(ValueError):
    """Raised when a rate is requested for a currency the provider lacks."""

    def __init__(self, code: str):
        super().__init__(f"Unknown currency: {code}")
        self.code = code


class RateProvider(ABC):
    """Abstract base class for rate providers.

    A rate is the multiplicative factor that maps an amount in the base
    currency to the display currency. The base currency's rate is 1.
    """

    base_currency: str = "USD"

    @abstractmethod
    def rate(self, code: str) -> Decimal:
        """Get the conversion rate for a currency.

        Args:
            code: ISO currency code, e.g. "EUR".

        Returns:
            Rate relative to the base currency.

        Raises:
            UnknownCurrencyError: If the code is not supported.
        """
        pass

    @abstractmethod
    def currencies(self) -> List[str]:
        """Get the currency codes this provider can convert to."""
        pass

    def convert(self, amount: Decimal, code: str) -> Decimal:
        """Convert an amount in the base currency to another currency."""
        return amount * self.rate(code)
