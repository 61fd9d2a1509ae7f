"""Rate provider backed by a fixed in-memory table."""

from decimal import Decimal
from typing import Dict, List, Optional
from config import DEFAULT_CURRENCY_RATES
from currency.providers.base import RateProvider, UnknownCurrencyError


class StaticRateProvider(RateProvider):
    """Serves rates from a mapping of currency code to rate.

    Args:
        rates: Mapping of code to rate. Defaults to the built-in table.
        base_currency: Code whose rate is 1.
    """

    def __init__(
        self, rates: Optional[Dict[str, Decimal]] = None, base_currency: str = "USD"
    ):
        table = rates if rates is not None else DEFAULT_CURRENCY_RATES
        self._rates = {code.upper(): Decimal(str(rate)) for code, rate in table.items()}
        self.base_currency = base_currency

    def rate(self, code: str) -> Decimal:
        try:
            return self._rates[code.upper()]
        except KeyError:
            raise UnknownCurrencyError(code) from None

    def currencies(self) -> List[str]:
        return list(self._rates.keys())
