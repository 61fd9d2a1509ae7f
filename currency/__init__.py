"""Currency conversion for reports."""

from currency.factory import get_rate_provider
from currency.providers.base import RateProvider, UnknownCurrencyError
from currency.providers.static import StaticRateProvider

__all__ = [
    "get_rate_provider",
    "RateProvider",
    "UnknownCurrencyError",
    "StaticRateProvider",
]
