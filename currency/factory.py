"""Factory for creating rate provider instances."""

from config import Config
from currency.providers.base import RateProvider
from currency.providers.static import StaticRateProvider
from logger import get_logger

logger = get_logger()


def get_rate_provider(config: Config) -> RateProvider:
    """Create a rate provider from configuration.

    Only the static table is supported; live rates plug in by implementing
    RateProvider and passing it to Services directly.

    Args:
        config: Application configuration.

    Returns:
        RateProvider instance.

    Raises:
        ValueError: If the configured default currency has no rate.
    """
    provider = StaticRateProvider(config.currency_rates)

    if config.default_currency not in provider.currencies():
        raise ValueError(
            f"Default currency {config.default_currency} has no configured rate"
        )

    logger.debug(f"Loaded rates for {', '.join(provider.currencies())}")
    return provider
