"""Factory for creating identity provider instances."""

from typing import Optional
from config import Config
from identity.providers.base import IdentityProvider
from identity.providers.config_file import ConfigIdentityProvider
from identity.providers.environment import EnvironmentIdentityProvider
from logger import get_logger

logger = get_logger()


def get_identity_provider(config: Config) -> IdentityProvider:
    """Create an identity provider instance based on configuration.

    Args:
        config: Application configuration.

    Returns:
        IdentityProvider instance.

    Raises:
        ValueError: If the configured provider is unknown.
    """
    provider_name = config.identity_provider

    if provider_name == "config":
        logger.debug("Using identity from config file")
        return ConfigIdentityProvider(config)

    elif provider_name == "environment":
        logger.debug("Using identity from environment")
        return EnvironmentIdentityProvider()

    else:
        raise ValueError(f"Unknown identity provider: {provider_name}")


def owner_key(provider: IdentityProvider) -> Optional[str]:
    """Get the ownership key used to scope queries to the current user.

    Args:
        provider: Identity provider to ask.

    Returns:
        The user's primary email, or None when signed out.
    """
    user = provider.current_user()
    return user.email if user else None
