"""Identity integration: who is signed in, and what their data is keyed by."""

from identity.factory import get_identity_provider, owner_key
from identity.providers.base import IdentityProvider, User
from identity.providers.static import StaticIdentityProvider

__all__ = [
    "get_identity_provider",
    "owner_key",
    "IdentityProvider",
    "User",
    "StaticIdentityProvider",
]
