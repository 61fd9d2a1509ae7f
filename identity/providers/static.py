"""Identity provider returning a fixed user."""

from typing import Optional
from identity.providers.base import IdentityProvider, User


class StaticIdentityProvider(IdentityProvider):
    """Always reports the same user, or nobody if constructed with None."""

    def __init__(self, user: Optional[User] = None):
        self.user = user

    def current_user(self) -> Optional[User]:
        return self.user
