"""Base provider interface for identity implementations."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class User:
    """The signed-in user as reported by an identity provider."""

    email: str  # primary email address, used as the ownership key
    full_name: Optional[str] = None


class IdentityProvider(ABC):
    """Abstract base class for identity providers.

    Authentication itself happens elsewhere; a provider only reports who is
    signed in right now.
    """

    @abstractmethod
    def current_user(self) -> Optional[User]:
        """Get the current session's user.

        Returns:
            The signed-in User, or None when nobody is signed in.
        """
        pass
