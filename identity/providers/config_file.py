"""Identity provider backed by the [identity] section of the config file."""

from typing import Optional
from config import Config
from identity.providers.base import IdentityProvider, User


class ConfigIdentityProvider(IdentityProvider):
    """Reports the user named in configuration.

    An empty or missing email means nobody is signed in.
    """

    def __init__(self, config: Config):
        self.config = config

    def current_user(self) -> Optional[User]:
        if not self.config.user_email:
            return None
        return User(email=self.config.user_email, full_name=self.config.user_name)
