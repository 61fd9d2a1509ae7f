"""Identity provider backed by environment variables."""

import os
from typing import Optional
from identity.providers.base import IdentityProvider, User

EMAIL_VARIABLE = "BUDGETBOOK_USER_EMAIL"
NAME_VARIABLE = "BUDGETBOOK_USER_NAME"


class EnvironmentIdentityProvider(IdentityProvider):
    """Reports the user from BUDGETBOOK_USER_EMAIL / BUDGETBOOK_USER_NAME.

    The environment is read on every call so a session can sign in or out
    without restarting.
    """

    def current_user(self) -> Optional[User]:
        email = os.environ.get(EMAIL_VARIABLE, "").strip()
        if not email:
            return None
        return User(email=email, full_name=os.environ.get(NAME_VARIABLE) or None)
