"""Email/password authentication against the account store."""

from contextlib import closing
from typing import Callable

from ..db import Core
from ..exceptions import AuthenticationError
from .password import PasswordHasher
from .schemas import AuthenticatedIdentity


class Authenticator:
    """Verifies credentials using the stored password hash.

    Unknown emails and wrong passwords fail identically so callers cannot
    discover which emails are registered.
    """

    def __init__(self, get_core: Callable[..., Core], hasher: PasswordHasher):
        self._get_core = get_core
        self._hasher = hasher

    def authenticate(self, email: str, password: str) -> AuthenticatedIdentity:
        """Return the identity behind valid credentials.

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with closing(self._get_core()) as core:
            account = core.account.find_by_email(email)

        if account is None or not self._hasher.verify(password, account.password):
            raise AuthenticationError(
                "Invalid email or password",
                {"email": email}
            )

        return AuthenticatedIdentity(account_id=account.id, email=account.email)
