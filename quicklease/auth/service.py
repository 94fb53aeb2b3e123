"""Account service: CRUD and authentication flows over the account store.

Every collaborator is passed in explicitly. Mutating operations each run in
one atomic Core, so a rejection raised inside the block (not found, email
taken) rolls back whatever the operation had written.
"""

import sqlite3
from contextlib import closing
from typing import Callable

import jwt

from ..db import Core
from ..exceptions import (
    AccountAlreadyExists,
    AuthenticationError,
    DatabaseError,
    ResourceNotFound,
    ValidationError,
)
from . import mapper
from .authenticator import Authenticator
from .password import PasswordHasher
from .schemas import AccountView, AuthResult, Credentials
from .token import TokenIssuer


class AccountService:
    """Orchestrates account management and authentication.

    Args:
        get_core: Factory returning a Core; called with atomic=True for
            units of work
        hasher: Password hasher used at registration
        token_issuer: Issues and validates bearer tokens
        authenticator: Verifies login credentials
        hash_on_create: Hash passwords passed to create_account. Off by
            default, in which case create_account stores them as supplied.
    """

    def __init__(
        self,
        get_core: Callable[..., Core],
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        authenticator: Authenticator,
        hash_on_create: bool = False,
    ):
        self._get_core = get_core
        self._hasher = hasher
        self._token_issuer = token_issuer
        self._authenticator = authenticator
        self._hash_on_create = hash_on_create

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def list_accounts(self) -> list[AccountView]:
        """Return every account. Not paginated."""
        with closing(self._get_core()) as core:
            accounts = core.account.find_all()
        return [mapper.to_view(account) for account in accounts]

    def get_account(self, account_id: int) -> AccountView:
        """Return one account.

        Raises:
            ResourceNotFound: If no account has this id
        """
        with closing(self._get_core()) as core:
            account = core.account.find_by_id(account_id)
        if account is None:
            raise _account_not_found(account_id)
        return mapper.to_view(account)

    def create_account(self, view: AccountView) -> AccountView:
        """Persist an account and return the input view unchanged.

        Raises:
            AccountAlreadyExists: If the email belongs to another account
            ValidationError: If hashing is on and the password is too long
        """
        account = mapper.to_account(view)
        if self._hash_on_create and account.password is not None:
            account.password = self._hasher.hash(account.password)

        with self._get_core(atomic=True) as core:
            _save(core, account)
        return view

    def update_account(self, view: AccountView) -> AccountView:
        """Overwrite every field of an existing account, keeping its id.

        Fields omitted from the view are reset to their defaults rather than
        merged from the stored record.

        Raises:
            ResourceNotFound: If view.id does not reference an account
            AccountAlreadyExists: If the new email belongs to another account
        """
        with self._get_core(atomic=True) as core:
            if view.id is None or not _update(core, mapper.to_account(view)):
                raise _account_not_found(view.id)
        return view

    def delete_account(self, account_id: int) -> None:
        """Remove an account.

        Raises:
            ResourceNotFound: If no account has this id
        """
        with self._get_core(atomic=True) as core:
            account = core.account.find_by_id(account_id)
            if account is None:
                raise _account_not_found(account_id)
            core.account.delete(account)

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    def register_account(self, view: AccountView) -> AuthResult:
        """Create an account with a hashed password and issue its first token.

        Raises:
            ValidationError: If the password is missing, empty or too long
                to hash
            AccountAlreadyExists: If the email is already registered, whether
                seen by the pre-check or by the store's unique constraint
        """
        if not view.password:
            raise ValidationError("Password is required", {"field": "password"})
        account = mapper.to_account(view)

        with self._get_core(atomic=True) as core:
            if core.account.find_by_email(account.email) is not None:
                raise _email_taken(account.email)
            account.password = self._hasher.hash(account.password)
            saved = _save(core, account)

        return AuthResult(token=self._token_issuer.issue(saved))

    def login_account(self, credentials: Credentials) -> AuthResult:
        """Exchange valid credentials for a token.

        Raises:
            AuthenticationError: If the credentials do not verify
            ResourceNotFound: If the account was deleted between verification
                and lookup
        """
        identity = self._authenticator.authenticate(credentials.email, credentials.password)

        with closing(self._get_core()) as core:
            account = core.account.find_by_email(identity.email)
        if account is None:
            raise ResourceNotFound(
                f"Account with email {identity.email} not found",
                {"email": identity.email}
            )

        return AuthResult(token=self._token_issuer.issue(account))

    def authenticate_token(self, token: str) -> AccountView:
        """Resolve a bearer token to the account it was issued for.

        Raises:
            AuthenticationError: If the token is expired, invalid, or names
                an account that no longer exists
        """
        try:
            payload = self._token_issuer.validate(token)
            account_id = int(payload.sub)
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired", {"code": "token_expired"})
        except (jwt.InvalidTokenError, ValueError):
            raise AuthenticationError("Invalid token", {"code": "invalid_token"})

        with closing(self._get_core()) as core:
            account = core.account.find_by_id(account_id)
        if account is None:
            raise AuthenticationError("Account not found", {"account_id": account_id})
        return mapper.to_view(account)


def _save(core: Core, account):
    """Save through the store, translating sqlite errors."""
    try:
        return core.account.save(account)
    except sqlite3.IntegrityError as e:
        raise _email_taken(account.email) from e
    except sqlite3.Error as e:
        raise DatabaseError(f"Failed to save account: {e}") from e


def _update(core: Core, account) -> bool:
    try:
        return core.account.update(account)
    except sqlite3.IntegrityError as e:
        raise _email_taken(account.email) from e
    except sqlite3.Error as e:
        raise DatabaseError(f"Failed to update account {account.id}: {e}") from e


def _account_not_found(account_id) -> ResourceNotFound:
    return ResourceNotFound(
        f"Account with id {account_id} not found",
        {"account_id": account_id}
    )


def _email_taken(email: str) -> AccountAlreadyExists:
    return AccountAlreadyExists(
        f"Account with email {email} already exists",
        {"email": email}
    )
