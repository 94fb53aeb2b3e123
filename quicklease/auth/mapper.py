"""Translation between persisted accounts and their external views."""

from ..db.account import Account
from .schemas import AccountView


def to_view(account: Account | None) -> AccountView | None:
    """Build the external view of an account. The password is never copied."""
    if account is None:
        return None
    return AccountView(
        id=account.id,
        email=account.email,
        full_name=account.full_name,
        phone_number=account.phone_number,
        date_of_birth=account.date_of_birth,
        gender=account.gender,
    )


def to_account(view: AccountView) -> Account:
    """Build an account from a view, copying every field including id and
    the supplied password as-is. Hashing is the caller's decision."""
    return Account(
        id=view.id,
        email=view.email,
        password=view.password,
        full_name=view.full_name,
        phone_number=view.phone_number,
        date_of_birth=view.date_of_birth,
        gender=view.gender,
    )
