"""Account store operations.

IMPORT CONVENTION:
- Core accesses these through core.account property
- NO direct import needed when using Core API

ID GENERATION POLICY:
Account IDs are SQLite autoincrement integers. save() inserts when the
account has no id and returns a copy carrying the generated one; an account
with an id is inserted or fully replaced under that id.
"""

import sqlite3
from dataclasses import dataclass, replace
from datetime import date

from ..utils import isodatetime


COLUMNS = ("id", "email", "password", "full_name", "phone_number", "date_of_birth", "gender")


@dataclass(slots=True)
class Account:
    """Persisted user record, including the stored password hash."""

    id: int | None
    email: str
    password: str | None = None
    full_name: str | None = None
    phone_number: str | None = None
    date_of_birth: date | None = None
    gender: bool = False


def _row_to_account(row: sqlite3.Row) -> Account:
    """Convert a users row into an Account."""
    return Account(
        id=row["id"],
        email=row["email"],
        password=row["password"],
        full_name=row["full_name"],
        phone_number=row["phone_number"],
        date_of_birth=isodatetime.to_date(row["date_of_birth"]),
        gender=bool(row["gender"]),
    )


def _account_params(account: Account) -> tuple:
    return (
        account.email,
        account.password,
        account.full_name,
        account.phone_number,
        isodatetime.to_datestring(account.date_of_birth),
        int(account.gender),
    )


class AccountOperations:
    """Account store backed by the users table.

    Writes are committed immediately when the owning Core is in autocommit
    mode; inside an atomic Core the Core decides commit or rollback.
    """

    def __init__(self, conn: sqlite3.Connection, autocommit: bool = False):
        """Initialize account operations with a database connection.

        Args:
            conn: SQLite connection with row_factory set to sqlite3.Row
            autocommit: Commit after each write
        """
        self._conn = conn
        self._autocommit = autocommit

    def find_all(self) -> list[Account]:
        """Return every account ordered by id."""
        rows = self._conn.execute(
            f"SELECT {', '.join(COLUMNS)} FROM users ORDER BY id"
        ).fetchall()
        return [_row_to_account(row) for row in rows]

    def find_by_id(self, account_id: int) -> Account | None:
        """Return the account with this id, or None."""
        row = self._conn.execute(
            f"SELECT {', '.join(COLUMNS)} FROM users WHERE id = ?",
            (account_id,)
        ).fetchone()
        return _row_to_account(row) if row else None

    def find_by_email(self, email: str) -> Account | None:
        """Return the account registered under this email, or None."""
        row = self._conn.execute(
            f"SELECT {', '.join(COLUMNS)} FROM users WHERE email = ?",
            (email,)
        ).fetchone()
        return _row_to_account(row) if row else None

    def count(self) -> int:
        """Return the number of stored accounts."""
        return self._conn.execute("SELECT COUNT(*) FROM users").fetchone()[0]

    def save(self, account: Account) -> Account:
        """Insert or fully replace an account.

        Args:
            account: Account to persist. With id None a new row is inserted;
                otherwise the row with that id is created or overwritten.

        Returns:
            The saved account, carrying its id

        Raises:
            sqlite3.IntegrityError: If the email belongs to another account
        """
        if account.id is None:
            cursor = self._conn.execute(
                """INSERT INTO users
                   (email, password, full_name, phone_number, date_of_birth, gender)
                   VALUES (?, ?, ?, ?, ?, ?)""",
                _account_params(account)
            )
            saved = replace(account, id=cursor.lastrowid)
        else:
            self._conn.execute(
                """INSERT INTO users
                   (id, email, password, full_name, phone_number, date_of_birth, gender)
                   VALUES (?, ?, ?, ?, ?, ?, ?)
                   ON CONFLICT(id) DO UPDATE SET
                       email = excluded.email,
                       password = excluded.password,
                       full_name = excluded.full_name,
                       phone_number = excluded.phone_number,
                       date_of_birth = excluded.date_of_birth,
                       gender = excluded.gender""",
                (account.id, *_account_params(account))
            )
            saved = account

        if self._autocommit:
            self._conn.commit()
        return saved

    def update(self, account: Account) -> bool:
        """Overwrite every column of an existing row.

        Unlike save(), never inserts: a row deleted in the meantime stays
        deleted.

        Returns:
            True if a row with account.id was updated

        Raises:
            sqlite3.IntegrityError: If the email belongs to another account
        """
        cursor = self._conn.execute(
            """UPDATE users SET
                   email = ?, password = ?, full_name = ?, phone_number = ?,
                   date_of_birth = ?, gender = ?
               WHERE id = ?""",
            (*_account_params(account), account.id)
        )
        if self._autocommit:
            self._conn.commit()
        return cursor.rowcount > 0

    def delete(self, account: Account) -> None:
        """Remove the account's row. Unknown ids are a no-op."""
        self._conn.execute("DELETE FROM users WHERE id = ?", (account.id,))
        if self._autocommit:
            self._conn.commit()
