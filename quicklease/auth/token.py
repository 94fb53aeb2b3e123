"""JWT access token issuance and validation.

Tokens are signed with the configured secret (HS256 by default) and carry:
- sub: account id as a string
- email: account email at issue time
- iat / exp: unix timestamps
"""

from datetime import timedelta

import jwt

from ..config import settings
from ..db.account import Account
from ..utils import isodatetime
from .schemas import TokenPayload


class TokenIssuer:
    """Issues and validates bearer tokens for accounts."""

    def __init__(
        self,
        secret_key: str | None = None,
        algorithm: str | None = None,
        expiry: timedelta | None = None,
    ):
        self._secret_key = secret_key or settings.jwt_secret_key
        self._algorithm = algorithm or settings.jwt_algorithm
        self._expiry = expiry or timedelta(days=settings.jwt_expiry_days)

    def issue(self, account: Account) -> str:
        """Issue a signed access token for a persisted account.

        Raises:
            ValueError: If the account has not been saved yet
        """
        if account.id is None:
            raise ValueError("Cannot issue a token for an unsaved account")

        issued_at = isodatetime.now_unix()
        claims = {
            "sub": str(account.id),
            "email": account.email,
            "iat": issued_at,
            "exp": issued_at + int(self._expiry.total_seconds()),
        }
        return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)

    def validate(self, token: str) -> TokenPayload:
        """Verify signature and expiry, returning the decoded claims.

        Raises:
            jwt.ExpiredSignatureError: If the token has expired
            jwt.InvalidTokenError: If the token is malformed or badly signed
        """
        payload = jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._algorithm],
            options={"require": ["sub", "exp", "iat"]},
        )
        return TokenPayload(**payload)
