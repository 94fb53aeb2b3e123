"""Authentication and account management for QuickLease.

This module provides:
- Schema validation for account and auth payloads
- Password hashing and verification (bcrypt)
- JWT token issuance and validation
- Credential authentication against the account store
- The AccountService orchestrating CRUD, registration and login
"""

from . import schemas, mapper
from .authenticator import Authenticator
from .password import PasswordHasher
from .service import AccountService
from .token import TokenIssuer

__all__ = [
    "schemas",
    "mapper",
    "Authenticator",
    "PasswordHasher",
    "AccountService",
    "TokenIssuer",
]
