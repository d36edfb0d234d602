"""Account Rules: registration gate and login authentication.

Invariants:
    - register: validation -> duplicate-username check -> single store write
    - authenticate: unknown username and wrong password fail identically,
      in message and in hashing cost
    - Passwords are hashed before the write and verified in constant time
    - Raw passwords are never logged

Design Decisions:
    - The duplicate check is a fast path; the store's UNIQUE constraint is the
      real guarantee and the repository maps its violation to ConflictError
"""

import logging
from dataclasses import replace

from social_api.core.domain_types import Account
from social_api.core.enforce_account import validate_registration
from social_api.core.errors import ConflictError, InvalidCredentialsError, raise_for
from social_api.core.passwords import (
    DEFAULT_ITERATIONS, dummy_hash, hash_password, verify_password,
)
from social_api.core.repository_protocols import AccountRepository

logger = logging.getLogger(__name__)


class AccountRules:
    """Stateless account rules over an AccountRepository."""

    def __init__(
        self, accounts: AccountRepository,
        hash_iterations: int = DEFAULT_ITERATIONS,
    ):
        self.accounts = accounts
        self.hash_iterations = hash_iterations

    async def register(self, candidate: Account) -> Account:
        """Validate and persist a new account.

        Raises:
            ValidationError: blank username or password shorter than 4 chars.
            ConflictError: username already taken.
        """
        raise_for(validate_registration(candidate.username, candidate.password))

        if await self.accounts.find_by_username(candidate.username) is not None:
            logger.info(
                "Registration rejected: username taken",
                extra={"username": candidate.username},
            )
            raise ConflictError("Username already exists", field="username")

        account = await self.accounts.save(replace(
            candidate,
            id=None,
            password=hash_password(candidate.password, self.hash_iterations),
        ))
        logger.info(
            "Account registered",
            extra={"account_id": account.id, "username": account.username},
        )
        return account

    async def authenticate(self, username: str | None, password: str | None) -> Account:
        """Return the account matching the credentials.

        Raises:
            InvalidCredentialsError: unknown username or wrong password.
        """
        account = None
        if username is not None:
            account = await self.accounts.find_by_username(username)
        if account is None or password is None:
            # equal PBKDF2 cost for unknown usernames
            verify_password(password or "", dummy_hash(self.hash_iterations))
            logger.info("Login failed", extra={"username": username})
            raise InvalidCredentialsError()
        if not verify_password(password, account.password or ""):
            logger.info("Login failed", extra={"username": username})
            raise InvalidCredentialsError()
        return account
