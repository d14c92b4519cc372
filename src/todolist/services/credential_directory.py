"""Registry of user accounts."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..errors import InvalidArgumentError
from ..models import Account

logger = logging.getLogger(__name__)

# Accounts available in every fresh directory
SEED_ACCOUNTS: tuple[tuple[str, str], ...] = (
    ("admin", "admin123"),
    ("test", "test123"),
)


class CredentialDirectory:
    """
    Owns the set of registered accounts.

    The application constructs one directory per process and hands it to
    whatever needs it. Accounts live for the lifetime of the directory and
    are never changed or removed once added.
    """

    def __init__(self, seed: Iterable[tuple[str, str]] = SEED_ACCOUNTS) -> None:
        self._accounts: dict[str, Account] = {}
        for username, password in seed:
            self._accounts[username] = Account(username=username, password=password)
        logger.debug("Credential directory ready with %d account(s)", len(self._accounts))

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, username: object) -> bool:
        return self.exists(username)

    def exists(self, username: object) -> bool:
        """Check whether an account with this exact username is registered."""
        try:
            return username in self._accounts
        except TypeError:
            return False

    def authenticate(self, username: str, password: str) -> bool:
        """
        Check a username/password pair.

        Returns False for an unknown user, a wrong password, or any failure
        during the lookup; the caller can never tell these apart.
        """
        try:
            account = self._accounts.get(username)
            ok = account is not None and account.password == password
        except Exception:
            logger.exception("Authentication error")
            return False

        if ok:
            logger.info("User authenticated: %s", username)
        else:
            logger.info("Authentication failed for: %s", username)
        return ok

    def register(self, username: str | None, password: str | None) -> bool:
        """
        Register a new account.

        Raises InvalidArgumentError if either value is missing or blank.
        Returns False without changing anything if the username is taken.
        """
        if not _has_text(username) or not _has_text(password):
            raise InvalidArgumentError("Username and password cannot be empty")

        if username in self._accounts:
            logger.info("Registration rejected, username exists: %s", username)
            return False

        self._accounts[username] = Account(username=username, password=password)
        logger.info("Account registered: %s", username)
        return True


def _has_text(value: str | None) -> bool:
    """True if value is a string with at least one non-whitespace character."""
    return isinstance(value, str) and bool(value.strip())
