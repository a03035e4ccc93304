from __future__ import annotations

import logging
from typing import List, Optional

from rental_engine.models.user import Account
from rental_engine.seeds import DEFAULT_ACCOUNTS
from rental_engine.utils.constants import Role
from rental_engine.utils.security import hash_password

logger = logging.getLogger(__name__)


class UserDirectory:
    """Registered accounts: login checks and customer self-registration."""

    def __init__(self):
        self._accounts: List[Account] = []
        self._seed()

    def _seed(self):
        for username, password, role in DEFAULT_ACCOUNTS:
            self._accounts.append(Account(username, hash_password(password), role))

    def authenticate(self, username: str, password: str) -> Optional[Account]:
        """Return the first account whose username and password both match, else None."""
        for account in self._accounts:
            if account.username == username and account.check_password(password):
                logger.info("Login ok: %s (%s)", username, account.role)
                return account
        logger.info("Login failed for %r", username)
        return None

    def username_exists(self, username: str) -> bool:
        return any(a.username == username for a in self._accounts)

    def register_customer(self, username: str, password: str) -> bool:
        """
        Append a Customer account. Returns False if the username is taken.
        Username format and password strength are checked by the caller.
        """
        if self.username_exists(username):
            logger.info("Registration rejected, username exists: %r", username)
            return False
        self._accounts.append(Account(username, hash_password(password), Role.CUSTOMER))
        logger.info("Registered customer %r", username)
        return True

    def get(self, username: str) -> Optional[Account]:
        for account in self._accounts:
            if account.username == username:
                return account
        return None

    def list_accounts(self) -> List[Account]:
        return list(self._accounts)

    def reset(self):
        self._accounts.clear()
        self._seed()
        logger.info("Accounts reset to defaults")
