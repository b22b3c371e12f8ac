# src/taskpad/auth/session.py

from __future__ import annotations

import logging

from ..storage.kv_store import KeyValueStore

logger = logging.getLogger(__name__)

KEY_LOGGED_IN = "isLoggedIn"
KEY_EMAIL = "email"
KEY_PASSWORD = "password"


class SessionStore:
    """
    Local single-account session.

    One email/password pair is kept in the login preferences file; signing
    up again overwrites it. Login is an exact string match.
    """

    def __init__(self, kv: KeyValueStore) -> None:
        self._kv = kv

    def is_logged_in(self) -> bool:
        return self._kv.get_bool(KEY_LOGGED_IN, False)

    @property
    def email(self) -> str | None:
        return self._kv.get_str(KEY_EMAIL)

    def sign_up(self, email: str, password: str) -> None:
        """Store credentials and log in. Input must already be validated."""
        self._kv.put_many({KEY_EMAIL: email, KEY_PASSWORD: password, KEY_LOGGED_IN: True})
        logger.info("Account created for %s", email)

    def login(self, email: str, password: str) -> bool:
        stored_email = self._kv.get_str(KEY_EMAIL)
        stored_password = self._kv.get_str(KEY_PASSWORD)
        if stored_email is None or stored_password is None:
            logger.info("Login rejected: no account registered.")
            return False
        if email != stored_email or password != stored_password:
            logger.info("Login rejected for %s", email)
            return False
        self._kv.put_bool(KEY_LOGGED_IN, True)
        logger.info("Logged in as %s", email)
        return True

    def logout(self) -> None:
        self._kv.put_bool(KEY_LOGGED_IN, False)
        logger.info("Logged out.")
