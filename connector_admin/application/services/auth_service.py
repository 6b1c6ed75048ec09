"""Admin login gate for the dashboard shell.

A single admin account configured in settings. This is a convenience gate
for the dashboard, not a security boundary.
"""

import logging
import secrets

logger = logging.getLogger(__name__)


class AuthService:
    """Checks the configured admin credentials and hands out session tokens."""

    def __init__(self, username: str, email: str, password: str):
        self._username = username
        self._email = email
        self._password = password

    def validate_credentials(self, username_or_email: str, password: str) -> bool:
        """Accept either the admin username or email together with the password."""
        identifier = (username_or_email or "").strip()
        known = identifier in (self._username, self._email)
        password_ok = secrets.compare_digest(
            (password or "").encode("utf-8"), self._password.encode("utf-8")
        )
        return known and password_ok

    def login(self, username_or_email: str, password: str) -> str | None:
        """Return a new session token, or None when the credentials are wrong."""
        if not self.validate_credentials(username_or_email, password):
            logger.info("Rejected login for %r", username_or_email)
            return None
        logger.info("Admin logged in as %r", username_or_email)
        return secrets.token_urlsafe(32)
