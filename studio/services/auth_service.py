"""
Admin Authentication Service

Checks submitted admin credentials against ADMIN_USERNAME / ADMIN_PASSWORD.

Design Decisions:
- Credentials live in the environment only; nothing is read from storage
- No session or token is issued: a successful check is the whole contract,
  and the client keeps its own record of being logged in
- Admin routes are NOT protected by this service; any caller that can reach
  the API can use them
"""

import hmac
import logging
from typing import Optional

from studio.core.setting import Settings

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Exact-match credential check against configured admin secrets."""

    def __init__(self, settings: Settings):
        self.username = settings.ADMIN_USERNAME
        self.password = settings.ADMIN_PASSWORD

    @property
    def is_configured(self) -> bool:
        return bool(self.username) and bool(self.password)

    def verify(self, username: Optional[str], password: Optional[str]) -> bool:
        """
        Return True when both values match the configured credentials.

        Missing values, or credentials that were never configured, never match.
        """
        if not self.is_configured:
            logger.warning("Admin login attempted but ADMIN_USERNAME/ADMIN_PASSWORD are not set")
            return False
        if username is None or password is None:
            return False

        username_ok = hmac.compare_digest(username.encode(), self.username.encode())
        password_ok = hmac.compare_digest(password.encode(), self.password.encode())
        return username_ok and password_ok
