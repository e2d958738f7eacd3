from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Use case: check the single configured admin account.

    The outcome is informational; nothing else in the API consults it.
    """

    def __init__(self, *, username: str, password: str):
        self._username = username
        self._password_hash = generate_password_hash(password)

    def login(self, username: str | None, password: str | None) -> bool:
        if username != self._username or not isinstance(password, str):
            ok = False
        else:
            ok = check_password_hash(self._password_hash, password)

        if ok:
            logger.info("admin login succeeded for %s", username)
        else:
            logger.warning("admin login failed for %r", username)
        return ok
