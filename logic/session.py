"""
Admin session gate.

A password check that toggles admin mode. It is not a security boundary: the
password is a shared constant and anyone holding it is admin. A persisted
marker plus a signed cookie keep admin state across page reloads.

Author: Bend Guide maintainers
Date: 2026-10-17
"""

import hmac
import json
import logging
from typing import Optional

from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

from logic.config import SESSION_KEY, SESSION_MAX_AGE
from logic.storage import LocalStorage

logger = logging.getLogger(__name__)

TOKEN_PAYLOAD = "admin"


class SessionGate:
    """Boolean admin flag controlled by a password comparison.

    Attributes:
        storage: Persistent store holding the session marker.
        max_age: Lifetime of issued tokens in seconds.
    """

    def __init__(
            self,
            password: str,
            secret_key: str,
            storage: LocalStorage,
            max_age: int = SESSION_MAX_AGE,
    ):
        self._password = password
        self._serializer = URLSafeTimedSerializer(secret_key, salt="admin-session")
        self.storage = storage
        self.max_age = max_age

    @property
    def is_admin(self) -> bool:
        """Whether an admin session marker is persisted."""
        raw = self.storage.get_item(SESSION_KEY)
        if raw is None:
            return False
        try:
            return json.loads(raw) is True
        except json.JSONDecodeError:
            return False

    def login(self, password: str) -> bool:
        """Compare ``password`` with the admin password.

        On success the session marker is persisted.

        Returns:
            True on a match, False otherwise.
        """
        if not hmac.compare_digest(password.encode("utf-8"), self._password.encode("utf-8")):
            logger.info("Rejected admin login attempt")
            return False

        self.storage.set_item(SESSION_KEY, json.dumps(True))
        logger.info("Admin session started")
        return True

    def logout(self):
        """Clear the admin flag and its persisted marker."""
        self.storage.remove_item(SESSION_KEY)
        logger.info("Admin session ended")

    def issue_token(self) -> str:
        """Create the signed cookie value for an admin browser."""
        return self._serializer.dumps(TOKEN_PAYLOAD)

    def verify_token(self, token: Optional[str]) -> bool:
        """Check a cookie value against the signature and the session marker.

        Args:
            token: Signed cookie value.

        Returns:
            True if the token is valid and the admin session is still active.
        """
        if not token:
            return False

        try:
            payload = self._serializer.loads(token, max_age=self.max_age)
        except (BadSignature, SignatureExpired):
            return False

        return payload == TOKEN_PAYLOAD and self.is_admin
