"""DCDirectory Authentication - Admin Credential Check.

A pass/fail gate in front of the admin surface. Nothing else in the
directory depends on how the check is made.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import hmac
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)

class Authenticator(ABC):
    """Base authenticator."""

    @abstractmethod
    def authenticate(self, email: str, password: str) -> bool:
        pass

class StaticCredentialAuthenticator(Authenticator):
    """Accepts exactly one configured email and password pair."""

    def __init__(self, email: str, password: str):
        self._email = email
        self._password = password

    def authenticate(self, email: str, password: str) -> bool:
        email_ok = hmac.compare_digest(str(email).encode(), self._email.encode())
        password_ok = hmac.compare_digest(str(password).encode(), self._password.encode())
        if not (email_ok and password_ok):
            logger.warning(f"Failed admin login for {email!r}")
            return False
        return True

__all__ = ["Authenticator", "StaticCredentialAuthenticator"]
