"""
CategoryDesk Client - Session Manager

Holds the session credential (bearer token) and decides whether the
protected category view may be shown.

The credential lives only in process memory: it is set after a
successful login, cleared on logout, and gone when the process exits.
Its presence alone means "authenticated" - there is no expiry check
and no refresh.

Author: CategoryDesk Project
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional

# Configure logging
logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "accessToken"
LOGIN_ROUTE = "/login"


class SessionStorage:
    """Process-lifetime key/value store. Never written to disk."""

    def __init__(self):
        self._items: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._items.get(key)

    def set_item(self, key: str, value: str):
        with self._lock:
            self._items[key] = value

    def remove_item(self, key: str):
        with self._lock:
            self._items.pop(key, None)

    def clear(self):
        with self._lock:
            self._items.clear()


@dataclass(frozen=True)
class GateDecision:
    """
    Outcome of a session check.

    Attributes:
        allowed: True if the protected view may render
        redirect_to: Route to show instead (None when allowed)
        origin: Location originally requested, kept for the login page
    """
    allowed: bool
    redirect_to: Optional[str] = None
    origin: Optional[str] = None


class SessionManager:
    """
    Single owner of the session credential.

    Other components read and write the token only through this class.
    """

    def __init__(self, storage: Optional[SessionStorage] = None, key: str = ACCESS_TOKEN_KEY):
        self.storage = storage if storage is not None else SessionStorage()
        self.key = key

    def set_credential(self, token: str):
        """Store the token returned by a successful login."""
        self.storage.set_item(self.key, token)
        logger.info("Session credential stored")

    def get_credential(self) -> Optional[str]:
        token = self.storage.get_item(self.key)
        return token or None

    def clear_credential(self):
        self.storage.remove_item(self.key)
        logger.info("Session credential cleared")

    def is_authenticated(self) -> bool:
        return self.get_credential() is not None

    def require_session(self, location: str = "/") -> GateDecision:
        """
        Check the session before rendering a protected location.

        Args:
            location: Route the user asked for

        Returns:
            GateDecision allowing the view, or redirecting to the login
            route with the requested location as origin
        """
        if self.is_authenticated():
            return GateDecision(allowed=True)

        logger.debug(f"No session credential - redirecting {location} to {LOGIN_ROUTE}")
        return GateDecision(allowed=False, redirect_to=LOGIN_ROUTE, origin=location)
