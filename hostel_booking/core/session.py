"""
Authentication session holder.

The bearer token is process-wide state set at login and cleared at
logout. All request code reads it through an ``AuthSession`` instead of
looking it up ad hoc.
"""

import logging
from typing import Dict, Optional

from hostel_booking.config.settings import settings

logger = logging.getLogger(__name__)


class AuthSession:
    """
    Holds the current access token.

    A remembered token (kept across browser restarts in the web portal)
    takes precedence over an ephemeral one, mirroring local storage being
    read before session storage.
    """

    def __init__(self, token: Optional[str] = None):
        self._remembered_token: Optional[str] = None
        self._ephemeral_token: Optional[str] = token or None

    @property
    def token(self) -> Optional[str]:
        return self._remembered_token or self._ephemeral_token

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def login(self, token: str, remember: bool = False) -> None:
        if not token:
            raise ValueError("Access token must not be empty")
        if remember:
            self._remembered_token = token
        else:
            self._ephemeral_token = token
        logger.info("Session token set", extra={"remember": remember})

    def logout(self) -> None:
        self._remembered_token = None
        self._ephemeral_token = None
        logger.info("Session cleared")

    def authorization_header(self) -> Dict[str, str]:
        """``Authorization`` header for the current token, empty when anonymous."""
        token = self.token
        if not token:
            return {}
        return {"Authorization": f"Bearer {token}"}


default_session = AuthSession(settings.ACCESS_TOKEN)
