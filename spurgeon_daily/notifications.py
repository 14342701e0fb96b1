# spurgeon_daily/notifications.py
"""
Notification permission and the user's on/off toggle.

The permission request runs once at startup. The toggle is remembered for
the life of the process and reported back to the main view; nothing
schedules deliveries from it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from threading import Lock

from pydantic import BaseModel

log = logging.getLogger("spurgeon_daily")

# Options requested at startup
AUTHORIZATION_OPTIONS = ("alert", "badge", "sound")


class AuthorizationStatus(str, Enum):
    NOT_DETERMINED = "not_determined"
    GRANTED = "granted"
    DENIED = "denied"


class NotificationState(BaseModel):
    authorization: AuthorizationStatus
    options: list[str]
    enabled: bool


class NotificationToggle(BaseModel):
    enabled: bool


Authorizer = Callable[[tuple[str, ...]], bool]


class NotificationPreferences:
    def __init__(self):
        self._lock = Lock()
        self._status = AuthorizationStatus.NOT_DETERMINED
        self._enabled = False

    def request_authorization(self, authorizer: Authorizer) -> AuthorizationStatus:
        try:
            granted = bool(authorizer(AUTHORIZATION_OPTIONS))
        except Exception as e:
            log.error("notification_authorization_error", extra={"err": str(e)})
            granted = False

        with self._lock:
            self._status = AuthorizationStatus.GRANTED if granted else AuthorizationStatus.DENIED
            status = self._status

        log.info("Permission granted" if granted else "Permission denied")
        return status

    def set_enabled(self, enabled: bool) -> NotificationState:
        with self._lock:
            self._enabled = enabled
        log.info("notifications_toggled", extra={"enabled": enabled})
        return self.state()

    @property
    def enabled(self) -> bool:
        with self._lock:
            return self._enabled

    def state(self) -> NotificationState:
        with self._lock:
            return NotificationState(
                authorization=self._status,
                options=list(AUTHORIZATION_OPTIONS),
                enabled=self._enabled,
            )


def env_authorizer(grant: bool) -> Authorizer:
    """Authorizer that answers with a fixed, configured decision."""

    def _authorize(options: tuple[str, ...]) -> bool:
        return grant

    return _authorize


# singletons are fine for this simple service
preferences = NotificationPreferences()
