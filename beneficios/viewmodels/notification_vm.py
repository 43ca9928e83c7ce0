from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Literal, Optional

Severity = Literal["success", "error"]


@dataclass(frozen=True)
class Notification:
    """Transient message shown by a screen."""
    message: str
    severity: Severity
    expires_at: float


class NotificationVM:
    """Per-screen notification slot with fixed-duration expiry.

    A new ``show`` replaces the current message. Expiry is evaluated lazily
    against ``clock`` so no timer has to outlive the screen.
    """

    def __init__(
        self,
        duration_s: float = 5.0,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if duration_s <= 0:
            raise ValueError("duration_s must be positive.")
        self.duration_s = float(duration_s)
        self._clock = clock
        self._current: Optional[Notification] = None

    def show(self, message: str, severity: Severity = "success") -> Notification:
        if severity not in ("success", "error"):
            raise ValueError(f"Unsupported severity: {severity}")
        self._current = Notification(
            message=message,
            severity=severity,
            expires_at=self._clock() + self.duration_s,
        )
        return self._current

    def success(self, message: str) -> Notification:
        return self.show(message, "success")

    def error(self, message: str) -> Notification:
        return self.show(message, "error")

    @property
    def current(self) -> Optional[Notification]:
        note = self._current
        if note is not None and self._clock() >= note.expires_at:
            self._current = None
            return None
        return note

    def dismiss(self) -> None:
        self._current = None


__all__ = ["Notification", "NotificationVM", "Severity"]
