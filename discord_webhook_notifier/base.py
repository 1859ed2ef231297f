from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .models import NotificationRecord


@runtime_checkable
class Notifier(Protocol):
    """Interface the dispatcher uses to hand records to a notification channel."""

    name: str

    def notify(self, record: NotificationRecord) -> Any:
        """Deliver the record, raising ``NotifierError`` on failure."""
