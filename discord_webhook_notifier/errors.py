from __future__ import annotations

import httpx


class NotifierError(Exception):
    """Base class for notifier failures."""


class ConfigurationError(NotifierError):
    """The notifier cannot send because its configuration is incomplete."""


class DeliveryError(NotifierError):
    """
    The webhook request was attempted and did not succeed.

    The original exception is kept in ``cause`` (and as ``__cause__``
    when raised with ``from``).
    """

    def __init__(self, message: str, cause: BaseException):
        super().__init__(message)
        self.cause = cause

    @property
    def status_code(self) -> int | None:
        if isinstance(self.cause, httpx.HTTPStatusError):
            return self.cause.response.status_code
        return None


__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "NotifierError",
]
