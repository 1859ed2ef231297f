"""
Dataclass representations of notification records and Discord webhook payloads.

Reference:
https://discord.com/developers/docs/resources/webhook#execute-webhook-jsonform-params
"""

import dataclasses
import datetime
import enum
import json
from typing import Any

from PIL import Image


class NotificationEventResult(str, enum.Enum):
    """Outcome of the event being reported."""

    SUCCESS = "Success"
    FAIL = "Fail"
    ERROR = "Error"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


@dataclasses.dataclass(frozen=True)
class NotificationRecord:
    """A notification as handed over by the dispatcher. Read-only here."""

    message: str
    event: str
    result: NotificationEventResult
    timestamp: datetime.datetime
    screenshot: Image.Image | None = None


def _without_absent(items: list[tuple[str, Any]]) -> dict[str, Any]:
    # None marks an absent field; Discord treats null differently from missing.
    return {key: value for key, value in items if value is not None}


@dataclasses.dataclass
class DiscordEmbedImage:
    url: str


@dataclasses.dataclass
class DiscordEmbedFooter:
    text: str


@dataclasses.dataclass
class DiscordEmbed:
    """Represents an embed object."""

    title: str | None = None
    description: str | None = None
    image: DiscordEmbedImage | None = None
    footer: DiscordEmbedFooter | None = None
    color: int | None = None


@dataclasses.dataclass
class DiscordPayload:
    """Top-level webhook payload."""

    username: str | None = None
    avatar_url: str | None = None
    embeds: list[DiscordEmbed] = dataclasses.field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self, dict_factory=_without_absent)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)


__all__ = [
    "DiscordEmbed",
    "DiscordEmbedFooter",
    "DiscordEmbedImage",
    "DiscordPayload",
    "NotificationEventResult",
    "NotificationRecord",
]
