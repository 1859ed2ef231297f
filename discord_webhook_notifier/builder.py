"""Maps a notification record onto the Discord webhook payload."""

from __future__ import annotations

import datetime

from .config import EmbedTextLayout, WebhookConfig, _blank_to_none
from .models import (
    DiscordEmbed,
    DiscordEmbedFooter,
    DiscordEmbedImage,
    DiscordPayload,
    NotificationEventResult,
    NotificationRecord,
)

SUCCESS_COLOR = 0x00FF00
FAILURE_COLOR = 0xFF0000


def format_timestamp(timestamp: datetime.datetime) -> str:
    return timestamp.isoformat(sep=" ", timespec="seconds")


def embed_color(result: NotificationEventResult) -> int:
    return FAILURE_COLOR if result == NotificationEventResult.FAIL else SUCCESS_COLOR


def embed_text(record: NotificationRecord, layout: EmbedTextLayout) -> tuple[str | None, str | None]:
    """Return ``(title, description)`` for the record under the given layout."""
    summary = f"{record.event} | {record.result}"
    if layout is EmbedTextLayout.EVENT_TITLE:
        title, description = summary, record.message
    else:
        title, description = record.message, summary
    return _blank_to_none(title), _blank_to_none(description)


def build_payload(record: NotificationRecord, config: WebhookConfig) -> DiscordPayload:
    title, description = embed_text(record, config.text_layout)
    image = None
    if record.screenshot is not None:
        image = DiscordEmbedImage(url=config.image_format.attachment_url)

    embed = DiscordEmbed(
        title=title,
        description=description,
        image=image,
        footer=DiscordEmbedFooter(text=format_timestamp(record.timestamp)),
        color=embed_color(record.result),
    )
    return DiscordPayload(
        username=config.username,
        avatar_url=config.avatar_url,
        embeds=[embed],
    )


__all__ = [
    "FAILURE_COLOR",
    "SUCCESS_COLOR",
    "build_payload",
    "embed_color",
    "embed_text",
    "format_timestamp",
]
