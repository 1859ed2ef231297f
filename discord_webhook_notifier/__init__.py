from .base import Notifier
from .builder import build_payload
from .client import DiscordWebhookNotifier
from .config import EmbedTextLayout, ImageFormat, WebhookConfig
from .errors import ConfigurationError, DeliveryError, NotifierError
from .models import (
    DiscordEmbed,
    DiscordEmbedFooter,
    DiscordEmbedImage,
    DiscordPayload,
    NotificationEventResult,
    NotificationRecord,
)

__all__ = [
    "ConfigurationError",
    "DeliveryError",
    "DiscordEmbed",
    "DiscordEmbedFooter",
    "DiscordEmbedImage",
    "DiscordPayload",
    "DiscordWebhookNotifier",
    "EmbedTextLayout",
    "ImageFormat",
    "NotificationEventResult",
    "NotificationRecord",
    "Notifier",
    "NotifierError",
    "WebhookConfig",
    "build_payload",
]
