from __future__ import annotations

import dataclasses
import enum
import io
import logging
import os
from collections.abc import Callable, Mapping

from PIL import Image

logger = logging.getLogger(__name__)

ImageEncoder = Callable[[Image.Image], bytes]

_SCREENSHOT_STEM = "screenshot"


class ImageFormat(enum.Enum):
    """Image formats a screenshot can be uploaded as."""

    PNG = "png"
    JPEG = "jpeg"
    WEBP = "webp"

    @classmethod
    def parse(cls, name: str | ImageFormat | None) -> ImageFormat:
        if isinstance(name, ImageFormat):
            return name
        normalized = (name or "").strip().lower()
        if normalized in ("", "jpg"):
            return cls.JPEG
        try:
            return cls(normalized)
        except ValueError:
            logger.warning("Unknown image format %r, falling back to jpeg", name)
            return cls.JPEG

    @property
    def extension(self) -> str:
        return self.value

    @property
    def content_type(self) -> str:
        return f"image/{self.extension}"

    @property
    def filename(self) -> str:
        return f"{_SCREENSHOT_STEM}.{self.extension}"

    @property
    def attachment_url(self) -> str:
        return f"attachment://{self.filename}"

    def encoder(self) -> ImageEncoder:
        if self is ImageFormat.JPEG:
            return _encode_jpeg
        pil_format = self.name

        def encode(image: Image.Image) -> bytes:
            return _encode(image, pil_format)

        return encode


def _encode(image: Image.Image, pil_format: str) -> bytes:
    with io.BytesIO() as buffer:
        image.save(buffer, format=pil_format)
        return buffer.getvalue()


def _encode_jpeg(image: Image.Image) -> bytes:
    # JPEG has no alpha channel or palette.
    if image.mode not in ("RGB", "L", "CMYK"):
        image = image.convert("RGB")
    return _encode(image, "JPEG")


class EmbedTextLayout(enum.Enum):
    """
    Which record text becomes the embed title.

    ``MESSAGE_TITLE`` puts the message in the title and ``"<event> | <result>"``
    in the description; ``EVENT_TITLE`` swaps them.
    """

    MESSAGE_TITLE = "message_title"
    EVENT_TITLE = "event_title"


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


@dataclasses.dataclass(frozen=True)
class WebhookConfig:
    """
    Settings of a single webhook notifier, fixed at construction.

    Blank ``username`` / ``avatar_url`` become ``None`` and ``image_format``
    accepts either an ``ImageFormat`` or its name.
    """

    url: str | None
    username: str | None = None
    avatar_url: str | None = None
    image_format: ImageFormat = ImageFormat.JPEG
    text_layout: EmbedTextLayout = EmbedTextLayout.MESSAGE_TITLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "url", (self.url or "").strip())
        object.__setattr__(self, "username", _blank_to_none(self.username))
        object.__setattr__(self, "avatar_url", _blank_to_none(self.avatar_url))
        object.__setattr__(self, "image_format", ImageFormat.parse(self.image_format))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> WebhookConfig:
        """
        Read the webhook settings from ``DISCORD_WEBHOOK_*`` variables.

        A missing URL is accepted here and reported when sending.
        """
        env = os.environ if environ is None else environ
        return cls(
            url=env.get("DISCORD_WEBHOOK_URL"),
            username=env.get("DISCORD_WEBHOOK_USERNAME"),
            avatar_url=env.get("DISCORD_WEBHOOK_AVATAR_URL"),
            image_format=env.get("DISCORD_WEBHOOK_IMAGE_FORMAT"),
        )


__all__ = [
    "EmbedTextLayout",
    "ImageEncoder",
    "ImageFormat",
    "WebhookConfig",
]
