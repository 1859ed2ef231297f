from __future__ import annotations

import logging
from types import TracebackType

import httpx
from PIL import Image

from .builder import build_payload
from .config import WebhookConfig
from .errors import ConfigurationError, DeliveryError
from .models import DiscordPayload, NotificationRecord

# Discord only links attachment:// URLs to parts named files[n].
_FILE_FIELD = "files[0]"
_PAYLOAD_FIELD = "payload_json"


class DiscordWebhookNotifier:
    """
    Sends notification records to a Discord webhook as a single embed.

    Records without a screenshot go out as a JSON body; records with one
    are sent as multipart form data holding the encoded image and the JSON
    payload. Each send is one request and failures are not retried.

    ``timeout`` configures the client the notifier creates itself; an
    injected ``session`` keeps its own timeout, so passing both is an error.
    """

    name = "Discord Webhook"

    def __init__(
        self,
        config: WebhookConfig,
        *,
        session: httpx.Client | None = None,
        timeout: float | None = None,
        logger: logging.Logger | None = None,
    ):
        if session is not None and timeout is not None:
            raise ValueError("timeout cannot be combined with an injected session")
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self._encode = config.image_format.encoder()
        self._owns_session = session is None
        if session is None:
            session = httpx.Client() if timeout is None else httpx.Client(timeout=timeout)
        self._session = session

    def __enter__(self) -> "DiscordWebhookNotifier":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def notify(self, record: NotificationRecord) -> httpx.Response:
        payload = build_payload(record, self.config)
        return self.send(payload, record.screenshot)

    def send(self, payload: DiscordPayload, screenshot: Image.Image | None = None) -> httpx.Response:
        if not self.config.url:
            raise ConfigurationError("Discord webhook URL is not set")

        try:
            if screenshot is None:
                response = self._session.post(self.config.url, json=payload.to_dict())
            else:
                response = self._post_multipart(payload, self._encode_screenshot(screenshot))
            self.logger.debug(response.content)
            response.raise_for_status()
        except (httpx.HTTPError, OSError) as exc:
            self.logger.debug("Failed to send message to Discord: %s", exc)
            raise DeliveryError("Failed to send message to Discord", exc) from exc

        return response

    def _encode_screenshot(self, screenshot: Image.Image) -> bytes:
        # Pillow reports oversized or empty images as ValueError/MemoryError.
        try:
            return self._encode(screenshot)
        except (ValueError, MemoryError) as exc:
            self.logger.debug("Failed to encode screenshot: %s", exc)
            raise DeliveryError("Failed to encode screenshot", exc) from exc

    def _post_multipart(self, payload: DiscordPayload, image: bytes) -> httpx.Response:
        image_format = self.config.image_format
        files = {_FILE_FIELD: (image_format.filename, image, image_format.content_type)}
        data = {_PAYLOAD_FIELD: payload.to_json()}
        return self._session.post(self.config.url, files=files, data=data)
