import datetime

import pytest
from PIL import Image

from discord_webhook_notifier import NotificationEventResult, NotificationRecord

TIMESTAMP = datetime.datetime(2024, 5, 1, 12, 30, 15, tzinfo=datetime.timezone.utc)


@pytest.fixture
def screenshot() -> Image.Image:
    return Image.new("RGBA", (16, 9), (30, 144, 255, 200))


@pytest.fixture
def record() -> NotificationRecord:
    return NotificationRecord(
        message="Run complete",
        event="AutoFight",
        result=NotificationEventResult.SUCCESS,
        timestamp=TIMESTAMP,
    )


@pytest.fixture
def record_with_screenshot(record: NotificationRecord, screenshot: Image.Image) -> NotificationRecord:
    return NotificationRecord(
        message=record.message,
        event=record.event,
        result=record.result,
        timestamp=record.timestamp,
        screenshot=screenshot,
    )
