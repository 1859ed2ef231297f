import datetime

import pytest

from discord_webhook_notifier import (
    EmbedTextLayout,
    NotificationEventResult,
    NotificationRecord,
    WebhookConfig,
    build_payload,
)
from discord_webhook_notifier.builder import FAILURE_COLOR, SUCCESS_COLOR, format_timestamp


def _with_result(record: NotificationRecord, result: NotificationEventResult) -> NotificationRecord:
    return NotificationRecord(
        message=record.message,
        event=record.event,
        result=result,
        timestamp=record.timestamp,
        screenshot=record.screenshot,
    )


@pytest.mark.parametrize(
    ("result", "color"),
    [
        (NotificationEventResult.FAIL, FAILURE_COLOR),
        (NotificationEventResult.SUCCESS, SUCCESS_COLOR),
        (NotificationEventResult.ERROR, SUCCESS_COLOR),
        (NotificationEventResult.UNKNOWN, SUCCESS_COLOR),
    ],
)
def test_color_follows_result(record, result, color):
    payload = build_payload(_with_result(record, result), WebhookConfig(url="x"))
    assert payload.embeds[0].color == color


def test_build_is_idempotent(record_with_screenshot):
    config = WebhookConfig(url="x", username="bot", image_format="webp")
    assert build_payload(record_with_screenshot, config) == build_payload(record_with_screenshot, config)


def test_image_present_only_with_screenshot(record, record_with_screenshot):
    config = WebhookConfig(url="x", image_format="png")

    assert build_payload(record, config).embeds[0].image is None
    image = build_payload(record_with_screenshot, config).embeds[0].image
    assert image is not None
    assert image.url == "attachment://screenshot.png"


def test_serialized_payload_omits_absent_fields(record):
    payload = build_payload(record, WebhookConfig(url="x", username=" ", avatar_url="\t"))

    assert payload.to_dict() == {
        "embeds": [
            {
                "title": "Run complete",
                "description": "AutoFight | Success",
                "footer": {"text": "2024-05-01 12:30:15+00:00"},
                "color": 0x00FF00,
            }
        ]
    }
    assert "null" not in payload.to_json()


def test_empty_message_drops_title(record):
    empty = NotificationRecord(
        message="",
        event=record.event,
        result=record.result,
        timestamp=record.timestamp,
    )
    embed = build_payload(empty, WebhookConfig(url="x")).to_dict()["embeds"][0]
    assert "title" not in embed
    assert embed["description"] == "AutoFight | Success"


def test_event_title_layout_swaps_text(record):
    config = WebhookConfig(url="x", text_layout=EmbedTextLayout.EVENT_TITLE)
    embed = build_payload(record, config).embeds[0]
    assert embed.title == "AutoFight | Success"
    assert embed.description == "Run complete"


def test_format_timestamp_naive_and_aware():
    naive = datetime.datetime(2024, 1, 2, 3, 4, 5, 678901)
    aware = naive.replace(tzinfo=datetime.timezone(datetime.timedelta(hours=8)))

    assert format_timestamp(naive) == "2024-01-02 03:04:05"
    assert format_timestamp(aware) == "2024-01-02 03:04:05+08:00"


def test_plain_fail_string_is_red(record):
    failed = NotificationRecord(
        message=record.message,
        event=record.event,
        result="Fail",  # type: ignore[arg-type]
        timestamp=record.timestamp,
    )
    assert build_payload(failed, WebhookConfig(url="x")).embeds[0].color == FAILURE_COLOR
