# backend/tests/test_slack_service.py

import logging
from typing import List

import pytest

from spacebar.slack.client import SlackConnectionError
from spacebar.slack.schemas import SlackMessage
from spacebar.slack.service import SlackNotifier


class DummySlackClient:
    def __init__(self, error: Exception | None = None) -> None:
        self.sent: List[SlackMessage] = []
        self._error = error

    def create_message(self, username: str, text: str, *, icon_emoji=None) -> SlackMessage:
        return SlackMessage(username=username, text=text, icon_emoji=icon_emoji or ":ghost:")

    def send_message(self, message: SlackMessage) -> None:
        if self._error is not None:
            raise self._error
        self.sent.append(message)


def test_send_message_delegates_to_client() -> None:
    client = DummySlackClient()
    notifier = SlackNotifier(client=client)

    assert notifier.send_message("Khan", "Ah, Kirk, my old friend...") is True

    assert len(client.sent) == 1
    assert client.sent[0].username == "Khan"
    assert client.sent[0].text == "Ah, Kirk, my old friend..."
    assert client.sent[0].icon_emoji == ":ghost:"


def test_send_message_logs_when_logger_attached(caplog) -> None:
    """
    set_logger() でロガーを注入した場合、送信前に info ログが出ることを確認。
    """
    logger = logging.getLogger("test_logger_slack")
    notifier = SlackNotifier(client=DummySlackClient())
    notifier.set_logger(logger)

    with caplog.at_level(logging.INFO, logger="test_logger_slack"):
        notifier.send_message("Khan", "hello")

    records = [r for r in caplog.records if r.getMessage() == "Beaming a message to Slack!"]
    assert records
    assert records[0].context == {"message": "hello"}


def test_send_message_without_logger_is_silent(caplog) -> None:
    notifier = SlackNotifier(client=DummySlackClient())

    with caplog.at_level(logging.INFO):
        notifier.send_message("Khan", "hello")

    assert not [r for r in caplog.records if "Beaming" in r.getMessage()]


def test_disabled_notifier_skips_client() -> None:
    client = DummySlackClient()
    notifier = SlackNotifier(client=client, enabled=False)

    assert notifier.send_message("Khan", "hello") is False
    assert client.sent == []


def test_client_error_propagates() -> None:
    notifier = SlackNotifier(client=DummySlackClient(error=SlackConnectionError("down")))

    with pytest.raises(SlackConnectionError):
        notifier.send_message("Khan", "hello")
