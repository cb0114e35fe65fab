# backend/tests/test_articles.py

import logging
from typing import List, Tuple

import pytest
from fastapi.testclient import TestClient

from spacebar.articles.service import (
    KHAN_MESSAGE,
    KHAN_SENDER,
    ArticleNotFoundError,
    ArticleService,
)
from spacebar.container import get_container
from spacebar.main import create_app
from spacebar.notifications.schemas import NotificationMessage
from spacebar.notifications.service import CompositeNotificationService, SlackNotificationSender
from spacebar.slack.client import SlackConnectionError
from spacebar.slack.schemas import SlackMessage
from spacebar.slack.service import SlackNotifier


class DummyNotifier:
    def __init__(self, error: Exception | None = None) -> None:
        self.calls: List[Tuple[str, str]] = []
        self._error = error

    def send_message(self, sender: str, message: str) -> bool:
        if self._error is not None:
            raise self._error
        self.calls.append((sender, message))
        return True


class RecordingSender:
    def __init__(self) -> None:
        self.messages: List[NotificationMessage] = []

    def send(self, message: NotificationMessage) -> None:
        self.messages.append(message)


class DummySlackClient:
    def __init__(self) -> None:
        self.sent: List[SlackMessage] = []

    def create_message(self, username: str, text: str, *, icon_emoji=None) -> SlackMessage:
        return SlackMessage(username=username, text=text, icon_emoji=icon_emoji)

    def send_message(self, message: SlackMessage) -> None:
        self.sent.append(message)


def _service(notifier: DummyNotifier | None = None) -> ArticleService:
    senders = [] if notifier is None else [SlackNotificationSender(notifier)]
    return ArticleService(notifications=CompositeNotificationService(senders))


def test_viewing_khan_beams_message() -> None:
    notifier = DummyNotifier()
    service = _service(notifier)

    article = service.get_article("khaaaaaan")

    assert article.slug == "khaaaaaan"
    assert notifier.calls == [(KHAN_SENDER, KHAN_MESSAGE)]


def test_viewing_other_article_sends_nothing() -> None:
    recorder = RecordingSender()
    service = ArticleService(notifications=CompositeNotificationService([recorder]))

    article = service.get_article("why-asteroids-taste-like-bacon")

    assert article.author == "Mike Ferengi"
    assert recorder.messages == []


def test_slack_failure_does_not_break_page(caplog) -> None:
    """
    Slack 送信が失敗しても記事は表示され、失敗はログに残ることを確認。
    """
    service = _service(DummyNotifier(error=SlackConnectionError("down")))

    with caplog.at_level(logging.ERROR):
        article = service.get_article("khaaaaaan")

    assert article.slug == "khaaaaaan"
    assert any("Notification sender failed" in r.getMessage() for r in caplog.records)


def test_unknown_article_raises() -> None:
    service = _service()

    with pytest.raises(ArticleNotFoundError):
        service.get_article("no-such-article")


def test_returned_article_does_not_alias_catalogue() -> None:
    service = _service()

    article = service.get_article("why-asteroids-taste-like-bacon")
    article.comments.append("Spam!")
    article.hearts = 1000

    fresh = service.get_article("why-asteroids-taste-like-bacon")
    assert "Spam!" not in fresh.comments
    assert fresh.hearts == 5


def test_toggle_heart_increments_and_logs(caplog) -> None:
    logger = logging.getLogger("test_logger_articles")
    service = _service()
    service.set_logger(logger)

    with caplog.at_level(logging.INFO, logger="test_logger_articles"):
        first = service.toggle_heart("khaaaaaan")
        second = service.toggle_heart("khaaaaaan")

    assert second == first + 1
    records = [r for r in caplog.records if r.getMessage() == "Article is being hearted!"]
    assert len(records) == 2
    assert records[0].context == {"slug": "khaaaaaan"}


def test_catalogue_is_not_shared_between_services() -> None:
    a = _service()
    b = _service()

    a.toggle_heart("khaaaaaan")

    assert b.get_article("why-asteroids-taste-like-bacon").hearts == 5
    assert a.get_article("khaaaaaan").hearts == b.get_article("khaaaaaan").hearts + 1


def create_test_client(slack_client: DummySlackClient) -> TestClient:
    app = create_app()
    get_container().add_instance(SlackNotifier(client=slack_client), provides=SlackNotifier)
    return TestClient(app)


def test_show_article_endpoint_beams_to_slack():
    slack_client = DummySlackClient()
    client = create_test_client(slack_client)

    resp = client.get("/news/khaaaaaan")

    assert resp.status_code == 200
    assert resp.json()["title"] == "Khaaaaaan!"
    assert [(m.username, m.text) for m in slack_client.sent] == [(KHAN_SENDER, KHAN_MESSAGE)]


def test_show_article_endpoint_404():
    client = create_test_client(DummySlackClient())

    resp = client.get("/news/unknown")

    assert resp.status_code == 404


def test_heart_endpoint_returns_new_count():
    client = create_test_client(DummySlackClient())

    before = client.get("/news/why-asteroids-taste-like-bacon").json()["hearts"]
    resp = client.post("/news/why-asteroids-taste-like-bacon/heart")

    assert resp.status_code == 200
    assert resp.json() == {"hearts": before + 1}


def test_heart_endpoint_404():
    client = create_test_client(DummySlackClient())

    resp = client.post("/news/unknown/heart")

    assert resp.status_code == 404
