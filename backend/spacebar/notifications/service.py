# backend/spacebar/notifications/service.py

"""
通知送信インターフェースと実装。

- NotificationMessage を受け取る send() インターフェース
- ログ出力のみ行う LoggingNotificationSender
- SlackNotifier に委譲する SlackNotificationSender
- 複数 Sender にファンアウトする CompositeNotificationService
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Protocol

from spacebar.slack.service import SlackNotifier

from .schemas import NotificationChannel, NotificationMessage, NotificationSeverity

logger = logging.getLogger(__name__)

DEFAULT_SLACK_SENDER = "Space Bar"


class NotificationSender(Protocol):
    """
    通知送信の最小インターフェース。

    実装例:
    - LoggingNotificationSender: ログ出力のみ
    - SlackNotificationSender: Slack Incoming Webhook 経由で送信
    """

    def send(self, message: NotificationMessage) -> None:  # pragma: no cover - Protocol
        ...


class LoggingNotificationSender:
    """
    NotificationMessage を Python の logger に記録するだけの Sender。
    """

    def __init__(self, logger_: logging.Logger | None = None) -> None:
        self._logger = logger_ or logger

    def send(self, message: NotificationMessage) -> None:
        """
        通知メッセージを重要度に応じたログレベルで出力する。
        """
        prefix = f"[{message.channel.value}][{message.severity.value}] {message.title} "
        text = prefix + message.body

        if message.severity in (NotificationSeverity.EMERGENCY, NotificationSeverity.ALERT):
            self._logger.error(text)
        elif message.severity == NotificationSeverity.WARNING:
            self._logger.warning(text)
        else:
            self._logger.info(text)


class SlackNotificationSender:
    """
    channel が SLACK の通知だけを SlackNotifier に転送する Sender。

    - INTERNAL_LOG の通知は何もせずに無視する。
    - sender が指定された通知は、その名前で本文をそのまま送る。
    - それ以外は既定の送信者名で、重要度とタイトルを見出しにして送る。
    """

    def __init__(self, notifier: SlackNotifier, *, sender_name: str = DEFAULT_SLACK_SENDER) -> None:
        self._notifier = notifier
        self._sender_name = sender_name

    def send(self, message: NotificationMessage) -> None:
        if message.channel != NotificationChannel.SLACK:
            return

        if message.sender:
            self._notifier.send_message(message.sender, message.body)
            return

        text = f"*[{message.severity.value.upper()}] {message.title}*\n{message.body}"
        self._notifier.send_message(self._sender_name, text)


class CompositeNotificationService:
    """
    複数の NotificationSender に通知をファンアウトするサービス。

    呼び出し元はこのサービスを使うだけでよく、Sender の追加は factory 側で行う。
    """

    def __init__(self, senders: Iterable[NotificationSender]) -> None:
        self._senders: List[NotificationSender] = list(senders)

    @property
    def senders(self) -> List[NotificationSender]:
        return list(self._senders)

    def send(self, message: NotificationMessage) -> None:
        """
        受け取った NotificationMessage を全 Sender に送信する。
        """
        for sender in self._senders:
            try:
                sender.send(message)
            except Exception:  # noqa: BLE001 - 通知は本処理を止めない
                logger.exception("Notification sender failed. Continuing with others.")
