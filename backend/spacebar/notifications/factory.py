# backend/spacebar/notifications/factory.py

"""
通知サービスの簡易ファクトリ。

- LoggingNotificationSender は常に登録する。
- SLACK_WEBHOOK_URL が設定されていれば SlackNotificationSender も追加する。

共有インスタンスは spacebar.container が保持する（ここではキャッシュしない）。
"""

from __future__ import annotations

import logging
from typing import List

from diwire import Container

from spacebar.slack.service import SlackNotifier
from spacebar.utils.config import get_env

from .service import (
    CompositeNotificationService,
    LoggingNotificationSender,
    NotificationSender,
    SlackNotificationSender,
)

logger = logging.getLogger(__name__)


def build_notification_service(container: Container) -> CompositeNotificationService:
    """
    コンテナ上のサービスから CompositeNotificationService を組み立てる。

    SlackNotifier は Slack が設定されている場合のみ解決する。
    """
    senders: List[NotificationSender] = [LoggingNotificationSender()]

    if get_env("SLACK_WEBHOOK_URL", required=False):
        senders.append(SlackNotificationSender(container.resolve(SlackNotifier)))
    else:
        logger.info("SLACK_WEBHOOK_URL is not set; Slack notifications are not registered.")

    return CompositeNotificationService(senders)
