# backend/spacebar/slack/service.py

"""
Slack 通知を送るサービス層。

- SlackClient はコンストラクタで受け取る（必須の依存）
- ロガーは任意。生成後に set_logger() で差し込む（spacebar.container のファクトリが呼ぶ）
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from spacebar.utils.logging import InfoLogger, OptionalLogger

from .client import SlackClient

logger = logging.getLogger(__name__)


class SlackNotifier:
    """
    送信者名と本文を受け取り、SlackClient 経由で送信するだけのサービス。

    リトライやバッチ送信は行わない。SlackClientError はそのまま呼び出し元へ伝播する。
    通知が無効化されている場合のみ client を省略できる。
    """

    def __init__(self, client: Optional[SlackClient], *, enabled: bool = True) -> None:
        if enabled and client is None:
            raise ValueError("SlackNotifier requires a client when notifications are enabled.")
        self._client = client
        self._enabled = enabled
        self._log = OptionalLogger()

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_logger(self, logger_: InfoLogger) -> None:
        self._log.attach(logger_)

    def log_info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self._log.info(message, context)

    def send_message(self, sender: str, message: str) -> bool:
        """
        Slack にメッセージを送信する。

        :return: 実際に送信した場合 True、無効化されていてスキップした場合 False。
        :raises SlackClientError: 送信に失敗した場合。
        """
        if not self._enabled:
            logger.info("Slack notifications disabled, skipping send")
            return False

        self.log_info("Beaming a message to Slack!", {"message": message})

        slack_message = self._client.create_message(username=sender, text=message)
        self._client.send_message(slack_message)
        return True
