# backend/spacebar/slack/client.py

"""
Slack Incoming Webhook との通信を担当するクライアントモジュール。
"""

from typing import Any, Optional

import httpx

from spacebar.utils.config import EnvVarMissingError

from .config import SlackSettings, get_slack_settings
from .schemas import SlackMessage


class SlackClientError(Exception):
    """Slack クライアント全般の基底例外。"""


class SlackHTTPError(SlackClientError):
    """HTTP ステータスコードがエラーだった場合の例外。"""

    def __init__(self, status_code: int, body: Any | None = None) -> None:
        super().__init__(f"Slack API error: status_code={status_code} body={body!r}")
        self.status_code = status_code
        self.body = body


class SlackConnectionError(SlackClientError):
    """接続エラー・タイムアウト時の例外。"""


class SlackClient:
    """
    Slack Incoming Webhook の薄いラッパークライアント。

    - create_message(): 既定のアイコン・チャンネルを埋めた SlackMessage を作る
    - send_message(): Webhook に POST する
    """

    def __init__(self, settings: SlackSettings | None = None) -> None:
        self._settings = settings or get_slack_settings()
        if not self._settings.webhook_url:
            raise EnvVarMissingError("SLACK_WEBHOOK_URL")

    @property
    def webhook_url(self) -> str:
        return self._settings.webhook_url

    @property
    def timeout(self) -> int:
        return self._settings.timeout_seconds

    @property
    def default_icon(self) -> str:
        return self._settings.default_icon

    def create_message(
        self,
        username: str,
        text: str,
        *,
        icon_emoji: Optional[str] = None,
    ) -> SlackMessage:
        """
        設定の既定値（アイコン・チャンネル）を埋めた SlackMessage を生成する。
        """
        return SlackMessage(
            username=username,
            text=text,
            icon_emoji=icon_emoji or self.default_icon,
            channel=self._settings.channel,
        )

    def send_message(self, message: SlackMessage) -> None:
        """
        メッセージ 1件を Webhook に送信する。

        :raises SlackHTTPError: Slack が 4xx/5xx を返した場合。
        :raises SlackConnectionError: 接続エラーやタイムアウト時。
        """
        try:
            response = httpx.post(
                self.webhook_url,
                json=message.to_payload(),
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:  # 接続エラー・タイムアウトなど
            raise SlackConnectionError(f"Failed to call Slack webhook: {exc}") from exc

        if response.status_code // 100 != 2:
            raise SlackHTTPError(status_code=response.status_code, body=response.text)

        # Webhook は通常 "ok" を返すが、2xx であれば本文は問わない。
