"""
Slack 連携モジュール。

- config: Incoming Webhook の設定値（URL, チャンネル, アイコン, タイムアウト等）
- schemas: SlackMessage と /slack/messages 用の Pydantic モデル
- client: Incoming Webhook への HTTP クライアント
- service: 送信者名＋本文を受け取って送信する SlackNotifier
- router: /slack/messages エンドポイント
"""

from .client import SlackClient, SlackClientError  # noqa: F401
from .config import SlackSettings, get_slack_settings  # noqa: F401
from .schemas import SlackMessage, SlackMessageRequest, SlackMessageResponse  # noqa: F401
from .service import SlackNotifier  # noqa: F401
