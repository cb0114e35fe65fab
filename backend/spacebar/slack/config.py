# backend/spacebar/slack/config.py

"""
Slack 連携に必要な設定値をまとめるモジュール。
"""

from dataclasses import dataclass
from typing import Optional

from spacebar.utils.config import get_env, get_env_bool, get_env_int

DEFAULT_ICON = ":ghost:"


@dataclass(frozen=True)
class SlackSettings:
    """Slack Incoming Webhook 用の設定値コンテナ。"""

    webhook_url: Optional[str]
    channel: Optional[str] = None
    default_icon: str = DEFAULT_ICON
    timeout_seconds: int = 10
    enabled: bool = True


def get_slack_settings() -> SlackSettings:
    """
    環境変数から Slack 設定を読み込む。

    必須（通知が有効な場合のみ）:
      - SLACK_WEBHOOK_URL

    任意:
      - SLACK_NOTIFICATIONS_ENABLED  (デフォルト: true)
      - SLACK_CHANNEL                (デフォルト: Webhook 側のチャンネル)
      - SLACK_DEFAULT_ICON           (デフォルト: :ghost:)
      - SLACK_TIMEOUT_SECONDS        (デフォルト: 10秒)
    """
    enabled = get_env_bool("SLACK_NOTIFICATIONS_ENABLED", default=True)
    webhook_url = get_env("SLACK_WEBHOOK_URL", required=enabled)

    return SlackSettings(
        webhook_url=webhook_url,
        channel=get_env("SLACK_CHANNEL", required=False),
        default_icon=get_env("SLACK_DEFAULT_ICON", default=DEFAULT_ICON, required=False),
        timeout_seconds=get_env_int("SLACK_TIMEOUT_SECONDS", default=10),
        enabled=enabled,
    )
