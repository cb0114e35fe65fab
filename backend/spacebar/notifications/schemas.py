# backend/spacebar/notifications/schemas.py

"""
通知メッセージの共通スキーマ定義。

- 通知のチャンネル種別（どこに送るか）
- 通知の重要度
- タイトル＋本文

のみを扱い、実際の送信先（Slack の Webhook URL など）の具体的な情報は
Sender 実装側に持たせる。
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class NotificationChannel(str, Enum):
    """
    通知の論理的なチャンネル種別。

    - INTERNAL_LOG: アプリ内部ログのみ
    - SLACK: Slack にも送る
    """

    INTERNAL_LOG = "internal_log"
    SLACK = "slack"


class NotificationSeverity(str, Enum):
    """
    通知の重要度。
    """

    INFO = "info"
    WARNING = "warning"
    ALERT = "alert"
    EMERGENCY = "emergency"


class NotificationMessage(BaseModel):
    """
    通知 1件分の情報。

    body はプレーンテキスト想定。
    """

    channel: NotificationChannel = Field(
        ...,
        description="論理的な通知チャンネル（Slack などは Sender 実装側で解釈）。",
    )
    severity: NotificationSeverity = Field(
        ...,
        description="通知の重要度。",
    )
    title: str = Field(
        ...,
        min_length=1,
        description="短いタイトル（チャットの1行目など）。",
    )
    body: str = Field(
        ...,
        min_length=1,
        description="本文。プレーンテキスト想定。",
    )
    sender: Optional[str] = Field(
        None,
        description="チャット上の送信者名。指定時は本文をそのまま送る（キャラクターの発言など）。",
    )
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="通知生成時刻（UTC）。",
    )
