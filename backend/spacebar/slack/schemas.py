# backend/spacebar/slack/schemas.py

"""
Slack 送信用のスキーマ定義。

- SlackMessage: Incoming Webhook に POST する 1 メッセージ分
- SlackMessageRequest / SlackMessageResponse: /slack/messages の入出力
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SlackMessage(BaseModel):
    """
    Slack に送る 1 メッセージ分の情報。

    username は「誰からのメッセージか」を表す送信者名。
    """

    username: str = Field(..., min_length=1, description="送信者として表示する名前")
    text: str = Field(..., min_length=1, description="本文（プレーンテキスト / mrkdwn）")
    icon_emoji: Optional[str] = Field(None, description="アイコン絵文字（例: :ghost:）")
    channel: Optional[str] = Field(
        None,
        description="送信先チャンネル。None の場合は Webhook 側の既定チャンネル",
    )

    def to_payload(self) -> Dict[str, Any]:
        """
        Incoming Webhook に渡す JSON ペイロードを構築する。
        """
        payload: Dict[str, Any] = {"username": self.username, "text": self.text}
        if self.icon_emoji:
            payload["icon_emoji"] = self.icon_emoji
        if self.channel:
            payload["channel"] = self.channel
        return payload


class SlackMessageRequest(BaseModel):
    """
    /slack/messages のリクエストボディ。
    """

    sender: str = Field(..., min_length=1, description="送信者名")
    message: str = Field(..., min_length=1, description="本文")


class SlackMessageResponse(BaseModel):
    """
    /slack/messages のレスポンスボディ。
    """

    sent: bool = Field(..., description="実際に Slack へ送信したかどうか")
    sender: str = Field(..., description="送信者名")
    detail: Optional[str] = Field(None, description="補足メッセージ（スキップ理由など）")
