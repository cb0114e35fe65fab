# backend/spacebar/slack/router.py
"""
Slack 送信用の FastAPI ルーター定義。

- /slack/messages
"""

from fastapi import APIRouter, Depends, HTTPException, status

from spacebar.container import get_container
from spacebar.utils.config import EnvVarMissingError

from .client import SlackClientError
from .schemas import SlackMessageRequest, SlackMessageResponse
from .service import SlackNotifier

router = APIRouter(prefix="/slack", tags=["slack"])


def get_slack_notifier() -> SlackNotifier:
    """
    コンテナから SlackNotifier を取得する。

    通知が有効なのに SLACK_WEBHOOK_URL が未設定の場合は 503 を返す。
    """
    try:
        return get_container().resolve(SlackNotifier)
    except EnvVarMissingError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"Slack is not configured: {exc.name} is not set.",
        ) from exc


@router.post(
    "/messages",
    response_model=SlackMessageResponse,
    summary="Slack へメッセージ送信",
)
def post_slack_message(
    body: SlackMessageRequest,
    notifier: SlackNotifier = Depends(get_slack_notifier),
) -> SlackMessageResponse:
    """
    送信者名と本文を受け取り、Slack に送信するエンドポイント。

    - Slack 側のエラー / 接続エラー → 502 Bad Gateway
    - 通知が無効化されている場合 → 200 (sent=false)
    """
    try:
        sent = notifier.send_message(body.sender, body.message)
    except SlackClientError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to send Slack message: {exc}",
        ) from exc

    return SlackMessageResponse(
        sent=sent,
        sender=body.sender,
        detail=None if sent else "disabled",
    )
