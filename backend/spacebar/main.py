# backend/spacebar/main.py

"""
バックエンドアプリケーションのエントリーポイント。

主な責務:
- /slack/messages エンドポイントを公開する
- /news/{slug} エンドポイントを公開する
- /health を公開する
"""

from fastapi import FastAPI

from spacebar.articles.router import router as articles_router
from spacebar.container import get_container
from spacebar.slack.router import router as slack_router
from spacebar.utils.logging import configure_logging


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - Slack 送信エンドポイント (/slack/messages)
    - 記事エンドポイント (/news/{slug}, /news/{slug}/heart)
    - ヘルスチェックエンドポイント (/health)
    """
    configure_logging()
    # サービスの登録だけ行う（各サービスは最初に使われた時点で生成される）
    get_container()

    app = FastAPI(title="Space Bar Backend")

    # ルーター登録
    app.include_router(slack_router)
    app.include_router(articles_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        モニタリングや動作確認用。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
