# backend/spacebar/articles/service.py

"""
記事表示・ハート付与のサービス層。

- 記事はメモリ上のカタログで保持する
- 特定の記事（khaaaaaan）が表示されると Slack にメッセージを送る
- Slack への送信は通知レイヤ（CompositeNotificationService）経由で行う
- ロガーは SlackNotifier と同じく任意で、生成後に set_logger() で差し込む
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from spacebar.notifications.schemas import (
    NotificationChannel,
    NotificationMessage,
    NotificationSeverity,
)
from spacebar.notifications.service import CompositeNotificationService
from spacebar.utils.logging import InfoLogger, OptionalLogger

from .schemas import Article

KHAN_SLUG = "khaaaaaan"
KHAN_SENDER = "Khan"
KHAN_MESSAGE = "Ah, Kirk, my old friend..."

DEFAULT_ARTICLES = (
    Article(
        slug="why-asteroids-taste-like-bacon",
        title="Why Asteroids Taste Like Bacon",
        author="Mike Ferengi",
        content=(
            "Spicy jalapeno bacon ipsum dolor amet veniam shank in dolore. "
            "Fake space travel turned out to be a lot like bacon."
        ),
        comments=[
            "I ate a normal rock once. It did NOT taste like bacon!",
            "Woohoo! I'm going on an all-asteroid diet!",
        ],
        hearts=5,
    ),
    Article(
        slug=KHAN_SLUG,
        title="Khaaaaaan!",
        author="Amy Oort",
        content="A long time ago, on a starship not so far away...",
        hearts=12,
    ),
    Article(
        slug="light-speed-travel-fountain-of-youth-or-fallacy",
        title="Light Speed Travel: Fountain of Youth or Fallacy",
        author="Mike Ferengi",
        content="Physics says no. Our readers keep asking anyway.",
    ),
)


class ArticleNotFoundError(LookupError):
    """指定 slug の記事が存在しない場合の例外。"""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Article '{slug}' does not exist.")
        self.slug = slug


class ArticleService:
    """
    記事カタログの参照とハート付与を行うサービス。

    Slack が未設定でも notifications にはログ用の Sender だけが入るので、
    記事表示はそのまま動く。
    """

    def __init__(
        self,
        notifications: CompositeNotificationService,
        articles: Optional[Iterable[Article]] = None,
    ) -> None:
        self._notifications = notifications
        self._articles: Dict[str, Article] = {
            article.slug: article.model_copy(deep=True)
            for article in (DEFAULT_ARTICLES if articles is None else articles)
        }
        self._log = OptionalLogger()

    def set_logger(self, logger_: InfoLogger) -> None:
        self._log.attach(logger_)

    def log_info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        self._log.info(message, context)

    def _find(self, slug: str) -> Article:
        article = self._articles.get(slug)
        if article is None:
            raise ArticleNotFoundError(slug)
        return article

    def get_article(self, slug: str) -> Article:
        """
        記事を返す。khaaaaaan の場合は Slack にもメッセージを送る。

        送信の失敗は通知レイヤでログに記録され、記事表示は失敗させない。
        """
        article = self._find(slug)

        if slug == KHAN_SLUG:
            self._notifications.send(
                NotificationMessage(
                    channel=NotificationChannel.SLACK,
                    severity=NotificationSeverity.INFO,
                    title=article.title,
                    body=KHAN_MESSAGE,
                    sender=KHAN_SENDER,
                )
            )

        return article.model_copy(deep=True)

    def toggle_heart(self, slug: str) -> int:
        """
        記事にハートを 1 つ追加し、更新後のハート数を返す。
        """
        article = self._find(slug)
        self.log_info("Article is being hearted!", {"slug": slug})
        article.hearts += 1
        return article.hearts
