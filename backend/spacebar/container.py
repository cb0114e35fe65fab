# backend/spacebar/container.py

"""
アプリ全体のサービスを diwire のコンテナに登録するモジュール。

- 各ファクトリはインスタンスを生成したあと、任意のロガーを set_logger() で明示的に差し込む
- get_container(): アプリ全体で共有する Container を返す
- reset_container(): テスト用に共有状態を破棄する

依存の自動登録は無効にしてあり、ここに書かれたものだけが解決できる。
"""

from __future__ import annotations

import logging
from typing import Optional

from diwire import Container, DependencyRegistrationPolicy, Lifetime, MissingPolicy

from spacebar.articles.service import ArticleService
from spacebar.notifications.factory import build_notification_service
from spacebar.notifications.service import CompositeNotificationService
from spacebar.slack.client import SlackClient
from spacebar.slack.config import SlackSettings, get_slack_settings
from spacebar.slack.service import SlackNotifier

APP_LOGGER_NAME = "spacebar"


def build_slack_notifier(settings: SlackSettings, logger_: logging.Logger) -> SlackNotifier:
    """
    SlackNotifier を生成し、ロガーを注入して返す。

    通知が無効化されている場合は SlackClient を生成しない（Webhook URL 不要）。
    """
    client = SlackClient(settings=settings) if settings.enabled else None
    notifier = SlackNotifier(client=client, enabled=settings.enabled)
    notifier.set_logger(logger_)
    return notifier


def build_article_service(
    notifications: CompositeNotificationService,
    logger_: logging.Logger,
) -> ArticleService:
    service = ArticleService(notifications=notifications)
    service.set_logger(logger_)
    return service


def build_container() -> Container:
    """
    アプリ全体で使うサービス一式を登録したコンテナを返す。

    設定値は resolve() されるまで読まれないので、Slack 未設定でも生成自体は成功する。
    """
    container = Container(
        missing_policy=MissingPolicy.ERROR,
        dependency_registration_policy=DependencyRegistrationPolicy.IGNORE,
    )
    container.add_instance(logging.getLogger(APP_LOGGER_NAME), provides=logging.Logger)
    container.add_factory(get_slack_settings, provides=SlackSettings, lifetime=Lifetime.SCOPED)
    container.add_factory(build_slack_notifier, provides=SlackNotifier, lifetime=Lifetime.SCOPED)
    container.add_factory(
        lambda: build_notification_service(container),
        provides=CompositeNotificationService,
        lifetime=Lifetime.SCOPED,
    )
    container.add_factory(build_article_service, provides=ArticleService, lifetime=Lifetime.SCOPED)
    return container


_container: Optional[Container] = None


def get_container() -> Container:
    """
    共有の Container を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _container
    if _container is None:
        _container = build_container()
    return _container


def reset_container() -> None:
    """
    テスト用にコンテナのシングルトン状態をリセットする。
    """
    global _container
    _container = None
