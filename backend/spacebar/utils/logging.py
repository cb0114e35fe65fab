# backend/spacebar/utils/logging.py

"""
任意（オプショナル）なロガーを扱うための小さな部品。

- InfoLogger: 「構造化コンテキスト付きで info を記録できる」最小インターフェース
- OptionalLogger: ロガーが注入されていれば委譲し、未注入なら何もしない
- LogContextFormatter / configure_logging: context をテキストログに残す設定

各サービスは OptionalLogger を保持し、set_logger() / log_info() を
委譲で公開する（mixin ではなく明示的なコンポジション）。
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Protocol

from .config import get_env

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


class InfoLogger(Protocol):
    """
    info レベルのログを記録できるオブジェクト。

    logging.Logger はそのまま満たす。logging.LoggerAdapter も受け付けるが、
    adapter の extra は OptionalLogger 側で context とマージしてから渡す。
    """

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:  # pragma: no cover - Protocol
        ...


class OptionalLogger:
    """
    注入されていれば InfoLogger に委譲するだけのホルダー。

    初期状態は「未注入」。生成後に attach() で差し込む。
    """

    def __init__(self, logger: Optional[InfoLogger] = None) -> None:
        self._logger = logger

    @property
    def is_attached(self) -> bool:
        return self._logger is not None

    def attach(self, logger: InfoLogger) -> None:
        self._logger = logger

    def detach(self) -> None:
        self._logger = None

    def info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> None:
        """
        ロガーが注入されている場合のみ info ログを記録する。

        context は LogRecord の `context` 属性として渡す。LoggerAdapter の場合は
        process() で得た extra と context を両方残す。
        """
        if self._logger is None:
            return

        extra: Dict[str, Any] = {"context": dict(context or {})}
        target: Any = self._logger
        while isinstance(target, logging.LoggerAdapter):
            message, kwargs = target.process(message, {"extra": extra})
            extra = {**(kwargs.get("extra") or {}), **extra}
            target = target.logger

        target.info(message, extra=extra)


class LogContextFormatter(logging.Formatter):
    """
    LogRecord に `context` があれば、末尾に key=value 形式で付与する Formatter。
    """

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return text

        pairs = " ".join(f"{key}={value!r}" for key, value in context.items())
        return f"{text} | {pairs}"


def configure_logging(level: Optional[str] = None) -> None:
    """
    ルートロガーを設定する。2回目以降の呼び出しは何もしない。

    レベルは引数 > LOG_LEVEL 環境変数 > INFO の順で決まる。
    """
    global _configured
    if _configured:
        return

    level_name = (level or get_env("LOG_LEVEL", default="INFO", required=False)).upper()

    handler = logging.StreamHandler()
    handler.setFormatter(LogContextFormatter(DEFAULT_LOG_FORMAT))

    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    _configured = True
