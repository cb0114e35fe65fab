# backend/spacebar/notifications/__init__.py

"""
通知レイヤ用モジュール群。

呼び出し元は NotificationMessage を作って CompositeNotificationService に渡すだけで、
ログ出力と Slack 送信の両方にファンアウトされる。

構成イメージ:
- schemas: 通知メッセージの共通スキーマ
- service: 通知送信インターフェースと実装（ログ / Slack）
- factory: アプリ全体で共有する NotificationService の生成
"""
