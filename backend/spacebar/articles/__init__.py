"""
記事（ニュース）モジュール。

- schemas: Article / HeartResponse
- service: 記事カタログ参照とハート付与、khaaaaaan 表示時の Slack 送信
- router: /news/{slug} エンドポイント
"""
