# backend/spacebar/__init__.py
"""
Space Bar backend application package.

This package contains:
- main: FastAPI application entrypoint
- container: diwire-based service wiring (factories call set_logger after construction)
- slack: Slack webhook client and SlackNotifier
- notifications: notification fan-out (log / Slack)
- articles: news pages that beam messages to Slack
"""
