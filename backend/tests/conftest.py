# backend/tests/conftest.py
"""
Pytest configuration for Space Bar backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import spacebar.*` works correctly in tests.
- Ensures required environment variables for tests are set
  with safe dummy values (e.g., SLACK_WEBHOOK_URL).
- Resets the shared service container between tests.
"""

import os
import sys
from pathlib import Path

import pytest


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _ensure_test_env_vars() -> None:
    """
    Set dummy environment variables required for tests.

    These values are only for local testing and do NOT point to a real workspace.
    In real environments, proper values should be provided via .env or system env.
    """
    os.environ.setdefault("SLACK_WEBHOOK_URL", "https://hooks.slack.test/services/dummy")


_ensure_project_root_in_sys_path()
_ensure_test_env_vars()


@pytest.fixture(autouse=True)
def _reset_shared_state():
    from spacebar.container import reset_container

    reset_container()
    yield
    reset_container()
