# backend/tests/conftest.py
"""
Pytest configuration for the Market Sentiment backend tests.

- Ensures that the project root (backend/) is added to sys.path
  so that `import market_sentiment.*` works correctly in tests.
- Removes upstream credentials from the environment so that
  every test runs offline against the mock fallbacks unless it
  configures a fake client explicitly.
"""

import os
import sys
from pathlib import Path

import pytest

UPSTREAM_ENV_VARS = (
    "TAVILY_API_KEY",
    "ANTHROPIC_API_KEY",
    "ZHIPU_API_KEY",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "NEXT_PUBLIC_SUPABASE_URL",
    "NEXT_PUBLIC_SUPABASE_ANON_KEY",
    "RESPONSE_SCHEMA",
    "LLM_STRUCTURED_OUTPUT",
)


def _ensure_project_root_in_sys_path() -> None:
    # This file is located at: backend/tests/conftest.py
    # parents[1] -> backend/
    project_root = Path(__file__).resolve().parents[1]
    project_root_str = str(project_root)

    if project_root_str not in sys.path:
        # Insert at the beginning so it has priority over site-packages, etc.
        sys.path.insert(0, project_root_str)


def _clear_upstream_env_vars() -> None:
    """
    Drop real credentials that may be present in a developer shell.

    market_sentiment.main builds an app at import time, so this has to
    happen before any test module imports it.
    """
    for name in UPSTREAM_ENV_VARS:
        os.environ.pop(name, None)


_ensure_project_root_in_sys_path()
_clear_upstream_env_vars()


@pytest.fixture(autouse=True)
def _offline_env(monkeypatch):
    for name in UPSTREAM_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
