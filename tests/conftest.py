"""Shared test configuration: fixed owner credential and an in-memory database URL."""

import os

os.environ["OWNER_TOKEN"] = "test-owner-token"
os.environ["OWNER_SCOPE"] = "test-owner"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from portfolio.config import get_settings  # noqa: E402

get_settings.cache_clear()
