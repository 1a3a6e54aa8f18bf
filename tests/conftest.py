"""Global test fixtures."""

import os

import pytest


@pytest.fixture(autouse=True)
def _isolate_settings(monkeypatch, tmp_path):
    """Keep developer environment and .env files out of Config defaults."""
    for key in list(os.environ):
        if key.startswith("NINLINK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
