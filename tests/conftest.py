"""
Shared test fixtures for xcol tests.
Clears environment variables that change runtime behavior.
"""

import os
import sys

import pytest

# Add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Ensure every test starts without TERM quirks or debug logging."""
    monkeypatch.delenv("XCOL_DEBUG", raising=False)
    monkeypatch.setenv("TERM", "dumb")
