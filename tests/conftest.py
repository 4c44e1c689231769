"""Shared test fixtures and configuration."""

import os
from pathlib import Path
import sys

import pytest


SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep ``TT_SYNC_*`` variables from the host shell out of the tests."""
    for key in list(os.environ):
        if key.upper().startswith("TT_SYNC_"):
            monkeypatch.delenv(key)
