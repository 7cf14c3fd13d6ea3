from __future__ import annotations

import sys
from pathlib import Path

import pytest

PACKAGE_ROOT = Path(__file__).resolve().parents[1] / "python"
if str(PACKAGE_ROOT) not in sys.path:
    sys.path.insert(0, str(PACKAGE_ROOT))

from atomic_counter.config import CounterSettings
from atomic_counter.service import CounterService


@pytest.fixture
def service() -> CounterService:
    return CounterService()


@pytest.fixture
def settings() -> CounterSettings:
    return CounterSettings()
