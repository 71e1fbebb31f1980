# -*- coding: utf-8 -*-
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_sessionstart(session) -> None:
    # Ensure project root is importable for tests
    root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(root))


@pytest.fixture
def sample_lines() -> list:
    return ["# Title (Target: 100)", "word word word", "## Sub", "one two"]
