"""Test configuration helpers."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest


def _ensure_src_on_path() -> None:
    src = Path(__file__).resolve().parent.parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))


_ensure_src_on_path()

from gfshare.policy import DEFAULT_PRIME  # noqa: E402

SMALL_PRIME = 2**13 - 1


@pytest.fixture
def prime() -> int:
    return DEFAULT_PRIME


@pytest.fixture
def small_prime() -> int:
    return SMALL_PRIME
