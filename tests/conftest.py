"""Shared pytest fixtures for the msgcodec test suite."""

from __future__ import annotations

import pytest

from msgcodec.bootstrap import build_registry
from msgcodec.registry import CodecRegistry


@pytest.fixture()
def registry() -> CodecRegistry:
    """Frozen registry with every bundled codec enabled."""
    return build_registry()


@pytest.fixture()
def empty_registry() -> CodecRegistry:
    return CodecRegistry()


@pytest.fixture()
def message() -> bytes:
    return b"message"
