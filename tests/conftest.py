"""Pytest configuration and shared fixtures."""

import httpx
import pytest
from unittest.mock import AsyncMock

from mdslack.images import ImageAdmission


@pytest.fixture
def ok_probe():
    """Probe that reports every URL as reachable."""
    return AsyncMock(return_value=200)


@pytest.fixture
def not_found_probe():
    return AsyncMock(return_value=404)


@pytest.fixture
def unreachable_probe():
    """Probe that fails at the network level."""
    return AsyncMock(side_effect=httpx.ConnectError("connection refused"))


@pytest.fixture
def admission(ok_probe):
    return ImageAdmission(ok_probe)
