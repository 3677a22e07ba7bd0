"""Pytest fixtures for ttl_memo tests."""

from unittest.mock import Mock

import pytest

from ttl_memo import VirtualTimerQueue


@pytest.fixture
def timers() -> VirtualTimerQueue:
    """Virtual clock starting at 0 ms; time only moves on advance()."""
    return VirtualTimerQueue()


@pytest.fixture
def mock_function() -> Mock:
    """Function returning 5 on its first call and 10 on its second."""
    return Mock(side_effect=[5, 10])


@pytest.fixture
def test_arg() -> str:
    """Argument used as the cache key in most tests."""
    return "c544d3ae-a72d-4755-8ce5-d25db415b776"


@pytest.fixture
def identity():
    """Resolver that uses the first argument as the key."""
    return lambda key: key
