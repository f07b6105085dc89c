"""Pytest configuration and shared fixtures for fallible tests."""

from __future__ import annotations

import pytest

from tests.models import Person


@pytest.fixture
def sample_success():
    """Sample Success value for testing."""
    from fallible import Success

    return Success(42)


@pytest.fixture
def sample_failure():
    """Sample Failure value for testing."""
    from fallible import Failure

    return Failure("uh oh")


@pytest.fixture
def persons() -> list[Person]:
    return [
        Person(name="Bobby", age=13, hobby="Video Games"),
        Person(name="Alice", age=31),
    ]
