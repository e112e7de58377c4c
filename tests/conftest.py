"""Pytest fixtures for the array operators talk."""

import pytest

from array_ops_demo import samples
from array_ops_demo.transcript import Transcript


@pytest.fixture
def transcript() -> Transcript:
    return Transcript()


@pytest.fixture
def discounts():
    return samples.discounts()


@pytest.fixture
def orders():
    return samples.orders()
