"""Shared fixtures for the shadow cipher test suite."""

import pytest

from transport.keys import generate_key_pair

# Smallest size that fits a worst-case table, to keep generation fast
TEST_KEY_SIZE = 2048


@pytest.fixture(scope="session")
def key_pair():
    return generate_key_pair(TEST_KEY_SIZE)


@pytest.fixture(scope="session")
def other_key_pair():
    return generate_key_pair(TEST_KEY_SIZE)


@pytest.fixture(scope="session")
def small_key_pair():
    return generate_key_pair(1024)
