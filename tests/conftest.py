"""Pytest configuration and shared fixtures."""

import os

# Must be set before viewcounter.config is imported anywhere.
os.environ.setdefault("STORAGE_BACKEND", "memory")

import pytest

from viewcounter.application.actors.registry import ActorRegistry

from tests.fakes import YieldingStore


@pytest.fixture
def store():
    return YieldingStore()


@pytest.fixture
def registry(store):
    return ActorRegistry(store)
