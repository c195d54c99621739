"""Test fixtures for the validator library."""

import sys
import pytest
from datetime import datetime
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
sys.path.insert(0, str(PROJECT_ROOT))

import vali
from vali.validator_registry import ValidatorRegistry


@pytest.fixture
def registry():
    """A private registry with the built-ins installed."""
    return ValidatorRegistry()


@pytest.fixture
def shared_registry():
    """The process-wide registry, restored after the test."""
    before = {name: vali.registry.get(name) for name in vali.registry.names()}
    yield vali.registry
    for name in vali.registry.names():
        if name not in before:
            vali.registry.unregister(name)
    for name, predicate in before.items():
        if vali.registry.get(name) is not predicate:
            vali.registry.register(name, predicate)


@pytest.fixture
def fixed_now():
    return datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def is_alphabetic_only():
    """A custom predicate: ASCII letters only."""
    def predicate(value):
        return isinstance(value, str) and value.isascii() and value.isalpha()
    return predicate
