"""Shared fixtures for fieldcheck tests."""

from dataclasses import dataclass, field

import pytest

from fieldcheck.examples import Product, sample_product
from fieldcheck.rules import RuleRegistry


@dataclass
class Account:
    username: str = field(metadata={"json": "userName", "validate": "slugField"})
    full_name: str = field(metadata={"json": "fullName", "validate": "required,nameField"})
    age: int = field(metadata={"validate": "positiveNumberField"})
    verified: bool = field(metadata={"validate": "alwaysTrueField"})


@pytest.fixture
def product() -> Product:
    return sample_product()


@pytest.fixture
def invalid_account() -> Account:
    """Account violating every rule except ``required``."""
    return Account(username="Bob", full_name="Bob", age=-1, verified=False)


@pytest.fixture
def registry() -> RuleRegistry:
    """Fresh registry with built-in rules, safe to extend per test."""
    return RuleRegistry.with_builtins()
