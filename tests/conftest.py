"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest

from console_bank.config import BankConfig, StorageConfig
from console_bank.persistence import JsonAccountStore
from console_bank.session import BankApp
from console_bank.store import AccountRegistry


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Account file path inside a per-test directory."""
    return tmp_path / "accounts.json"


@pytest.fixture
def registry() -> AccountRegistry:
    """Create a fresh registry for each test."""
    return AccountRegistry()


@pytest.fixture
def store(data_file: Path) -> JsonAccountStore:
    return JsonAccountStore(data_file)


@pytest.fixture
def config(data_file: Path) -> BankConfig:
    return BankConfig(storage=StorageConfig(data_file=data_file))


@pytest.fixture
def app(config: BankConfig) -> BankApp:
    """Application with an empty registry backed by a temp file."""
    return BankApp.open(config)
