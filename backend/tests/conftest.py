"""Shared fixtures for vaultql tests."""
import pytest

from vaultql.db import DataStore
from vaultql.vault import VaultSession


@pytest.fixture
def vault():
    """A vault session with a fresh key."""
    return VaultSession.create()


@pytest.fixture
def store(vault):
    """The seeded store, sealed with the vault fixture's key."""
    return DataStore.seed(vault)
