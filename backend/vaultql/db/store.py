"""Static in-memory store for clients, secrets, and groups."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sequence
from typing import Optional, TypeVar

from ..logging import get_logger
from ..vault import VaultSession
from .models import Client, Group, Named, Secret

logger = get_logger("db")

N = TypeVar("N", bound=Named)

# Seed definitions loaded at startup
SEED_SECRETS = {
    "secret1": "secret1",
    "secret2": "secret2",
}
SEED_CLIENTS = ["client1", "client2"]
SEED_GROUPS = [
    {
        "name": "group1",
        "secrets": ["secret1", "secret2"],
        "clients": ["client1", "client2"],
    },
]


def find_by_name(collection: Sequence[N], name: str) -> Optional[N]:
    """Return the entity with exactly this name, or None."""
    for entity in collection:
        if entity.name == name:
            return entity
    return None


def select_by_names(collection: Sequence[N], names: Collection[str]) -> list[N]:
    """Return entities whose name is in names, in collection order."""
    return [entity for entity in collection if entity.name in names]


class DataStore:
    """Read-only collections of clients, secrets, and groups."""

    def __init__(
        self,
        clients: Iterable[Client] = (),
        secrets: Iterable[Secret] = (),
        groups: Iterable[Group] = (),
    ):
        self.clients: tuple[Client, ...] = tuple(clients)
        self.secrets: tuple[Secret, ...] = tuple(secrets)
        self.groups: tuple[Group, ...] = tuple(groups)

        for group_name, kind, name in self.dangling_references():
            logger.warning(f"Group {group_name} references unknown {kind} {name}")

    @classmethod
    def seed(cls, vault: VaultSession) -> DataStore:
        """Build the store from the seed definitions, sealing secrets with vault."""
        store = cls(
            clients=[Client(name=name) for name in SEED_CLIENTS],
            secrets=[
                Secret(name=name, content=vault.encrypt(plaintext))
                for name, plaintext in SEED_SECRETS.items()
            ],
            groups=[
                Group(
                    name=group["name"],
                    client_names=frozenset(group["clients"]),
                    secret_names=frozenset(group["secrets"]),
                )
                for group in SEED_GROUPS
            ],
        )
        logger.info(
            f"Loaded {len(store.clients)} clients, {len(store.secrets)} secrets, "
            f"{len(store.groups)} groups"
        )
        return store

    def dangling_references(self) -> list[tuple[str, str, str]]:
        """
        Find group references that name no existing entity.

        Returns:
            (group name, "client" or "secret", missing name) tuples
        """
        client_names = {c.name for c in self.clients}
        secret_names = {s.name for s in self.secrets}
        missing = []
        for group in self.groups:
            for name in sorted(group.client_names - client_names):
                missing.append((group.name, "client", name))
            for name in sorted(group.secret_names - secret_names):
                missing.append((group.name, "secret", name))
        return missing
