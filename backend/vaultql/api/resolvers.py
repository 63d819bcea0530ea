"""
Resolver functions behind the GraphQL fields.

Each function maps one field request onto a store lookup or a vault call.
Lookups that find nothing return None; IntegrityError from the vault is
left to propagate so the field reports it.
"""

from typing import Optional

from ..db import Client, DataStore, Group, Secret, find_by_name, select_by_names
from ..vault import VaultSession


def resolve_group(store: DataStore, name: str) -> Optional[Group]:
    return find_by_name(store.groups, name)


def resolve_secret(store: DataStore, name: str) -> Optional[Secret]:
    return find_by_name(store.secrets, name)


def resolve_client(store: DataStore, name: str) -> Optional[Client]:
    return find_by_name(store.clients, name)


def resolve_group_clients(store: DataStore, group: Group) -> list[Client]:
    return select_by_names(store.clients, group.client_names)


def resolve_group_secrets(store: DataStore, group: Group) -> list[Secret]:
    return select_by_names(store.secrets, group.secret_names)


def resolve_secret_content(vault: VaultSession, secret: Secret) -> str:
    """Decrypt a secret's content. Raises IntegrityError on tampered content."""
    return vault.decrypt(secret.content)
