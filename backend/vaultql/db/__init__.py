"""In-memory data store for vaultql."""

from .models import Client, Secret, Group
from .store import DataStore, find_by_name, select_by_names

__all__ = [
    "Client",
    "Secret",
    "Group",
    "DataStore",
    "find_by_name",
    "select_by_names",
]
