"""In-memory models for vaultql."""

from dataclasses import dataclass, field
from typing import Protocol

from ..vault import SealedBlob


class Named(Protocol):
    """Anything identified by a unique, case-sensitive name."""

    @property
    def name(self) -> str: ...


@dataclass(frozen=True)
class Client:
    """Represents a client."""
    name: str


@dataclass(frozen=True)
class Secret:
    """Represents a secret. Content stays sealed until resolved."""
    name: str
    content: SealedBlob = field(repr=False)


@dataclass(frozen=True)
class Group:
    """Groups clients and secrets by name. Names are not guaranteed to exist."""
    name: str
    client_names: frozenset[str] = field(default_factory=frozenset)
    secret_names: frozenset[str] = field(default_factory=frozenset)
