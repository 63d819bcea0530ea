"""
Vault session - holds the process encryption key in memory.

One session is created at startup and handed to whatever needs to seal or
open secret content. The key is never persisted, so content sealed by one
process cannot be opened by the next.
"""

import hashlib
from dataclasses import dataclass, field
from datetime import datetime

from ..logging import get_logger
from .crypto import SealedBlob, decrypt, encrypt, generate_key

logger = get_logger("vault")


@dataclass(frozen=True)
class VaultSession:
    """Holds the vault encryption key for the process lifetime."""

    key: bytes = field(repr=False)
    created_at: datetime = field(default_factory=datetime.now)

    @classmethod
    def create(cls) -> "VaultSession":
        """Generate a fresh key and wrap it in a session."""
        session = cls(key=generate_key())
        logger.info(f"Vault key generated (fingerprint {session.key_fingerprint})")
        return session

    @property
    def key_fingerprint(self) -> str:
        """Short non-reversible identifier for the key, safe to log."""
        return hashlib.sha256(self.key).hexdigest()[:8]

    def encrypt(self, plaintext: str) -> SealedBlob:
        """Seal plaintext under this session's key."""
        return encrypt(self.key, plaintext)

    def decrypt(self, blob: SealedBlob) -> str:
        """Open a blob sealed under this session's key."""
        return decrypt(self.key, blob)
