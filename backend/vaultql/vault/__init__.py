"""Vault module for sealing secret content in memory."""

from .crypto import SealedBlob, generate_key, encrypt, decrypt
from .errors import VaultError, IntegrityError, FatalInitError
from .session import VaultSession

__all__ = [
    'SealedBlob',
    'generate_key',
    'encrypt',
    'decrypt',
    'VaultError',
    'IntegrityError',
    'FatalInitError',
    'VaultSession',
]
