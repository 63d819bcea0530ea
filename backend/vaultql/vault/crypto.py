"""
Vault encryption using AES-128-GCM with a process-lifetime key.

Secret content is kept as a SealedBlob (iv, ciphertext, auth tag) and only
turned back into plaintext when a caller asks for it.
"""

import os
from dataclasses import dataclass

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..logging import get_logger
from .errors import FatalInitError, IntegrityError

logger = get_logger("vault")

# AES-GCM configuration
KEY_LENGTH_BYTES = 16  # 128 bits
IV_LENGTH_BYTES = 16
TAG_LENGTH_BYTES = 16


@dataclass(frozen=True)
class SealedBlob:
    """Output of a single encrypt call. The three parts only decrypt together."""

    iv: bytes
    ciphertext: bytes
    auth_tag: bytes


def generate_key() -> bytes:
    """
    Generate a random AES-128 key.

    Returns:
        16-byte key

    Raises:
        FatalInitError if the system random source is unavailable
    """
    try:
        return os.urandom(KEY_LENGTH_BYTES)
    except (OSError, NotImplementedError) as e:
        raise FatalInitError(f"Random source unavailable: {e}") from e


def encrypt(key: bytes, plaintext: str) -> SealedBlob:
    """
    Encrypt plaintext using AES-128-GCM.

    Args:
        key: 16-byte encryption key
        plaintext: String to encrypt

    Returns:
        SealedBlob with a fresh random IV
    """
    iv = os.urandom(IV_LENGTH_BYTES)

    aesgcm = AESGCM(key)
    sealed = aesgcm.encrypt(iv, plaintext.encode('utf-8'), None)

    # AESGCM appends the tag to the ciphertext
    return SealedBlob(
        iv=iv,
        ciphertext=sealed[:-TAG_LENGTH_BYTES],
        auth_tag=sealed[-TAG_LENGTH_BYTES:],
    )


def decrypt(key: bytes, blob: SealedBlob) -> str:
    """
    Decrypt a SealedBlob using AES-128-GCM.

    Args:
        key: 16-byte encryption key
        blob: Output of encrypt()

    Returns:
        Decrypted plaintext string

    Raises:
        IntegrityError if the blob is malformed, was tampered with,
        or was sealed under a different key
    """
    if len(blob.iv) != IV_LENGTH_BYTES:
        logger.warning(f"Rejected sealed blob: iv is {len(blob.iv)} bytes")
        raise IntegrityError("Sealed blob has an invalid iv")
    if len(blob.auth_tag) != TAG_LENGTH_BYTES:
        logger.warning(f"Rejected sealed blob: auth tag is {len(blob.auth_tag)} bytes")
        raise IntegrityError("Sealed blob has an invalid auth tag")

    aesgcm = AESGCM(key)
    try:
        plaintext = aesgcm.decrypt(blob.iv, blob.ciphertext + blob.auth_tag, None)
        return plaintext.decode('utf-8')
    except InvalidTag as e:
        logger.warning("Sealed blob failed authentication")
        raise IntegrityError("Secret content failed integrity verification") from e
    except (ValueError, UnicodeDecodeError) as e:
        logger.warning(f"Sealed blob could not be decrypted: {type(e).__name__}")
        raise IntegrityError("Sealed blob is malformed") from e
