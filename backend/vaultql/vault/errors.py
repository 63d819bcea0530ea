"""Exceptions raised by the vault."""


class VaultError(Exception):
    """Base class for vault failures."""


class IntegrityError(VaultError):
    """Sealed content failed authentication or is malformed."""


class FatalInitError(VaultError):
    """The vault key could not be generated."""
