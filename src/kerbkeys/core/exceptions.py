"""
kerbkeys Exception Types

Custom exceptions for key construction and derivation errors.
"""

from typing import Any, Optional


class KerbKeysError(Exception):
    """Base exception for all kerbkeys errors."""

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class InvalidArgumentError(KerbKeysError, ValueError):
    """
    A caller supplied an argument the operation cannot accept.

    Raised for a missing principal, a malformed hex key, key material of the
    wrong length, or an out-of-range iteration count or KVNO.
    """

    pass


class UnsupportedAlgorithmError(KerbKeysError):
    """
    No password-based derivation rule exists for the encryption type.

    The requested key is never produced; callers may retry with a
    different encryption type.
    """

    KDC_ERR_ETYPE_NOSUPP = 14

    def __init__(self, encryption_type: Any, message: Optional[str] = None) -> None:
        name = getattr(encryption_type, "name", encryption_type)
        if message is None:
            message = f"Unsupported key type {name}"
        super().__init__(message, code=self.KDC_ERR_ETYPE_NOSUPP)
        self.encryption_type = encryption_type
