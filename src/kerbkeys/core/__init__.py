"""
kerbkeys Core Module

Provides foundational types and primitives used by the Kerberos key code.

Components:
- types: Encryption and name type enumerations
- crypto: Cryptographic primitive wrappers
- exceptions: Custom exception types
"""

from kerbkeys.core.types import EncryptionType, NameType
from kerbkeys.core.exceptions import (
    KerbKeysError,
    InvalidArgumentError,
    UnsupportedAlgorithmError,
)

__all__ = [
    # Types
    "EncryptionType",
    "NameType",
    # Exceptions
    "KerbKeysError",
    "InvalidArgumentError",
    "UnsupportedAlgorithmError",
]
