"""
kerbkeys - Kerberos Long-Term Keys

This package represents Kerberos long-term keys and derives them from
passwords exactly as a KDC would.

Supported Derivations:
- AES128-CTS-HMAC-SHA1-96 / AES256-CTS-HMAC-SHA1-96 (RFC 3962)
- RC4-HMAC and its legacy variants (RFC 4757)

Other encryption types can be held as opaque keys but not derived.

Example Usage:
    from kerbkeys import EncryptionType, KerberosKey, NameType

    key = KerberosKey.derive(
        EncryptionType.AES256_CTS_HMAC_SHA1_96,
        password="secret",
        iterations=4096,
        name_type=NameType.PRINCIPAL,
        principal="jdoe@EXAMPLE.COM",
    )
    print(key.principal, key.to_hex())
"""

from kerbkeys.core.types import EncryptionType, NameType
from kerbkeys.core.exceptions import (
    KerbKeysError,
    InvalidArgumentError,
    UnsupportedAlgorithmError,
)
from kerbkeys.kerberos.key import KerberosKey, derive_key
from kerbkeys.kerberos.deriver import DerivationConfig, KeyDeriver

__version__ = "0.1.0"

__all__ = [
    # Main API
    "KerberosKey",
    "derive_key",
    "KeyDeriver",
    "DerivationConfig",
    # Types
    "EncryptionType",
    "NameType",
    # Exceptions
    "KerbKeysError",
    "InvalidArgumentError",
    "UnsupportedAlgorithmError",
    # Metadata
    "__version__",
]
