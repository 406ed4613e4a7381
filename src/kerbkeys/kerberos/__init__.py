"""
kerbkeys Kerberos Module

Long-term Kerberos keys and password-based key derivation
(RFC 3961 / RFC 3962 AES profiles and the RC4-HMAC profile).

Components:
- principal: principal string parsing and default salts
- derivation: string-to-key algorithms
- key: KerberosKey value object
- deriver: configured KeyDeriver with a Result API
"""

from kerbkeys.kerberos.principal import (
    format_principal,
    get_components,
    get_realm,
    make_salt,
    parse_principal,
)
from kerbkeys.kerberos.derivation import (
    DEFAULT_AES_ITERATIONS,
    KERBEROS_NFOLD,
    derive_aes_key,
    derive_key_bytes,
    derive_rc4_key,
)
from kerbkeys.kerberos.key import KerberosKey, derive_key
from kerbkeys.kerberos.deriver import DerivationConfig, KeyDeriver

__all__ = [
    # Principals
    "format_principal",
    "get_components",
    "get_realm",
    "make_salt",
    "parse_principal",
    # Derivation
    "DEFAULT_AES_ITERATIONS",
    "KERBEROS_NFOLD",
    "derive_aes_key",
    "derive_key_bytes",
    "derive_rc4_key",
    # Keys
    "KerberosKey",
    "derive_key",
    # Configured derivation
    "DerivationConfig",
    "KeyDeriver",
]
