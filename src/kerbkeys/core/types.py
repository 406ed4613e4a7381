"""
kerbkeys Core Types

Enumerations shared by the key container and the derivation routines.

Values match the IANA Kerberos parameter registry (RFC 3961 / RFC 4120),
plus the negative Microsoft private-use numbers seen on Windows KDCs.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from kerbkeys.core.exceptions import InvalidArgumentError


# =============================================================================
# ENCRYPTION TYPES
# =============================================================================


class EncryptionType(Enum):
    """
    Kerberos encryption types.

    Only the RC4-HMAC family and the two AES-SHA1 profiles can be derived
    from a password. Every other member is an opaque tag for keys that were
    produced elsewhere.
    """

    NULL = 0
    DES_CBC_CRC = 1
    DES_CBC_MD4 = 2
    DES_CBC_MD5 = 3
    DES3_CBC_MD5 = 5
    OLD_DES3_CBC_SHA1 = 7
    DES3_CBC_SHA1 = 16
    AES128_CTS_HMAC_SHA1_96 = 17
    AES256_CTS_HMAC_SHA1_96 = 18
    AES128_CTS_HMAC_SHA256_128 = 19
    AES256_CTS_HMAC_SHA384_192 = 20
    ARCFOUR_HMAC_MD5 = 23
    ARCFOUR_HMAC_MD5_56 = 24
    ARCFOUR_MD4 = -128
    ARCFOUR_HMAC_OLD = -133
    ARCFOUR_HMAC_OLD_EXP = -135

    @property
    def key_size(self) -> Optional[int]:
        """Return key size in bytes, or None if this type is an opaque tag."""
        return _KEY_SIZES.get(self)

    @property
    def is_rc4_hmac(self) -> bool:
        """Return True for the RC4-HMAC family (key = MD4 of the password)."""
        return self in _RC4_HMAC_FAMILY

    @property
    def is_aes(self) -> bool:
        """Return True for the RFC 3962 AES-SHA1 profiles."""
        return self in (
            EncryptionType.AES128_CTS_HMAC_SHA1_96,
            EncryptionType.AES256_CTS_HMAC_SHA1_96,
        )

    @property
    def is_derivable(self) -> bool:
        """Return True if a key of this type can be derived from a password."""
        return self.is_rc4_hmac or self.is_aes

    @classmethod
    def from_name(cls, name: str) -> EncryptionType:
        """
        Look up an encryption type by name.

        Accepts the member name ("AES256_CTS_HMAC_SHA1_96") or the MIT krb5
        spelling ("aes256-cts-hmac-sha1-96", "rc4-hmac", "arcfour-hmac").

        Raises:
            InvalidArgumentError: If the name is not recognised
        """
        normalized = name.strip().lower().replace("_", "-")
        try:
            return _NAME_ALIASES[normalized]
        except KeyError:
            raise InvalidArgumentError(f"Unknown encryption type: {name}") from None


_RC4_HMAC_FAMILY = frozenset(
    {
        EncryptionType.ARCFOUR_HMAC_MD5,
        EncryptionType.ARCFOUR_HMAC_MD5_56,
        EncryptionType.ARCFOUR_HMAC_OLD,
        EncryptionType.ARCFOUR_HMAC_OLD_EXP,
    }
)

_KEY_SIZES: Dict[EncryptionType, int] = {
    EncryptionType.DES_CBC_CRC: 8,
    EncryptionType.DES_CBC_MD4: 8,
    EncryptionType.DES_CBC_MD5: 8,
    EncryptionType.DES3_CBC_SHA1: 24,
    EncryptionType.AES128_CTS_HMAC_SHA1_96: 16,
    EncryptionType.AES256_CTS_HMAC_SHA1_96: 32,
    EncryptionType.AES128_CTS_HMAC_SHA256_128: 16,
    EncryptionType.AES256_CTS_HMAC_SHA384_192: 32,
    EncryptionType.ARCFOUR_HMAC_MD5: 16,
    EncryptionType.ARCFOUR_HMAC_MD5_56: 16,
    EncryptionType.ARCFOUR_HMAC_OLD: 16,
    EncryptionType.ARCFOUR_HMAC_OLD_EXP: 16,
}

_NAME_ALIASES: Dict[str, EncryptionType] = {
    member.name.lower().replace("_", "-"): member for member in EncryptionType
}
_NAME_ALIASES.update(
    {
        "des-cbc-crc": EncryptionType.DES_CBC_CRC,
        "des3-hmac-sha1": EncryptionType.DES3_CBC_SHA1,
        "des3-cbc-sha1-kd": EncryptionType.DES3_CBC_SHA1,
        "aes128": EncryptionType.AES128_CTS_HMAC_SHA1_96,
        "aes256": EncryptionType.AES256_CTS_HMAC_SHA1_96,
        "aes128-cts": EncryptionType.AES128_CTS_HMAC_SHA1_96,
        "aes256-cts": EncryptionType.AES256_CTS_HMAC_SHA1_96,
        "rc4": EncryptionType.ARCFOUR_HMAC_MD5,
        "rc4-hmac": EncryptionType.ARCFOUR_HMAC_MD5,
        "arcfour-hmac": EncryptionType.ARCFOUR_HMAC_MD5,
        "arcfour-hmac-md5": EncryptionType.ARCFOUR_HMAC_MD5,
        "rc4-hmac-exp": EncryptionType.ARCFOUR_HMAC_MD5_56,
        "arcfour-hmac-exp": EncryptionType.ARCFOUR_HMAC_MD5_56,
    }
)


# =============================================================================
# NAME TYPES
# =============================================================================


class NameType(Enum):
    """Kerberos principal name types per RFC 4120 section 6.2 (and MS-KILE)."""

    UNKNOWN = 0
    PRINCIPAL = 1
    SRV_INST = 2
    SRV_HST = 3
    SRV_XHST = 4
    UID = 5
    X500_PRINCIPAL = 6
    SMTP_NAME = 7
    ENTERPRISE_PRINCIPAL = 10
    WELLKNOWN = 11
    MS_PRINCIPAL = -128
    MS_PRINCIPAL_AND_ID = -129
    ENT_PRINCIPAL_AND_ID = -130
