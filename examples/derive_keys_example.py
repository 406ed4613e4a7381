#!/usr/bin/env python3
"""
Kerberos Key Derivation Example

Demonstrates how to use kerbkeys to compute the long-term keys a KDC
holds for a principal.

Features:
1. Password-based derivation for AES256, AES128 and RC4-HMAC
2. Default salt vs. explicit salt
3. Loading a key from a hex string
4. Result-based error handling for unsupported types
"""

from returns.result import Success

from kerbkeys import (
    EncryptionType,
    KerberosKey,
    KeyDeriver,
    DerivationConfig,
    NameType,
)
from kerbkeys.kerberos import make_salt


def main():
    """Demonstrate password-based Kerberos key derivation."""

    print("=" * 70)
    print("kerbkeys - Kerberos Key Derivation")
    print("=" * 70)
    print()

    PRINCIPAL = "jdoe@EXAMPLE.COM"
    PASSWORD = "Summer2024!"

    # ==========================================================================
    # EXAMPLE 1: Derive every supported key type
    # ==========================================================================
    print("1. Derive keys for", PRINCIPAL)
    print("-" * 40)

    deriver = KeyDeriver(config=DerivationConfig())
    print(f"   Salt: {make_salt(PRINCIPAL)}")
    for key in deriver.derive_all(PASSWORD, PRINCIPAL, version=2):
        print(f"   {key.encryption_type.name:<28} {key.to_hex()}")
    print()

    # ==========================================================================
    # EXAMPLE 2: Explicit salt (e.g. from PA-ETYPE-INFO2)
    # ==========================================================================
    print("2. Derive with an explicit salt")
    print("-" * 40)

    key = KerberosKey.derive(
        EncryptionType.AES128_CTS_HMAC_SHA1_96,
        password="password",
        iterations=2,
        name_type=NameType.PRINCIPAL,
        principal="raeburn@ATHENA.MIT.EDU",
        salt="ATHENA.MIT.EDUraeburn",
    )
    print(f"   {key}")
    print(f"   key = {key.to_hex()}")
    print()

    # ==========================================================================
    # EXAMPLE 3: Load a known key from hex
    # ==========================================================================
    print("3. Load a service key from hex")
    print("-" * 40)

    service_key = KerberosKey.from_hex(
        EncryptionType.ARCFOUR_HMAC_MD5,
        "8846f7eaee8fb117ad06bdd830b7586c",
        NameType.SRV_INST,
        "HTTP/web.example.com@EXAMPLE.COM",
        version=5,
    )
    print(f"   {service_key}")
    candidate = deriver.derive(EncryptionType.ARCFOUR_HMAC_MD5, "password", PRINCIPAL)
    print(f"   matches 'password': {service_key.matches(candidate.key)}")
    print()

    # ==========================================================================
    # EXAMPLE 4: Unsupported encryption type
    # ==========================================================================
    print("4. Unsupported encryption type")
    print("-" * 40)

    result = deriver.try_derive(EncryptionType.DES_CBC_MD5, PASSWORD, PRINCIPAL)
    if isinstance(result, Success):
        print(f"   Unexpected key: {result.unwrap()}")
    else:
        print(f"   Refused: {result.failure().message}")
    print()


if __name__ == "__main__":
    main()
