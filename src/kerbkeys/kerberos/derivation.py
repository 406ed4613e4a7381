"""
Kerberos String-to-Key

Password-based derivation of long-term keys.

- RC4-HMAC family: MD4(UTF-16LE(password)), no salt, no iterations
- AES128/AES256-CTS-HMAC-SHA1-96: RFC 3962 string-to-key, i.e.
  PBKDF2-HMAC-SHA1 followed by DK(random_key, "kerberos")

Every other encryption type raises UnsupportedAlgorithmError.
"""

from __future__ import annotations

from typing import Optional

import structlog

from kerbkeys.core.crypto import aes_encrypt_block, compute_nt_hash, pbkdf2_hmac_sha1
from kerbkeys.core.exceptions import InvalidArgumentError, UnsupportedAlgorithmError
from kerbkeys.core.types import EncryptionType
from kerbkeys.kerberos.principal import make_salt

logger = structlog.get_logger()


# "kerberos" n-folded out to 16 bytes.
KERBEROS_NFOLD = bytes(
    [
        0x6B, 0x65, 0x72, 0x62, 0x65, 0x72, 0x6F, 0x73,
        0x7B, 0x9B, 0x5B, 0x2B, 0x93, 0x13, 0x2B, 0x93,
    ]
)

# RFC 3962 section 4 default
DEFAULT_AES_ITERATIONS = 4096


def derive_rc4_key(password: str) -> bytes:
    """
    Derive an RC4-HMAC key.

    The whole password determines the key; there is no salt.

    Returns:
        16-byte key (the NT hash)
    """
    return compute_nt_hash(password)


def derive_aes_key(password: str, salt: str, iterations: int, key_size: int) -> bytes:
    """
    Derive an AES-CTS-HMAC-SHA1-96 key.

    Steps:
        1. random_key = PBKDF2-HMAC-SHA1(password, salt, iterations, key_size)
        2. block_1 = AES-ECB(random_key, n-fold("kerberos"))
        3. block_n = AES-ECB(random_key, block_n-1) until key_size bytes

    Feeding each ciphertext back in as the next plaintext is CBC with a zero
    IV over the folded constant, which is the RFC 3961 DK function.

    Args:
        password: Password, encoded as UTF-8
        salt: Salt, encoded as UTF-8
        iterations: PBKDF2 iteration count
        key_size: 16 (AES128) or 32 (AES256)

    Raises:
        InvalidArgumentError: For a non-positive iteration count or key size
            other than 16/32
    """
    if key_size not in (16, 32):
        raise InvalidArgumentError(f"AES key size must be 16 or 32 bytes, got {key_size}")
    if iterations < 1:
        raise InvalidArgumentError(f"Iteration count must be positive, got {iterations}")

    random_key = pbkdf2_hmac_sha1(
        password.encode("utf-8"),
        salt.encode("utf-8"),
        iterations,
        key_size,
    )

    output = b""
    block = KERBEROS_NFOLD
    while len(output) < key_size:
        block = aes_encrypt_block(random_key, block)
        output += block
    return output[:key_size]


def derive_key_bytes(
    encryption_type: EncryptionType,
    password: str,
    iterations: int,
    principal: str,
    salt: Optional[str] = None,
) -> bytes:
    """
    Derive raw key bytes for an encryption type.

    Args:
        encryption_type: Target encryption type
        password: Password to derive from
        iterations: PBKDF2 iteration count (ignored for RC4-HMAC)
        principal: Principal, in form TYPE/name@REALM (used for the default salt)
        salt: Explicit salt; an empty or missing salt means the default salt

    Returns:
        Key bytes of encryption_type.key_size length

    Raises:
        InvalidArgumentError: If principal is None
        UnsupportedAlgorithmError: If the type has no password derivation
    """
    if principal is None:
        raise InvalidArgumentError("principal must not be None")

    if encryption_type.is_rc4_hmac:
        return derive_rc4_key(password)

    if encryption_type.is_aes:
        return derive_aes_key(
            password,
            make_salt(principal, salt),
            iterations,
            encryption_type.key_size,
        )

    logger.warning("unsupported_enctype", enctype=encryption_type.name)
    raise UnsupportedAlgorithmError(encryption_type)
