"""
kerbkeys Cryptographic Primitives

Thin wrappers around the cryptography and pycryptodomex libraries for the
handful of primitives long-term key derivation needs.
Uses established libraries - NO custom cipher or hash implementations.

Security:
- Key material only lives in local variables of the calling function
- Constant-time comparison for secrets
"""

from __future__ import annotations

import binascii
import hmac
import secrets
from functools import reduce
from math import gcd

from Cryptodome.Hash import MD4
from cryptography.hazmat.backends import default_backend
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from kerbkeys.core.exceptions import InvalidArgumentError


AES_BLOCK_SIZE = 16


# =============================================================================
# HASH FUNCTIONS
# =============================================================================


def md4_hash(data: bytes) -> bytes:
    """
    Compute MD4 hash.

    WARNING: MD4 is cryptographically broken. Only used for RC4-HMAC keys.
    hashlib drops MD4 under OpenSSL 3, so pycryptodomex provides it.

    Args:
        data: Data to hash

    Returns:
        16-byte MD4 hash
    """
    return MD4.new(data).digest()


def compute_nt_hash(password: str) -> bytes:
    """
    Compute NT hash from password.

    NT Hash = MD4(UTF-16LE(password))

    Args:
        password: User password

    Returns:
        16-byte NT hash
    """
    # UTF-16LE without a byte-order mark
    return md4_hash(password.encode("utf-16-le"))


# =============================================================================
# KEY DERIVATION
# =============================================================================


def pbkdf2_hmac_sha1(password: bytes, salt: bytes, iterations: int, length: int) -> bytes:
    """
    Run PBKDF2 with HMAC-SHA1 as the pseudorandom function.

    Args:
        password: Key material
        salt: Salt bytes
        iterations: Iteration count (at least 1)
        length: Output length in bytes

    Returns:
        Derived bytes of the requested length
    """
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA1(),  # noqa: S303
        length=length,
        salt=salt,
        iterations=iterations,
        backend=default_backend(),
    )
    return kdf.derive(password)


def aes_encrypt_block(key: bytes, block: bytes) -> bytes:
    """
    Encrypt a single 16-byte block with AES in ECB mode.

    Args:
        key: AES key (16 or 32 bytes)
        block: Exactly one cipher block

    Returns:
        16-byte ciphertext block
    """
    if len(block) != AES_BLOCK_SIZE:
        raise InvalidArgumentError(
            f"AES block must be {AES_BLOCK_SIZE} bytes, got {len(block)}"
        )
    cipher = Cipher(algorithms.AES(key), modes.ECB(), backend=default_backend())  # noqa: S305
    encryptor = cipher.encryptor()
    return encryptor.update(block) + encryptor.finalize()


def n_fold(data: bytes, nbytes: int) -> bytes:
    """
    Stretch or shrink data to nbytes using the RFC 3961 n-fold operation.

    Copies of the input are rotated right by 13 bits per copy until the
    concatenation reaches lcm(len(data), nbytes), then the nbytes-wide slices
    are summed with end-around carry.
    """

    def rotate_right(value: bytes, nbits: int) -> bytes:
        shift, remain = (nbits // 8) % len(value), nbits % 8
        return bytes(
            (value[i - shift] >> remain)
            | ((value[i - shift - 1] << (8 - remain)) & 0xFF)
            for i in range(len(value))
        )

    def add_ones_complement(left: bytes, right: bytes) -> bytes:
        n = len(left)
        v = [a + b for a, b in zip(left, right)]
        while any(x & ~0xFF for x in v):
            v = [(v[i - n + 1] >> 8) + (v[i] & 0xFF) for i in range(n)]
        return bytes(v)

    if not data or nbytes < 1:
        raise InvalidArgumentError("n-fold needs non-empty input and a positive width")

    length = len(data)
    lcm = nbytes * length // gcd(nbytes, length)
    stretched = b"".join(rotate_right(data, 13 * i) for i in range(lcm // length))
    slices = (stretched[p : p + nbytes] for p in range(0, lcm, nbytes))
    return reduce(add_ones_complement, slices)


# =============================================================================
# UTILITY FUNCTIONS
# =============================================================================


def decode_hex(value: str) -> bytes:
    """
    Decode a hex string two characters at a time, left to right.

    Raises:
        InvalidArgumentError: On odd length or non-hex characters
    """
    if len(value) % 2 != 0:
        raise InvalidArgumentError("Invalid key length.")
    try:
        return binascii.unhexlify(value)
    except (binascii.Error, ValueError) as e:
        raise InvalidArgumentError(f"Invalid hex key: {e}") from e


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Compare two byte strings in constant time.

    Prevents timing attacks on secret comparisons.
    """
    return hmac.compare_digest(a, b)


def secure_random_bytes(length: int) -> bytes:
    """Generate cryptographically secure random bytes."""
    return secrets.token_bytes(length)
