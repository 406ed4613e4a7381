"""
Kerberos Long-Term Key

Immutable container for a principal's key for one encryption type, plus
the identity and versioning metadata that travels with it.

Design Principles:
- Immutable: frozen attrs class, key held as bytes
- Validated: key length checked against the encryption type when known
- Secret-safe: key bytes never appear in repr
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Tuple

import attrs
import structlog
from attrs import field, validators

from kerbkeys.core.crypto import constant_time_compare, decode_hex, secure_random_bytes
from kerbkeys.core.exceptions import InvalidArgumentError, UnsupportedAlgorithmError
from kerbkeys.core.types import EncryptionType, NameType
from kerbkeys.kerberos.derivation import derive_key_bytes
from kerbkeys.kerberos.principal import format_principal, parse_principal

logger = structlog.get_logger()

MAX_KVNO = 0xFFFFFFFF


def _copy_key(value: Any) -> bytes:
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidArgumentError(
            f"Key must be a bytes-like object, got {type(value).__name__}"
        )
    return bytes(value)


def _now() -> datetime:
    return datetime.now(timezone.utc)


@attrs.define(frozen=True, slots=True)
class KerberosKey:
    """
    A single Kerberos key.

    Attributes:
        encryption_type: The key encryption type
        key: The key bytes (immutable copy)
        name_type: The principal name type
        realm: The realm for the key ("" if the principal had none)
        components: The name components, primary first
        timestamp: When the key was created
        version: Key Version Number (KVNO)

    INVARIANT: len(key) == encryption_type.key_size when the size is known
    """

    encryption_type: EncryptionType = field(validator=validators.instance_of(EncryptionType))
    _key: bytes = field(converter=_copy_key, repr=False)
    name_type: NameType = field(
        default=NameType.PRINCIPAL, validator=validators.instance_of(NameType)
    )
    realm: str = field(default="", validator=validators.instance_of(str))
    components: Tuple[str, ...] = field(
        default=(),
        converter=tuple,
        validator=validators.deep_iterable(validators.instance_of(str)),
    )
    timestamp: datetime = field(factory=_now, validator=validators.instance_of(datetime))
    version: int = field(default=0)

    @version.validator
    def _check_version(self, attribute: attrs.Attribute, value: int) -> None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidArgumentError(f"KVNO must be an int, got {type(value).__name__}")
        if not 0 <= value <= MAX_KVNO:
            raise InvalidArgumentError(f"KVNO must fit in 32 bits, got {value}")

    def __attrs_post_init__(self) -> None:
        expected_size = self.encryption_type.key_size
        if expected_size is not None and len(self._key) != expected_size:
            raise InvalidArgumentError(
                f"Key must be {expected_size} bytes for {self.encryption_type.name}, "
                f"got {len(self._key)}"
            )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def key(self) -> bytes:
        """The key bytes. bytes is immutable, so callers cannot alter the stored secret."""
        return bytes(self._key)

    @property
    def principal(self) -> str:
        """Principal name as a string."""
        return format_principal(self.components, self.realm)

    def to_hex(self) -> str:
        """Return the key as a lowercase hex string."""
        return self._key.hex()

    def matches(self, other: bytes) -> bool:
        """Compare the key against other key bytes in constant time."""
        return constant_time_compare(self._key, bytes(other))

    def __str__(self) -> str:
        return f"{self.principal} kvno={self.version} {self.encryption_type.name}"

    # -------------------------------------------------------------------------
    # Alternate constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_principal(
        cls,
        encryption_type: EncryptionType,
        key: bytes,
        name_type: NameType,
        principal: str,
        timestamp: Optional[datetime] = None,
        version: int = 0,
    ) -> KerberosKey:
        """
        Create a key for a principal string.

        Args:
            principal: Principal for key, in form TYPE/name@REALM

        Raises:
            InvalidArgumentError: If principal is None or key length is wrong
        """
        realm, components = parse_principal(principal)
        return cls(
            encryption_type=encryption_type,
            key=key,
            name_type=name_type,
            realm=realm,
            components=components,
            timestamp=timestamp if timestamp is not None else _now(),
            version=version,
        )

    @classmethod
    def from_hex(
        cls,
        encryption_type: EncryptionType,
        key: str,
        name_type: NameType,
        principal: str,
        timestamp: Optional[datetime] = None,
        version: int = 0,
    ) -> KerberosKey:
        """
        Create a key from a hex string.

        Raises:
            InvalidArgumentError: On odd-length or non-hex input
        """
        return cls.from_principal(
            encryption_type, decode_hex(key), name_type, principal, timestamp, version
        )

    @classmethod
    def derive(
        cls,
        encryption_type: EncryptionType,
        password: str,
        iterations: int,
        name_type: NameType,
        principal: str,
        salt: Optional[str] = None,
        version: int = 0,
    ) -> KerberosKey:
        """
        Derive a key from a password.

        Not all encryption types are supported; see derive_key_bytes.

        Args:
            encryption_type: The key encryption to use
            password: The password to derive from
            iterations: Iterations for the password derivation
            name_type: The key name type
            principal: Principal for key, in form TYPE/name@REALM
            salt: Salt for the key (default salt if empty or None)
            version: Key Version Number (KVNO)

        Raises:
            InvalidArgumentError: If principal is None
            UnsupportedAlgorithmError: If the type cannot be derived
        """
        key = derive_key_bytes(encryption_type, password, iterations, principal, salt)
        result = cls.from_principal(encryption_type, key, name_type, principal, _now(), version)
        logger.debug(
            "key_derived",
            enctype=encryption_type.name,
            principal=result.principal,
            kvno=version,
            key_length=len(key),
        )
        return result

    @classmethod
    def generate(
        cls,
        encryption_type: EncryptionType,
        name_type: NameType,
        principal: str,
        version: int = 0,
    ) -> KerberosKey:
        """
        Generate a random key of the right size for the encryption type.

        Raises:
            UnsupportedAlgorithmError: If the key size of the type is unknown
        """
        key_size = encryption_type.key_size
        if key_size is None:
            raise UnsupportedAlgorithmError(
                encryption_type, f"No key size known for {encryption_type.name}"
            )
        return cls.from_principal(
            encryption_type, secure_random_bytes(key_size), name_type, principal, _now(), version
        )


def derive_key(
    encryption_type: EncryptionType,
    password: str,
    iterations: int,
    name_type: NameType,
    principal: str,
    salt: Optional[str] = None,
    version: int = 0,
) -> KerberosKey:
    """Derive a KerberosKey from a password. See KerberosKey.derive."""
    return KerberosKey.derive(
        encryption_type, password, iterations, name_type, principal, salt, version
    )
