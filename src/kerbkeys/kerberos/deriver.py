"""
Configured Key Derivation

KeyDeriver bundles the defaults a caller would otherwise repeat on every
call (iteration count, name type, which encryption types to produce) and
offers a Result-returning variant for callers that prefer not to catch.

Example:
    deriver = KeyDeriver()
    keys = deriver.derive_all("Secret123", "user1@EXAMPLE.COM", version=2)
    for key in keys:
        print(key.encryption_type.name, key.to_hex())
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

import attrs
import structlog
from attrs import field, validators
from returns.result import Failure, Result, Success

from kerbkeys.core.exceptions import InvalidArgumentError, KerbKeysError
from kerbkeys.core.types import EncryptionType, NameType
from kerbkeys.kerberos.derivation import DEFAULT_AES_ITERATIONS
from kerbkeys.kerberos.key import KerberosKey

logger = structlog.get_logger()


# =============================================================================
# CONFIGURATION
# =============================================================================


def _check_derivable(
    instance: Any, attribute: attrs.Attribute, value: Tuple[EncryptionType, ...]
) -> None:
    if not value:
        raise InvalidArgumentError("At least one encryption type is required")
    for enctype in value:
        if not isinstance(enctype, EncryptionType) or not enctype.is_derivable:
            raise InvalidArgumentError(f"Cannot derive keys for {enctype!r}")


def _check_iterations(instance: Any, attribute: attrs.Attribute, value: int) -> None:
    if not isinstance(value, int) or value < 1:
        raise InvalidArgumentError(f"Iteration count must be a positive int, got {value!r}")


@attrs.define(frozen=True)
class DerivationConfig:
    """
    Defaults for password-based key derivation.

    Attributes:
        iterations: PBKDF2 iteration count for AES types (RFC 3962 default 4096)
        name_type: Name type stamped on derived keys
        encryption_types: Types produced by KeyDeriver.derive_all, in order
    """

    iterations: int = field(default=DEFAULT_AES_ITERATIONS, validator=_check_iterations)
    name_type: NameType = field(
        default=NameType.PRINCIPAL, validator=validators.instance_of(NameType)
    )
    encryption_types: Tuple[EncryptionType, ...] = field(
        default=(
            EncryptionType.AES256_CTS_HMAC_SHA1_96,
            EncryptionType.AES128_CTS_HMAC_SHA1_96,
            EncryptionType.ARCFOUR_HMAC_MD5,
        ),
        converter=tuple,
        validator=_check_derivable,
    )

    @classmethod
    def legacy_rc4(cls) -> "DerivationConfig":
        """Config that only produces RC4-HMAC keys."""
        return cls(encryption_types=(EncryptionType.ARCFOUR_HMAC_MD5,))


# =============================================================================
# KEY DERIVER
# =============================================================================


@attrs.define
class KeyDeriver:
    """
    Derives KerberosKey objects using a DerivationConfig for defaults.

    Stateless apart from its config, so one instance can be shared.
    """

    config: DerivationConfig = attrs.Factory(DerivationConfig)

    _logger: Any = attrs.Factory(lambda: structlog.get_logger())

    def derive(
        self,
        encryption_type: EncryptionType,
        password: str,
        principal: str,
        salt: Optional[str] = None,
        version: int = 0,
        iterations: Optional[int] = None,
        name_type: Optional[NameType] = None,
    ) -> KerberosKey:
        """
        Derive one key, filling unspecified arguments from the config.

        Raises:
            InvalidArgumentError: If principal is None
            UnsupportedAlgorithmError: If the type cannot be derived
        """
        return KerberosKey.derive(
            encryption_type,
            password,
            iterations if iterations is not None else self.config.iterations,
            name_type if name_type is not None else self.config.name_type,
            principal,
            salt,
            version,
        )

    def derive_all(
        self,
        password: str,
        principal: str,
        salt: Optional[str] = None,
        version: int = 0,
    ) -> List[KerberosKey]:
        """
        Derive one key per configured encryption type.

        Returns:
            Keys in config.encryption_types order
        """
        keys = [
            self.derive(enctype, password, principal, salt=salt, version=version)
            for enctype in self.config.encryption_types
        ]
        self._logger.info(
            "keys_derived",
            principal=keys[0].principal,
            kvno=version,
            enctypes=[key.encryption_type.name for key in keys],
        )
        return keys

    def try_derive(
        self,
        encryption_type: EncryptionType,
        password: str,
        principal: str,
        salt: Optional[str] = None,
        version: int = 0,
    ) -> Result[KerberosKey, KerbKeysError]:
        """
        Derive one key without raising library errors.

        Returns:
            Success(KerberosKey) or Failure(KerbKeysError)
        """
        try:
            return Success(
                self.derive(encryption_type, password, principal, salt=salt, version=version)
            )
        except KerbKeysError as e:
            self._logger.warning(
                "derivation_failed",
                enctype=getattr(encryption_type, "name", encryption_type),
                error=e.message,
            )
            return Failure(e)
