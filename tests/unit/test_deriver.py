"""
Unit tests for kerbkeys.kerberos.deriver module.

Tests DerivationConfig validation and the KeyDeriver API.
"""

import pytest
from returns.result import Failure, Success

from kerbkeys.core.exceptions import InvalidArgumentError, UnsupportedAlgorithmError
from kerbkeys.core.types import EncryptionType, NameType
from kerbkeys.kerberos.deriver import DerivationConfig, KeyDeriver
from kerbkeys.kerberos.derivation import DEFAULT_AES_ITERATIONS
from kerbkeys.kerberos.key import derive_key


class TestDerivationConfig:
    """Tests for DerivationConfig."""

    def test_defaults(self):
        """Test RFC 3962 default iterations and AES-first order."""
        config = DerivationConfig()
        assert config.iterations == DEFAULT_AES_ITERATIONS == 4096
        assert config.name_type is NameType.PRINCIPAL
        assert config.encryption_types == (
            EncryptionType.AES256_CTS_HMAC_SHA1_96,
            EncryptionType.AES128_CTS_HMAC_SHA1_96,
            EncryptionType.ARCFOUR_HMAC_MD5,
        )

    def test_legacy_rc4(self):
        """Test RC4-only preset."""
        assert DerivationConfig.legacy_rc4().encryption_types == (EncryptionType.ARCFOUR_HMAC_MD5,)

    def test_list_converted_to_tuple(self):
        """Test encryption types are stored as a tuple."""
        config = DerivationConfig(encryption_types=[EncryptionType.AES128_CTS_HMAC_SHA1_96])
        assert config.encryption_types == (EncryptionType.AES128_CTS_HMAC_SHA1_96,)

    @pytest.mark.parametrize("iterations", [0, -5])
    def test_bad_iterations(self, iterations):
        """Test non-positive iteration counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            DerivationConfig(iterations=iterations)

    def test_underivable_type(self):
        """Test types without a password rule are rejected."""
        with pytest.raises(InvalidArgumentError):
            DerivationConfig(encryption_types=(EncryptionType.DES_CBC_MD5,))

    def test_empty_types(self):
        """Test at least one type is required."""
        with pytest.raises(InvalidArgumentError):
            DerivationConfig(encryption_types=())


class TestKeyDeriver:
    """Tests for KeyDeriver."""

    def test_derive_uses_config(self, key_deriver, test_principal):
        """Test config iterations and name type are applied."""
        key = key_deriver.derive(EncryptionType.AES128_CTS_HMAC_SHA1_96, "pw", test_principal)
        expected = derive_key(
            EncryptionType.AES128_CTS_HMAC_SHA1_96, "pw", 2, NameType.PRINCIPAL, test_principal
        )
        assert key.key == expected.key
        assert key.name_type is NameType.PRINCIPAL

    def test_derive_overrides(self, key_deriver, service_principal):
        """Test per-call iterations and name type override the config."""
        key = key_deriver.derive(
            EncryptionType.AES128_CTS_HMAC_SHA1_96,
            "password",
            service_principal,
            salt="ATHENA.MIT.EDUraeburn",
            iterations=2,
            name_type=NameType.SRV_HST,
        )
        assert key.to_hex() == "c651bf29e2300ac27fa469d693bdda13"
        assert key.name_type is NameType.SRV_HST

    def test_derive_all(self, key_deriver, test_principal):
        """Test one key per configured type, in order."""
        keys = key_deriver.derive_all("pw", test_principal, version=4)
        assert [k.encryption_type for k in keys] == list(key_deriver.config.encryption_types)
        assert [len(k.key) for k in keys] == [32, 16, 16]
        assert all(k.version == 4 for k in keys)
        assert all(k.principal == test_principal for k in keys)

    def test_derive_all_rc4_only(self, test_principal):
        """Test legacy preset yields only the NT hash."""
        keys = KeyDeriver(config=DerivationConfig.legacy_rc4()).derive_all("", test_principal)
        assert len(keys) == 1
        assert keys[0].to_hex() == "31d6cfe0d16ae931b73c59d7e0c089c0"

    def test_try_derive_success(self, key_deriver, test_principal):
        """Test Success wraps the derived key."""
        result = key_deriver.try_derive(EncryptionType.ARCFOUR_HMAC_MD5, "", test_principal)
        assert isinstance(result, Success)
        assert result.unwrap().to_hex() == "31d6cfe0d16ae931b73c59d7e0c089c0"

    def test_try_derive_unsupported(self, key_deriver, test_principal):
        """Test Failure wraps UnsupportedAlgorithmError."""
        result = key_deriver.try_derive(EncryptionType.DES3_CBC_SHA1, "pw", test_principal)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), UnsupportedAlgorithmError)

    def test_try_derive_none_principal(self, key_deriver):
        """Test Failure wraps InvalidArgumentError for a None principal."""
        result = key_deriver.try_derive(EncryptionType.AES256_CTS_HMAC_SHA1_96, "pw", None)
        assert isinstance(result, Failure)
        assert isinstance(result.failure(), InvalidArgumentError)
