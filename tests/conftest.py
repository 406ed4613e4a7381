"""
Pytest configuration and shared fixtures for kerbkeys tests.
"""

import pytest
from datetime import datetime, timezone

from kerbkeys.core.types import EncryptionType, NameType
from kerbkeys.kerberos.key import KerberosKey
from kerbkeys.kerberos.deriver import DerivationConfig, KeyDeriver


# =============================================================================
# PRINCIPAL FIXTURES
# =============================================================================


@pytest.fixture
def test_realm() -> str:
    """Test Kerberos realm."""
    return "EXAMPLE.COM"


@pytest.fixture
def test_principal(test_realm: str) -> str:
    """Test user principal."""
    return f"user1@{test_realm}"


@pytest.fixture
def service_principal(test_realm: str) -> str:
    """Test service principal."""
    return f"HTTP/host.example.com@{test_realm}"


# =============================================================================
# CRYPTOGRAPHIC FIXTURES
# =============================================================================


@pytest.fixture
def test_password() -> str:
    """Test password."""
    return "TestP@ssw0rd123!"


@pytest.fixture
def fixed_time() -> datetime:
    """Fixed UTC timestamp for key records."""
    return datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def aes128_key_bytes() -> bytes:
    """Sequential 16-byte key material."""
    return bytes(range(1, 17))


@pytest.fixture
def aes128_key(aes128_key_bytes: bytes, test_principal: str, fixed_time: datetime) -> KerberosKey:
    """AES128 key built from raw bytes."""
    return KerberosKey.from_principal(
        EncryptionType.AES128_CTS_HMAC_SHA1_96,
        aes128_key_bytes,
        NameType.PRINCIPAL,
        test_principal,
        fixed_time,
        3,
    )


# =============================================================================
# DERIVER FIXTURES
# =============================================================================


@pytest.fixture
def fast_config() -> DerivationConfig:
    """Config with a low iteration count to keep tests quick."""
    return DerivationConfig(iterations=2)


@pytest.fixture
def key_deriver(fast_config: DerivationConfig) -> KeyDeriver:
    """Key deriver using the fast config."""
    return KeyDeriver(config=fast_config)


# =============================================================================
# PYTEST MARKERS
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
