"""
Property-based tests for KerberosKey and principal handling.
"""

from hypothesis import given, strategies as st, settings

from kerbkeys.core.types import EncryptionType, NameType
from kerbkeys.kerberos.key import KerberosKey
from kerbkeys.kerberos.principal import format_principal, parse_principal


# =============================================================================
# STRATEGIES
# =============================================================================

# Components may be empty but never contain the separators
component_strategy = st.text(
    alphabet=st.characters(whitelist_categories=('L', 'N'), whitelist_characters=".-_$"),
    max_size=20,
)

components_strategy = st.lists(component_strategy, min_size=1, max_size=4)

realm_strategy = st.text(
    alphabet=st.characters(whitelist_categories=('Lu', 'N'), whitelist_characters=".-"),
    min_size=1,
    max_size=30,
)

key_bytes_strategy = st.binary(min_size=16, max_size=16)


# =============================================================================
# PRINCIPAL PROPERTIES
# =============================================================================


class TestPrincipalProperties:
    """Property-based tests for principal strings."""

    @given(realm=realm_strategy, components=components_strategy, key=key_bytes_strategy)
    @settings(max_examples=100)
    def test_principal_round_trip(self, realm, components, key):
        """Property: principal == join(components, '/') + '@' + realm."""
        kerberos_key = KerberosKey(
            EncryptionType.AES128_CTS_HMAC_SHA1_96, key, NameType.PRINCIPAL, realm, components
        )
        assert kerberos_key.principal == "/".join(components) + "@" + realm

    @given(realm=realm_strategy, components=components_strategy)
    @settings(max_examples=100)
    def test_parse_inverts_format(self, realm, components):
        """Property: parsing a formatted principal recovers its parts."""
        assert parse_principal(format_principal(components, realm)) == (realm, tuple(components))

    @given(realm=realm_strategy, components=components_strategy, key=key_bytes_strategy)
    @settings(max_examples=50)
    def test_from_principal_matches_direct(self, realm, components, key):
        """Property: from_principal and the direct constructor agree."""
        principal = format_principal(components, realm)
        parsed = KerberosKey.from_principal(
            EncryptionType.ARCFOUR_HMAC_MD5, key, NameType.PRINCIPAL, principal
        )
        assert parsed.realm == realm
        assert parsed.components == tuple(components)


# =============================================================================
# KEY MATERIAL PROPERTIES
# =============================================================================


class TestKeyMaterialProperties:
    """Property-based tests for key bytes handling."""

    @given(key=st.binary(min_size=32, max_size=32))
    @settings(max_examples=50)
    def test_hex_round_trip(self, key):
        """Property: to_hex/from_hex preserve the key bytes."""
        original = KerberosKey.from_principal(
            EncryptionType.AES256_CTS_HMAC_SHA1_96, key, NameType.PRINCIPAL, "u@R"
        )
        again = KerberosKey.from_hex(
            EncryptionType.AES256_CTS_HMAC_SHA1_96, original.to_hex(), NameType.PRINCIPAL, "u@R"
        )
        assert again.key == key

    @given(key=key_bytes_strategy)
    @settings(max_examples=50)
    def test_caller_buffer_isolated(self, key):
        """Property: mutating the source buffer never changes the stored key."""
        buffer = bytearray(key)
        kerberos_key = KerberosKey(EncryptionType.ARCFOUR_HMAC_MD5, buffer)
        for i in range(len(buffer)):
            buffer[i] ^= 0xFF
        assert kerberos_key.key == key
