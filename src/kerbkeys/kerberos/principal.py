"""
Kerberos Principal Strings

Splitting "component[/component...]@REALM" strings and building the
default AES salt from them.

Examples:
    "user1@EXAMPLE.COM"            -> ("EXAMPLE.COM", ("user1",))
    "HTTP/host.example.com@REALM"  -> ("REALM", ("HTTP", "host.example.com"))
    "nobody"                       -> ("", ("nobody",))
"""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from kerbkeys.core.exceptions import InvalidArgumentError


def _require(principal: Optional[str]) -> str:
    if principal is None:
        raise InvalidArgumentError("principal must not be None")
    return principal


def get_realm(principal: str) -> str:
    """Return the text after the last '@', or "" if there is none."""
    principal = _require(principal)
    index = principal.rfind("@")
    if index < 0:
        return ""
    return principal[index + 1 :]


def get_components(principal: str) -> Tuple[str, ...]:
    """
    Return the name components in order.

    Empty components (leading, trailing or doubled '/') are kept as "".
    """
    principal = _require(principal)
    index = principal.rfind("@")
    if index >= 0:
        principal = principal[:index]
    return tuple(principal.split("/"))


def parse_principal(principal: str) -> Tuple[str, Tuple[str, ...]]:
    """
    Split a principal string into (realm, components).

    Raises:
        InvalidArgumentError: If principal is None
    """
    return get_realm(principal), get_components(principal)


def format_principal(components: Iterable[str], realm: str) -> str:
    """Join components with '/' and append '@' + realm."""
    return f"{'/'.join(components)}@{realm}"


def make_salt(principal: str, salt: Optional[str] = None) -> str:
    """
    Return the salt for AES string-to-key.

    A non-empty explicit salt wins. Otherwise the default salt is the
    uppercased realm followed by the components with no separator, e.g.
    "EXAMPLE.COMuser1".
    """
    if salt:
        return salt
    realm, components = parse_principal(principal)
    return realm.upper() + "".join(components)
