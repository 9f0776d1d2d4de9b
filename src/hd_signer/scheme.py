"""SignatureScheme — closed enumeration of signature schemes and their wire flags.

The first byte of every tagged signature identifies the scheme that produced
it. The scheme-to-flag table below is part of the wire format: existing
entries must never change value.
"""
from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from hd_signer.errors import KeypairError, SignatureFormatError


class SignatureScheme(str, Enum):
    """Supported signature schemes.

    The member value is the scheme name used in exported key records.
    """

    ED25519 = "ED25519"
    SECP256K1 = "Secp256k1"

    @property
    def flag(self) -> int:
        """The one-byte wire flag for this scheme."""
        return SIGNATURE_SCHEME_TO_FLAG[self]


SIGNATURE_SCHEME_TO_FLAG: Mapping[SignatureScheme, int] = MappingProxyType(
    {
        SignatureScheme.ED25519: 0x00,
        SignatureScheme.SECP256K1: 0x01,
    }
)

SIGNATURE_FLAG_TO_SCHEME: Mapping[int, SignatureScheme] = MappingProxyType(
    {flag: scheme for scheme, flag in SIGNATURE_SCHEME_TO_FLAG.items()}
)


def scheme_from_flag(flag: int) -> SignatureScheme:
    """Return the scheme identified by a wire *flag*.

    Raises
    ------
    SignatureFormatError
        If *flag* is not present in the flag table.
    """
    try:
        return SIGNATURE_FLAG_TO_SCHEME[flag]
    except KeyError:
        raise SignatureFormatError(
            f"Unknown signature scheme flag 0x{flag:02x}"
        ) from None


def scheme_from_name(name: str) -> SignatureScheme:
    """Return the scheme whose name is *name* (as written in exported records).

    Raises
    ------
    KeypairError
        If *name* does not name a known scheme.
    """
    try:
        return SignatureScheme(name)
    except ValueError:
        raise KeypairError(f"Unknown signature scheme {name!r}") from None


__all__ = [
    "SIGNATURE_FLAG_TO_SCHEME",
    "SIGNATURE_SCHEME_TO_FLAG",
    "SignatureScheme",
    "scheme_from_flag",
    "scheme_from_name",
]
