"""Hardened hierarchical key derivation for Ed25519 (SLIP-0010).

The master key and chain code come from ``HMAC-SHA512`` keyed with the
constant ``b"ed25519 seed"`` over the root seed. Each hardened child is::

    I = HMAC-SHA512(key=chain_code, msg=0x00 || key || ser32(index | 0x80000000))
    child_key, child_chain_code = I[:32], I[32:]

Ed25519 has no public (non-hardened) child derivation, so there is no
non-hardened branch here; paths are validated before any hashing happens.

The output is a wallet-interoperability surface: for a given seed and path
the derived key must be byte-identical to every other SLIP-0010
implementation.
"""
from __future__ import annotations

import hashlib
import hmac
import logging
import struct
from dataclasses import dataclass
from typing import Optional, Union

from hd_signer.path import HARDENED_OFFSET, DerivationPath
from hd_signer.primitive import Ed25519Primitive, default_primitive

logger = logging.getLogger(__name__)

ED25519_CURVE_SEED = b"ed25519 seed"


def _hmac_sha512(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha512).digest()


@dataclass(frozen=True)
class DerivedKey:
    """A private key and its chain code at one level of the hierarchy."""

    key: bytes
    chain_code: bytes

    def __repr__(self) -> str:
        return "DerivedKey(key=<redacted>, chain_code=<redacted>)"


def get_master_key_from_seed(seed: Union[bytes, str]) -> DerivedKey:
    """Return the master key and chain code for a root *seed*.

    Parameters
    ----------
    seed:
        The root seed as raw bytes or a hex string, typically the 64-byte
        output of BIP-39 mnemonic expansion.
    """
    I = _hmac_sha512(ED25519_CURVE_SEED, _seed_bytes(seed))
    return DerivedKey(key=I[:32], chain_code=I[32:])


def ckd_priv(parent: DerivedKey, index: int) -> DerivedKey:
    """Derive the hardened child at *index* of *parent*.

    *index* may be given with or without the hardened bit; it is always
    applied.
    """
    if not 0 <= index <= 0xFFFFFFFF:
        raise ValueError(f"Child index out of range: {index}")
    data = b"\x00" + parent.key + struct.pack(">I", index | HARDENED_OFFSET)
    I = _hmac_sha512(parent.chain_code, data)
    return DerivedKey(key=I[:32], chain_code=I[32:])


def derive_path(
    path: Union[str, DerivationPath],
    seed: Union[bytes, str],
) -> DerivedKey:
    """Derive the key at *path* from a root *seed*.

    Parameters
    ----------
    path:
        A hardened derivation path, as text (``m/44'/784'/0'/0'/0'``) or an
        already parsed :class:`DerivationPath`.
    seed:
        The root seed as raw bytes or a hex string.

    Returns
    -------
    DerivedKey
        The leaf private seed (32 bytes) and chain code.

    Raises
    ------
    InvalidDerivationPathError
        If *path* is not a valid fully hardened path.
    """
    parsed = path if isinstance(path, DerivationPath) else DerivationPath.parse(path)
    logger.debug("Deriving Ed25519 key at %s", parsed)
    node = get_master_key_from_seed(seed)
    for index in parsed.hardened_indices():
        node = ckd_priv(node, index)
    return node


def get_public_key(
    private_key: bytes,
    with_zero_byte: bool = True,
    primitive: Optional[Ed25519Primitive] = None,
) -> bytes:
    """Return the Ed25519 public key for a 32-byte derived *private_key*.

    SLIP-0010 presents Ed25519 public keys with a leading ``0x00`` byte
    (33 bytes); pass ``with_zero_byte=False`` for the raw 32-byte key.
    """
    public_key = (primitive or default_primitive()).derive_public_key(private_key)
    if with_zero_byte:
        return b"\x00" + public_key
    return public_key


def _seed_bytes(seed: Union[bytes, str]) -> bytes:
    if isinstance(seed, str):
        return bytes.fromhex(seed)
    return bytes(seed)


__all__ = [
    "DerivedKey",
    "ED25519_CURVE_SEED",
    "ckd_priv",
    "derive_path",
    "get_master_key_from_seed",
    "get_public_key",
]
