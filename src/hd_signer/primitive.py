"""Ed25519 primitive capability and its ``cryptography``-backed implementation.

Key derivation and signature framing only ever talk to the narrow
:class:`Ed25519Primitive` interface: derive a public key from a 32-byte seed,
sign with a seed, verify with a public key, and produce a fresh random seed.
Tests may pass any object with these four methods in place of the default.

All key material is handled as raw bytes so callers never depend on the
``cryptography`` package's internal key types.
"""
from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

ED25519_SEED_LEN = 32
ED25519_PUBLIC_KEY_LEN = 32
ED25519_SIGNATURE_LEN = 64


@runtime_checkable
class Ed25519Primitive(Protocol):
    """The Ed25519 operations this package delegates to a crypto library."""

    def generate_seed(self) -> bytes:
        """Return a fresh random 32-byte seed."""
        ...

    def derive_public_key(self, seed: bytes) -> bytes:
        """Return the 32-byte public key for a 32-byte seed."""
        ...

    def sign(self, seed: bytes, message: bytes) -> bytes:
        """Return the 64-byte detached signature of *message*."""
        ...

    def verify(self, public_key: bytes, signature: bytes, message: bytes) -> bool:
        """Return ``True`` if *signature* is valid for *message* under *public_key*."""
        ...


class CryptographyEd25519Primitive:
    """Ed25519 primitive backed by the ``cryptography`` package.

    Stateless; a single instance can be shared between threads.

    Example
    -------
    ::

        primitive = CryptographyEd25519Primitive()
        seed = primitive.generate_seed()
        public = primitive.derive_public_key(seed)
        signature = primitive.sign(seed, b"hello world")
        assert primitive.verify(public, signature, b"hello world")
    """

    def generate_seed(self) -> bytes:
        return os.urandom(ED25519_SEED_LEN)

    def derive_public_key(self, seed: bytes) -> bytes:
        """Derive the raw public key for *seed*.

        Parameters
        ----------
        seed:
            The 32-byte private seed.

        Returns
        -------
        bytes
            The 32-byte raw public key.

        Raises
        ------
        ValueError
            Propagated from ``cryptography`` if *seed* is not 32 bytes.
        """
        private_key = Ed25519PrivateKey.from_private_bytes(bytes(seed))
        return private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    def sign(self, seed: bytes, message: bytes) -> bytes:
        """Sign *message* with the key generated from *seed*.

        Returns
        -------
        bytes
            The 64-byte Ed25519 signature.
        """
        private_key = Ed25519PrivateKey.from_private_bytes(bytes(seed))
        return private_key.sign(bytes(message))

    def verify(self, public_key: bytes, signature: bytes, message: bytes) -> bool:
        public = Ed25519PublicKey.from_public_bytes(bytes(public_key))
        try:
            public.verify(bytes(signature), bytes(message))
            return True
        except InvalidSignature:
            return False


_DEFAULT_PRIMITIVE = CryptographyEd25519Primitive()


def default_primitive() -> Ed25519Primitive:
    """Return the shared default primitive."""
    return _DEFAULT_PRIMITIVE


__all__ = [
    "CryptographyEd25519Primitive",
    "ED25519_PUBLIC_KEY_LEN",
    "ED25519_SEED_LEN",
    "ED25519_SIGNATURE_LEN",
    "Ed25519Primitive",
    "default_primitive",
]
