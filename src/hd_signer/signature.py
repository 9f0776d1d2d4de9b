"""Tagged signature framing.

A tagged signature is a fixed-layout blob that carries everything a
multi-scheme verifier needs::

    byte 0        scheme flag
    bytes 1..64   raw 64-byte signature
    bytes 65..128 public key material (the key, zero-padded to 64 bytes)

For Ed25519 the blob is always 129 bytes long.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from hd_signer.errors import SignatureFormatError
from hd_signer.primitive import (
    ED25519_PUBLIC_KEY_LEN,
    ED25519_SIGNATURE_LEN,
    Ed25519Primitive,
    default_primitive,
)
from hd_signer.scheme import SignatureScheme, scheme_from_flag

if TYPE_CHECKING:
    from hd_signer.keypair import Keypair

logger = logging.getLogger(__name__)

ED25519_PUBLIC_LEN = 64
ED25519_TAGGED_SIGNATURE_LEN = 1 + ED25519_SIGNATURE_LEN + ED25519_PUBLIC_LEN

# Raw key length inside the public key region, per scheme.
_PUBLIC_KEY_SIZES = {
    SignatureScheme.ED25519: ED25519_PUBLIC_KEY_LEN,
}


def encode_tagged_signature(
    scheme: SignatureScheme,
    raw_signature: bytes,
    public_key: bytes,
) -> bytes:
    """Frame *raw_signature* and *public_key* behind the flag for *scheme*.

    Raises
    ------
    SignatureFormatError
        If the signature is not 64 bytes or the public key does not fit
        in the 64-byte public key region.
    """
    if len(raw_signature) != ED25519_SIGNATURE_LEN:
        raise SignatureFormatError(
            f"Expected a {ED25519_SIGNATURE_LEN}-byte signature, got {len(raw_signature)}"
        )
    if len(public_key) > ED25519_PUBLIC_LEN:
        raise SignatureFormatError(
            f"Public key of {len(public_key)} bytes does not fit the "
            f"{ED25519_PUBLIC_LEN}-byte public key region"
        )
    buf = bytearray(ED25519_TAGGED_SIGNATURE_LEN)
    buf[0] = scheme.flag
    buf[1 : 1 + ED25519_SIGNATURE_LEN] = raw_signature
    offset = 1 + ED25519_SIGNATURE_LEN
    buf[offset : offset + len(public_key)] = public_key
    return bytes(buf)


@dataclass(frozen=True)
class TaggedSignature:
    """A parsed tagged signature.

    Parameters
    ----------
    scheme:
        The scheme named by the flag byte.
    signature:
        The raw 64-byte signature.
    public_key:
        The signer's raw public key, with the region's zero padding removed.
    """

    scheme: SignatureScheme
    signature: bytes
    public_key: bytes

    @classmethod
    def parse(cls, blob: bytes) -> "TaggedSignature":
        """Split a tagged signature *blob* into its parts.

        Raises
        ------
        SignatureFormatError
            If the blob has the wrong length, an unknown flag, a scheme this
            package cannot unpack, or non-zero padding after the public key.
        """
        if len(blob) != ED25519_TAGGED_SIGNATURE_LEN:
            raise SignatureFormatError(
                f"Expected a {ED25519_TAGGED_SIGNATURE_LEN}-byte tagged signature, "
                f"got {len(blob)}"
            )
        scheme = scheme_from_flag(blob[0])
        key_size = _PUBLIC_KEY_SIZES.get(scheme)
        if key_size is None:
            raise SignatureFormatError(f"Unsupported signature scheme {scheme.value}")
        offset = 1 + ED25519_SIGNATURE_LEN
        if any(blob[offset + key_size :]):
            raise SignatureFormatError("Public key region padding must be zero")
        return cls(
            scheme=scheme,
            signature=bytes(blob[1:offset]),
            public_key=bytes(blob[offset : offset + key_size]),
        )

    def to_bytes(self) -> bytes:
        return encode_tagged_signature(self.scheme, self.signature, self.public_key)


def sign(message: bytes, keypair: "Keypair") -> bytes:
    """Return the tagged signature of *message* produced by *keypair*."""
    return keypair.sign_data(message)


def verify_tagged_signature(
    message: bytes,
    blob: bytes,
    primitive: Optional[Ed25519Primitive] = None,
) -> bool:
    """Verify a tagged signature using only the blob and the message.

    Returns ``False`` for a well-formed blob whose signature does not
    match; malformed blobs raise :class:`SignatureFormatError`.
    """
    tagged = TaggedSignature.parse(blob)
    logger.debug("Verifying %s tagged signature", tagged.scheme.value)
    return (primitive or default_primitive()).verify(
        tagged.public_key, tagged.signature, message
    )


__all__ = [
    "ED25519_PUBLIC_LEN",
    "ED25519_SIGNATURE_LEN",
    "ED25519_TAGGED_SIGNATURE_LEN",
    "TaggedSignature",
    "encode_tagged_signature",
    "sign",
    "verify_tagged_signature",
]
