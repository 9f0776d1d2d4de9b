"""Ed25519Keypair — Ed25519 signing identity and its constructors.

Construction modes
------------------
* :meth:`Ed25519Keypair.generate` — fresh randomness.
* :meth:`Ed25519Keypair.from_seed` — an explicit 32-byte seed.
* :meth:`Ed25519Keypair.derive_keypair` — a BIP-39 mnemonic and a hardened
  derivation path (default ``m/44'/784'/0'/0'/0'``).
* :meth:`Ed25519Keypair.from_existing`, :meth:`from_secret_key`,
  :meth:`from_exported` — previously created key material.

The private key is always held in the 64-byte ``seed || public_key`` layout.
For HD-derived keys the tail is the *derived* public key, never zero fill.

Example
-------
::

    keypair = Ed25519Keypair.derive_keypair("film crazy soon ...")
    blob = keypair.sign_data(b"hello")
    assert len(blob) == 129
"""
from __future__ import annotations

import base64
import logging
from dataclasses import dataclass
from typing import Optional, Union

from hd_signer.derivation import derive_path, get_public_key
from hd_signer.errors import InvalidSeedLengthError, KeypairError
from hd_signer.keypair import ExportedKeypair, Keypair
from hd_signer.mnemonics import mnemonic_to_seed
from hd_signer.path import DEFAULT_ED25519_DERIVATION_PATH, DerivationPath
from hd_signer.primitive import (
    ED25519_PUBLIC_KEY_LEN,
    ED25519_SEED_LEN,
    Ed25519Primitive,
    default_primitive,
)
from hd_signer.publickey import Ed25519PublicKey
from hd_signer.scheme import SignatureScheme
from hd_signer.signature import encode_tagged_signature

logger = logging.getLogger(__name__)

ED25519_SECRET_KEY_LEN = ED25519_SEED_LEN + ED25519_PUBLIC_KEY_LEN


@dataclass(frozen=True)
class Ed25519KeypairData:
    """Raw Ed25519 key material.

    Parameters
    ----------
    public_key:
        The 32-byte public key.
    secret_key:
        The 64-byte private key: 32-byte seed followed by the public key.
    """

    public_key: bytes
    secret_key: bytes

    def __post_init__(self) -> None:
        if len(self.public_key) != ED25519_PUBLIC_KEY_LEN:
            raise KeypairError(
                f"Expected a {ED25519_PUBLIC_KEY_LEN}-byte public key, got {len(self.public_key)}"
            )
        if len(self.secret_key) != ED25519_SECRET_KEY_LEN:
            raise KeypairError(
                f"Expected a {ED25519_SECRET_KEY_LEN}-byte secret key, got {len(self.secret_key)}"
            )

    def __repr__(self) -> str:
        return f"Ed25519KeypairData(public_key={self.public_key.hex()!r}, secret_key=<redacted>)"


class Ed25519Keypair(Keypair):
    """An Ed25519 keypair.

    Instances are immutable. Use one of the named constructors rather than
    calling ``Ed25519Keypair(...)`` directly.

    Parameters
    ----------
    keypair:
        The raw key material.
    primitive:
        Optional Ed25519 primitive used for signing. Defaults to the
        ``cryptography``-backed implementation.
    """

    def __init__(
        self,
        keypair: Ed25519KeypairData,
        primitive: Optional[Ed25519Primitive] = None,
    ) -> None:
        self._keypair = keypair
        self._primitive: Ed25519Primitive = primitive or default_primitive()

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_existing(
        cls,
        keypair: Ed25519KeypairData,
        primitive: Optional[Ed25519Primitive] = None,
    ) -> "Ed25519Keypair":
        """Wrap already assembled key material."""
        return cls(keypair, primitive)

    @classmethod
    def generate(cls, primitive: Optional[Ed25519Primitive] = None) -> "Ed25519Keypair":
        """Generate a keypair from fresh randomness."""
        primitive = primitive or default_primitive()
        return cls._from_valid_seed(primitive.generate_seed(), primitive)

    generate_random = generate

    @classmethod
    def from_seed(
        cls,
        seed: bytes,
        primitive: Optional[Ed25519Primitive] = None,
    ) -> "Ed25519Keypair":
        """Build the keypair determined by a 32-byte *seed*.

        Raises
        ------
        InvalidSeedLengthError
            If *seed* is not exactly 32 bytes.
        """
        if len(seed) != ED25519_SEED_LEN:
            raise InvalidSeedLengthError(len(seed), ED25519_SEED_LEN)
        return cls._from_valid_seed(bytes(seed), primitive or default_primitive())

    @classmethod
    def from_secret_key(
        cls,
        secret_key: bytes,
        skip_validation: bool = False,
        primitive: Optional[Ed25519Primitive] = None,
    ) -> "Ed25519Keypair":
        """Rebuild a keypair from a 64-byte ``seed || public_key`` buffer.

        A bare 32-byte seed is also accepted and treated like
        :meth:`from_seed`.

        Raises
        ------
        KeypairError
            If the buffer has another length, or (unless *skip_validation*)
            its tail does not match the public key derived from its seed.
        """
        primitive = primitive or default_primitive()
        secret_key = bytes(secret_key)
        if len(secret_key) == ED25519_SEED_LEN:
            return cls._from_valid_seed(secret_key, primitive)
        if len(secret_key) != ED25519_SECRET_KEY_LEN:
            raise KeypairError(
                f"Wrong secret key size. Expected {ED25519_SECRET_KEY_LEN} bytes, "
                f"got {len(secret_key)}."
            )
        public_key = secret_key[ED25519_SEED_LEN:]
        if not skip_validation:
            expected = primitive.derive_public_key(secret_key[:ED25519_SEED_LEN])
            if expected != public_key:
                raise KeypairError("Secret key does not match its embedded public key")
        return cls(Ed25519KeypairData(public_key=public_key, secret_key=secret_key), primitive)

    @classmethod
    def from_exported(
        cls,
        exported: ExportedKeypair,
        primitive: Optional[Ed25519Primitive] = None,
    ) -> "Ed25519Keypair":
        """Inverse of :meth:`export`."""
        if exported.scheme is not SignatureScheme.ED25519:
            raise KeypairError(
                f"Cannot import a {exported.scheme.value} key as an Ed25519 keypair"
            )
        return cls.from_secret_key(exported.private_key_bytes(), primitive=primitive)

    @classmethod
    def derive_keypair(
        cls,
        mnemonics: str,
        path: Union[str, DerivationPath, None] = None,
        passphrase: str = "",
        strict: bool = False,
        primitive: Optional[Ed25519Primitive] = None,
    ) -> "Ed25519Keypair":
        """Derive a keypair from a mnemonic phrase and a hardened path.

        Parameters
        ----------
        mnemonics:
            A BIP-39 mnemonic phrase.
        path:
            Hardened derivation path. Defaults to
            :data:`~hd_signer.path.DEFAULT_ED25519_DERIVATION_PATH`.
        passphrase:
            Optional BIP-39 passphrase.
        strict:
            Reject phrases that fail the BIP-39 checksum.

        Raises
        ------
        InvalidDerivationPathError
            If *path* is malformed or contains a non-hardened segment.
        InvalidMnemonicError
            If *strict* is set and the phrase is not valid BIP-39.
        """
        if path is None:
            path = DEFAULT_ED25519_DERIVATION_PATH
        parsed = path if isinstance(path, DerivationPath) else DerivationPath.parse(path)
        primitive = primitive or default_primitive()

        derived = derive_path(parsed, mnemonic_to_seed(mnemonics, passphrase, strict=strict))
        public_key = get_public_key(derived.key, with_zero_byte=False, primitive=primitive)
        logger.debug("Derived Ed25519 keypair at %s", parsed)

        return cls(
            Ed25519KeypairData(public_key=public_key, secret_key=derived.key + public_key),
            primitive,
        )

    @classmethod
    def _from_valid_seed(cls, seed: bytes, primitive: Ed25519Primitive) -> "Ed25519Keypair":
        public_key = primitive.derive_public_key(seed)
        return cls(Ed25519KeypairData(public_key=public_key, secret_key=seed + public_key), primitive)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_key_scheme(self) -> SignatureScheme:
        return SignatureScheme.ED25519

    def get_public_key(self) -> Ed25519PublicKey:
        return Ed25519PublicKey(self._keypair.public_key)

    @property
    def public_key(self) -> bytes:
        return self._keypair.public_key

    @property
    def secret_key(self) -> bytes:
        return self._keypair.secret_key

    # ------------------------------------------------------------------
    # Signing
    # ------------------------------------------------------------------

    def sign_data(self, data: bytes) -> bytes:
        """Return the 129-byte tagged Ed25519 signature of *data*."""
        signature = self._primitive.sign(self._keypair.secret_key[:ED25519_SEED_LEN], data)
        return encode_tagged_signature(
            SignatureScheme.ED25519, signature, self._keypair.public_key
        )

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def export(self) -> ExportedKeypair:
        return ExportedKeypair(
            schema=SignatureScheme.ED25519,
            privateKey=base64.b64encode(self._keypair.secret_key).decode("ascii"),
        )

    def __repr__(self) -> str:
        return f"Ed25519Keypair(public_key={self.get_public_key().to_base64()!r})"


__all__ = [
    "ED25519_SECRET_KEY_LEN",
    "Ed25519Keypair",
    "Ed25519KeypairData",
]
