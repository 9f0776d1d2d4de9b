"""BIP-39 mnemonic helpers.

Word-list handling and PBKDF2 seed expansion come from the ``mnemonic``
package; this module only normalises the phrase first so that stray
whitespace or capitalisation never changes the derived keys.
"""
from __future__ import annotations

from mnemonic import Mnemonic

from hd_signer.errors import InvalidMnemonicError

_ENGLISH = Mnemonic("english")


def normalize_mnemonic(mnemonic: str) -> str:
    """Trim, collapse internal whitespace, and lower-case *mnemonic*."""
    return " ".join(mnemonic.split()).lower()


def is_valid_mnemonic(mnemonic: str) -> bool:
    """Return ``True`` if *mnemonic* passes the English BIP-39 word list and checksum."""
    return _ENGLISH.check(normalize_mnemonic(mnemonic))


def mnemonic_to_seed(mnemonic: str, passphrase: str = "", strict: bool = False) -> bytes:
    """Expand *mnemonic* into the 64-byte BIP-39 seed.

    Parameters
    ----------
    mnemonic:
        The mnemonic phrase. It is normalised before expansion.
    passphrase:
        Optional BIP-39 passphrase.
    strict:
        When ``True``, reject phrases that fail the BIP-39 checksum.

    Raises
    ------
    InvalidMnemonicError
        If *strict* is set and the phrase is not a valid BIP-39 mnemonic.
    """
    normalized = normalize_mnemonic(mnemonic)
    if strict and not is_valid_mnemonic(normalized):
        raise InvalidMnemonicError()
    return Mnemonic.to_seed(normalized, passphrase=passphrase)


def mnemonic_to_seed_hex(mnemonic: str, passphrase: str = "", strict: bool = False) -> str:
    return mnemonic_to_seed(mnemonic, passphrase, strict=strict).hex()


def generate_mnemonic(strength: int = 256) -> str:
    """Return a fresh English mnemonic (24 words for the default 256 bits)."""
    return _ENGLISH.generate(strength=strength)


__all__ = [
    "generate_mnemonic",
    "is_valid_mnemonic",
    "mnemonic_to_seed",
    "mnemonic_to_seed_hex",
    "normalize_mnemonic",
]
