"""Exception hierarchy for hd-signer.

Every error raised by this package for a validation failure derives from
:class:`HDSignerError`. The concrete classes also derive from
:class:`ValueError` so callers that only care about "bad input" can catch
that instead.

Failures raised by the underlying Ed25519 primitive are not wrapped and
propagate to the caller unchanged.
"""
from __future__ import annotations


class HDSignerError(Exception):
    """Base class for all hd-signer errors."""


class InvalidSeedLengthError(HDSignerError, ValueError):
    """Raised when an explicit seed is not exactly the expected length.

    Parameters
    ----------
    length:
        The length of the rejected seed in bytes.
    expected:
        The required length in bytes.
    """

    def __init__(self, length: int, expected: int = 32) -> None:
        self.length = length
        self.expected = expected
        super().__init__(
            f"Wrong seed size. Expected {expected} bytes, got {length}."
        )


class InvalidDerivationPathError(HDSignerError, ValueError):
    """Raised when a derivation path is malformed or contains a non-hardened segment.

    Parameters
    ----------
    path:
        The rejected path string.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Invalid derivation path: {path!r}")


class InvalidMnemonicError(HDSignerError, ValueError):
    """Raised when strict validation rejects a mnemonic phrase."""

    def __init__(self, reason: str = "mnemonic failed BIP-39 validation") -> None:
        self.reason = reason
        super().__init__(reason)


class KeypairError(HDSignerError, ValueError):
    """Raised when secret key material or an exported key record is malformed."""


class SignatureFormatError(HDSignerError, ValueError):
    """Raised when a tagged signature blob cannot be parsed."""


__all__ = [
    "HDSignerError",
    "InvalidDerivationPathError",
    "InvalidMnemonicError",
    "InvalidSeedLengthError",
    "KeypairError",
    "SignatureFormatError",
]
