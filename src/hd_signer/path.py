"""Derivation path parsing and validation.

Only hardened derivation is defined for Ed25519, so every path segment must
carry the ``'`` hardening marker::

    m/44'/784'/0'/0'/0'

Anything else (a bare index, an ``h`` marker, whitespace, a missing root)
is rejected.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from hd_signer.errors import InvalidDerivationPathError

DEFAULT_ED25519_DERIVATION_PATH = "m/44'/784'/0'/0'/0'"

HARDENED_OFFSET = 0x80000000

_HARDENED_PATH_PATTERN = re.compile(r"m(/[0-9]+')+")


def is_valid_hardened_path(path: str) -> bool:
    """Return ``True`` if *path* is a well-formed, fully hardened path.

    Indices must also fit below the hardened bit (``< 2**31``) since the
    bit itself is added during derivation.
    """
    if not isinstance(path, str) or not _HARDENED_PATH_PATTERN.fullmatch(path):
        return False
    return all(int(segment[:-1]) < HARDENED_OFFSET for segment in path.split("/")[1:])


@dataclass(frozen=True)
class DerivationPath:
    """A validated hardened derivation path.

    Parameters
    ----------
    segments:
        The segment indices without the hardened bit applied.
    """

    segments: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise InvalidDerivationPathError("m")
        for index in self.segments:
            if not 0 <= index < HARDENED_OFFSET:
                raise InvalidDerivationPathError(_format_path(self.segments))

    @classmethod
    def parse(cls, path: str) -> "DerivationPath":
        """Parse *path*, raising :class:`InvalidDerivationPathError` if it is invalid."""
        if not is_valid_hardened_path(path):
            raise InvalidDerivationPathError(path)
        return cls(tuple(int(segment[:-1]) for segment in path.split("/")[1:]))

    @classmethod
    def default(cls) -> "DerivationPath":
        return cls.parse(DEFAULT_ED25519_DERIVATION_PATH)

    def hardened_indices(self) -> tuple[int, ...]:
        """Return the segment indices with the hardened bit set."""
        return tuple(index + HARDENED_OFFSET for index in self.segments)

    def __str__(self) -> str:
        return _format_path(self.segments)


def _format_path(segments: tuple[int, ...]) -> str:
    return "m" + "".join(f"/{index}'" for index in segments)


__all__ = [
    "DEFAULT_ED25519_DERIVATION_PATH",
    "DerivationPath",
    "HARDENED_OFFSET",
    "is_valid_hardened_path",
]
