"""Ed25519PublicKey — raw public key wrapper exposed to verifying peers."""
from __future__ import annotations

import base64
import binascii
from typing import Union

from hd_signer.primitive import ED25519_PUBLIC_KEY_LEN
from hd_signer.scheme import SignatureScheme


class Ed25519PublicKey:
    """An Ed25519 public key.

    Parameters
    ----------
    value:
        The 32 raw key bytes, or their base64 encoding.

    Raises
    ------
    ValueError
        If *value* is not valid base64 or does not hold exactly 32 bytes.
    """

    __slots__ = ("_data",)

    scheme = SignatureScheme.ED25519

    def __init__(self, value: Union[bytes, bytearray, str]) -> None:
        if isinstance(value, str):
            try:
                data = base64.b64decode(value, validate=True)
            except binascii.Error as exc:
                raise ValueError(f"Invalid base64 public key: {exc}") from exc
        else:
            data = bytes(value)
        if len(data) != ED25519_PUBLIC_KEY_LEN:
            raise ValueError(
                f"Invalid public key input. Expected {ED25519_PUBLIC_KEY_LEN} bytes, "
                f"got {len(data)}"
            )
        self._data = data

    def to_bytes(self) -> bytes:
        return self._data

    def to_base64(self) -> str:
        return base64.b64encode(self._data).decode("ascii")

    def to_hex(self) -> str:
        return self._data.hex()

    def flag(self) -> int:
        """Return the scheme flag identifying this key type."""
        return self.scheme.flag

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ed25519PublicKey):
            return NotImplemented
        return self._data == other._data

    def __hash__(self) -> int:
        return hash((self.scheme, self._data))

    def __str__(self) -> str:
        return self.to_base64()

    def __repr__(self) -> str:
        return f"Ed25519PublicKey({self.to_base64()!r})"


__all__ = ["Ed25519PublicKey"]
