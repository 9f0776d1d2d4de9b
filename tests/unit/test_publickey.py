"""Tests for hd_signer.publickey — the Ed25519 public key wrapper."""
from __future__ import annotations

import base64

import pytest

from hd_signer.publickey import Ed25519PublicKey
from hd_signer.scheme import SignatureScheme

RAW = bytes(range(32))


class TestEd25519PublicKey:
    def test_from_bytes(self) -> None:
        key = Ed25519PublicKey(RAW)
        assert key.to_bytes() == RAW
        assert key.to_hex() == RAW.hex()

    def test_from_base64(self) -> None:
        encoded = base64.b64encode(RAW).decode("ascii")
        key = Ed25519PublicKey(encoded)
        assert key.to_bytes() == RAW
        assert key.to_base64() == encoded
        assert str(key) == encoded

    @pytest.mark.parametrize("length", [0, 31, 33, 64])
    def test_wrong_length_rejected(self, length: int) -> None:
        with pytest.raises(ValueError, match="Expected 32 bytes"):
            Ed25519PublicKey(b"\x01" * length)

    def test_invalid_base64_rejected(self) -> None:
        with pytest.raises(ValueError, match="base64"):
            Ed25519PublicKey("not base64!!")

    def test_equality_and_hash(self) -> None:
        assert Ed25519PublicKey(RAW) == Ed25519PublicKey(bytearray(RAW))
        assert Ed25519PublicKey(RAW) != Ed25519PublicKey(bytes(32))
        assert len({Ed25519PublicKey(RAW), Ed25519PublicKey(RAW)}) == 1

    def test_not_equal_to_raw_bytes(self) -> None:
        assert Ed25519PublicKey(RAW) != RAW

    def test_scheme_and_flag(self) -> None:
        key = Ed25519PublicKey(RAW)
        assert key.scheme is SignatureScheme.ED25519
        assert key.flag() == 0x00
