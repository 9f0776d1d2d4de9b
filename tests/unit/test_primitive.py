"""Tests for hd_signer.primitive — the cryptography-backed Ed25519 primitive."""
from __future__ import annotations

import pytest

from hd_signer.primitive import (
    CryptographyEd25519Primitive,
    Ed25519Primitive,
    default_primitive,
)


class TestCryptographyEd25519Primitive:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(CryptographyEd25519Primitive(), Ed25519Primitive)

    def test_fake_primitive_satisfies_protocol(self, fake_primitive) -> None:  # type: ignore[no-untyped-def]
        assert isinstance(fake_primitive, Ed25519Primitive)

    def test_generate_seed_is_32_random_bytes(self) -> None:
        primitive = CryptographyEd25519Primitive()
        first, second = primitive.generate_seed(), primitive.generate_seed()
        assert len(first) == 32
        assert first != second

    def test_sign_and_verify(self) -> None:
        primitive = default_primitive()
        seed = primitive.generate_seed()
        public_key = primitive.derive_public_key(seed)
        signature = primitive.sign(seed, b"data")
        assert len(public_key) == 32
        assert len(signature) == 64
        assert primitive.verify(public_key, signature, b"data") is True
        assert primitive.verify(public_key, signature, b"other") is False

    def test_bad_seed_length_propagates_library_error(self) -> None:
        with pytest.raises(ValueError):
            default_primitive().derive_public_key(b"\x00" * 31)

    def test_default_primitive_is_shared(self) -> None:
        assert default_primitive() is default_primitive()
