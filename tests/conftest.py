"""Shared fixtures for hd-signer tests."""
from __future__ import annotations

import hashlib

import pytest

# BIP-39 reference mnemonic; its seed (no passphrase) is
# 5eb00bbd...2ce9e38e4.
ABANDON_MNEMONIC = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)
ABANDON_SEED_HEX = (
    "5eb00bbddcf069084889a8ab9155568165f5c453ccb85e70811aaed6f6da5fc1"
    "9a5ac40b389cd370d086206dec8aa6c43daea6690f20ad3d8d48b2d2ce9e38e4"
)


class FakeEd25519Primitive:
    """Deterministic stand-in for the Ed25519 primitive.

    Public keys are SHA-256 of the seed and signatures are SHA-512 of
    seed || message, so derivation and framing logic can be exercised
    without real curve arithmetic.
    """

    def __init__(self) -> None:
        self._seeds: dict[bytes, bytes] = {}
        self.sign_calls = 0

    def generate_seed(self) -> bytes:
        return bytes(range(32))

    def derive_public_key(self, seed: bytes) -> bytes:
        public_key = hashlib.sha256(b"pub" + seed).digest()
        self._seeds[public_key] = seed
        return public_key

    def sign(self, seed: bytes, message: bytes) -> bytes:
        self.sign_calls += 1
        return hashlib.sha512(seed + message).digest()

    def verify(self, public_key: bytes, signature: bytes, message: bytes) -> bool:
        seed = self._seeds.get(public_key)
        if seed is None:
            return False
        return hashlib.sha512(seed + message).digest() == signature


@pytest.fixture()
def fake_primitive() -> FakeEd25519Primitive:
    return FakeEd25519Primitive()


@pytest.fixture()
def mnemonic() -> str:
    return ABANDON_MNEMONIC


@pytest.fixture()
def mnemonic_seed() -> bytes:
    return bytes.fromhex(ABANDON_SEED_HEX)
