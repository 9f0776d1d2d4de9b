"""Tests for hd_signer.derivation — SLIP-0010 hardened Ed25519 derivation.

The known-answer vectors are SLIP-0010 test vector 1 for ed25519
(seed 000102030405060708090a0b0c0d0e0f).
"""
from __future__ import annotations

import pytest

from hd_signer.derivation import (
    DerivedKey,
    ckd_priv,
    derive_path,
    get_master_key_from_seed,
    get_public_key,
)
from hd_signer.errors import InvalidDerivationPathError
from hd_signer.path import DerivationPath

SLIP10_SEED_HEX = "000102030405060708090a0b0c0d0e0f"

# (path, chain code, private key, 0x00-prefixed public key)
SLIP10_ED25519_VECTORS = [
    (
        "m/0'",
        "8b59aa11380b624e81507a27fedda59fea6d0b779a778918a2fd3590e16e9c69",
        "68e0fe46dfb67e368c75379acec591dad19df3cde26e63b93a8e704f1dade7a3",
        "008c8a13df77a28f3445213a0f432fde644acaa215fc72dcdf300d5efaa85d350c",
    ),
    (
        "m/0'/1'",
        "a320425f77d1b5c2505a6b1b27382b37368ee640e3557c315416801243552f14",
        "b1d0bad404bf35da785a64ca1ac54b2617211d2777696fbffaf208f746ae84f2",
        "001932a5270f335bed617d5b935c80aedb1a35bd9fc1e31acafd5372c30f5c1187",
    ),
    (
        "m/0'/1'/2'",
        "2e69929e00b5ab250f49c3fb1c12f252de4fed2c1db88387094a0f8c4c9ccd6c",
        "92a5b23c0b8a99e37d07df3fb9966917f5d06e02ddbd909c7e184371463e9fc9",
        "00ae98736566d30ed0e9d2f4486a64bc95740d89c7db33f52121f8ea8f76ff0fc1",
    ),
    (
        "m/0'/1'/2'/2'",
        "8f6d87f93d750e0efccda017d662a1b31a266e4a6f5993b15f5c1f07f74dd5cc",
        "30d1dc7e5fc04c31219ab25a27ae00b50f6fd66622f6e9c913253d6511d1e662",
        "008abae2d66361c879b900d204ad2cc4984fa2aa344dd7ddc46007329ac76c429c",
    ),
    (
        "m/0'/1'/2'/2'/1000000000'",
        "68789923a0cac2cd5a29172a475fe9e0fb14cd6adb5ad98a3fa70333e7afa230",
        "8f94d394a8e8fd6b1bc2f3f49f5c47e385281d5c17e65324b0f62483e37e8793",
        "003c24da049451555d51a7014a37337aa4e12d41e485abccfa46b47dfb2af54b7a",
    ),
]


class TestMasterKey:
    def test_master_key_matches_vector(self) -> None:
        master = get_master_key_from_seed(bytes.fromhex(SLIP10_SEED_HEX))
        assert master.chain_code.hex() == (
            "90046a93de5380a72b5e45010748567d5ea02bbf6522f979e05c0d8d8ca9fffb"
        )
        assert master.key.hex() == (
            "2b4be7f19ee27bbf30c667b642d5f4aa69fd169872f8fc3059c08ebae2eb19e7"
        )

    def test_master_public_key_matches_vector(self) -> None:
        master = get_master_key_from_seed(SLIP10_SEED_HEX)
        assert get_public_key(master.key).hex() == (
            "00a4b2856bfec510abab89753fac1ac0e1112364e7d250545963f135f2a33188ed"
        )

    def test_hex_and_bytes_seed_agree(self) -> None:
        assert get_master_key_from_seed(SLIP10_SEED_HEX) == get_master_key_from_seed(
            bytes.fromhex(SLIP10_SEED_HEX)
        )


class TestDerivePath:
    @pytest.mark.parametrize("path,chain_code,private_key,public_key", SLIP10_ED25519_VECTORS)
    def test_known_answer_vectors(
        self, path: str, chain_code: str, private_key: str, public_key: str
    ) -> None:
        derived = derive_path(path, SLIP10_SEED_HEX)
        assert derived.chain_code.hex() == chain_code
        assert derived.key.hex() == private_key
        assert get_public_key(derived.key).hex() == public_key

    def test_public_key_without_zero_byte_is_raw_32_bytes(self) -> None:
        derived = derive_path("m/0'", SLIP10_SEED_HEX)
        raw = get_public_key(derived.key, with_zero_byte=False)
        assert len(raw) == 32
        assert raw == get_public_key(derived.key)[1:]

    def test_accepts_parsed_path(self) -> None:
        text = "m/0'/1'/2'"
        assert derive_path(DerivationPath.parse(text), SLIP10_SEED_HEX) == derive_path(
            text, SLIP10_SEED_HEX
        )

    def test_derivation_is_deterministic(self, mnemonic_seed: bytes) -> None:
        first = derive_path("m/44'/784'/0'/0'/0'", mnemonic_seed)
        second = derive_path("m/44'/784'/0'/0'/0'", mnemonic_seed)
        assert first == second
        assert len(first.key) == 32
        assert len(first.chain_code) == 32

    def test_different_paths_give_different_keys(self, mnemonic_seed: bytes) -> None:
        account_0 = derive_path("m/44'/784'/0'/0'/0'", mnemonic_seed)
        account_1 = derive_path("m/44'/784'/1'/0'/0'", mnemonic_seed)
        assert account_0.key != account_1.key

    def test_non_hardened_path_rejected(self, mnemonic_seed: bytes) -> None:
        with pytest.raises(InvalidDerivationPathError):
            derive_path("m/44'/784'/0", mnemonic_seed)

    def test_public_key_uses_supplied_primitive(self, fake_primitive) -> None:  # type: ignore[no-untyped-def]
        derived = derive_path("m/0'", SLIP10_SEED_HEX)
        public_key = get_public_key(derived.key, with_zero_byte=False, primitive=fake_primitive)
        assert public_key == fake_primitive.derive_public_key(derived.key)


class TestChildDerivation:
    def test_ckd_priv_matches_path_derivation(self) -> None:
        master = get_master_key_from_seed(SLIP10_SEED_HEX)
        child = ckd_priv(ckd_priv(master, 0), 1)
        assert child == derive_path("m/0'/1'", SLIP10_SEED_HEX)

    def test_hardened_bit_is_always_applied(self) -> None:
        master = get_master_key_from_seed(SLIP10_SEED_HEX)
        assert ckd_priv(master, 5) == ckd_priv(master, 5 | 0x80000000)

    def test_index_out_of_range_raises(self) -> None:
        master = get_master_key_from_seed(SLIP10_SEED_HEX)
        with pytest.raises(ValueError):
            ckd_priv(master, 2**32)

    def test_repr_hides_key_material(self) -> None:
        derived = DerivedKey(key=b"\x01" * 32, chain_code=b"\x02" * 32)
        assert "01" not in repr(derived)
        assert "redacted" in repr(derived)
