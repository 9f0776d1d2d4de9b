"""hd-signer — hierarchical Ed25519 signing identities with scheme-tagged signatures.

Public API
----------
The stable public surface is everything exported from this module.

Quick start
-----------
::

    from hd_signer import Ed25519Keypair, verify_tagged_signature

    keypair = Ed25519Keypair.derive_keypair(mnemonic, "m/44'/784'/0'/0'/0'")
    blob = keypair.sign_data(b"payload")          # 129 bytes
    assert verify_tagged_signature(b"payload", blob)

    record = keypair.export()                      # {"schema": "ED25519", "privateKey": ...}
    restored = Ed25519Keypair.from_exported(record)
"""
from __future__ import annotations

__version__: str = "0.1.0"

from hd_signer.config import SignerConfig
from hd_signer.derivation import (
    DerivedKey,
    ckd_priv,
    derive_path,
    get_master_key_from_seed,
    get_public_key,
)
from hd_signer.ed25519_keypair import Ed25519Keypair, Ed25519KeypairData
from hd_signer.errors import (
    HDSignerError,
    InvalidDerivationPathError,
    InvalidMnemonicError,
    InvalidSeedLengthError,
    KeypairError,
    SignatureFormatError,
)
from hd_signer.keypair import ExportedKeypair, Keypair
from hd_signer.mnemonics import (
    generate_mnemonic,
    is_valid_mnemonic,
    mnemonic_to_seed,
    mnemonic_to_seed_hex,
    normalize_mnemonic,
)
from hd_signer.path import (
    DEFAULT_ED25519_DERIVATION_PATH,
    DerivationPath,
    is_valid_hardened_path,
)
from hd_signer.primitive import (
    CryptographyEd25519Primitive,
    Ed25519Primitive,
    default_primitive,
)
from hd_signer.publickey import Ed25519PublicKey
from hd_signer.scheme import SIGNATURE_SCHEME_TO_FLAG, SignatureScheme, scheme_from_flag
from hd_signer.signature import (
    ED25519_TAGGED_SIGNATURE_LEN,
    TaggedSignature,
    encode_tagged_signature,
    sign,
    verify_tagged_signature,
)

__all__ = [
    "__version__",
    # config
    "SignerConfig",
    # path
    "DEFAULT_ED25519_DERIVATION_PATH",
    "DerivationPath",
    "is_valid_hardened_path",
    # derivation
    "DerivedKey",
    "ckd_priv",
    "derive_path",
    "get_master_key_from_seed",
    "get_public_key",
    # mnemonics
    "generate_mnemonic",
    "is_valid_mnemonic",
    "mnemonic_to_seed",
    "mnemonic_to_seed_hex",
    "normalize_mnemonic",
    # keypairs
    "Ed25519Keypair",
    "Ed25519KeypairData",
    "Ed25519PublicKey",
    "ExportedKeypair",
    "Keypair",
    # primitive
    "CryptographyEd25519Primitive",
    "Ed25519Primitive",
    "default_primitive",
    # schemes and signatures
    "ED25519_TAGGED_SIGNATURE_LEN",
    "SIGNATURE_SCHEME_TO_FLAG",
    "SignatureScheme",
    "TaggedSignature",
    "encode_tagged_signature",
    "scheme_from_flag",
    "sign",
    "verify_tagged_signature",
    # errors
    "HDSignerError",
    "InvalidDerivationPathError",
    "InvalidMnemonicError",
    "InvalidSeedLengthError",
    "KeypairError",
    "SignatureFormatError",
]
