#!/usr/bin/env python3
"""Example: Quickstart

Derives an Ed25519 signing identity from a mnemonic, signs a message, and
verifies the resulting tagged signature from the blob alone.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install hd-signer
"""
from __future__ import annotations

import hd_signer
from hd_signer import Ed25519Keypair, TaggedSignature, generate_mnemonic, verify_tagged_signature


def main() -> None:
    print(f"hd-signer version: {hd_signer.__version__}")

    # Step 1: Create a mnemonic and derive the account at the default path
    mnemonic = generate_mnemonic()
    keypair = Ed25519Keypair.derive_keypair(mnemonic)
    print(f"Public key: {keypair.get_public_key().to_hex()}")

    # Step 2: Sign a message
    blob = keypair.sign_data(b"hello from hd-signer")
    print(f"Tagged signature: {len(blob)} bytes, flag=0x{blob[0]:02x}")

    # Step 3: Verify using only the message and the blob
    tagged = TaggedSignature.parse(blob)
    print(f"Signer recovered from blob: {tagged.public_key.hex()}")
    print(f"Signature valid: {verify_tagged_signature(b'hello from hd-signer', blob)}")

    # Step 4: Export and re-import the key
    restored = Ed25519Keypair.from_exported(keypair.export())
    print(f"Restored key signs identically: {restored.sign_data(b'x') == keypair.sign_data(b'x')}")

    print("\nQuickstart complete.")


if __name__ == "__main__":
    main()
