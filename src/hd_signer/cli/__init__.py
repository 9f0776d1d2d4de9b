"""Command-line interface for hd-signer."""
