"""CLI entry point for hd-signer.

Invoked as::

    hd-signer [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m hd_signer.cli.main

Commands
--------
version          Show version information
path validate    Check that a derivation path is fully hardened
key generate     Create a keypair from randomness or an explicit seed
key derive       Derive a keypair from a mnemonic and a hardened path
key show         Show the public key held in an exported key file
sign             Produce a tagged signature with an exported key file
verify           Verify a tagged signature
"""
from __future__ import annotations

import base64
import binascii
import json
import logging
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hd_signer.config import SignerConfig
from hd_signer.ed25519_keypair import Ed25519Keypair
from hd_signer.errors import HDSignerError
from hd_signer.keypair import ExportedKeypair

console = Console()
logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="hd-signer")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (defaults to HD_SIGNER_LOG_LEVEL or WARNING).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """Hierarchical Ed25519 signing identities"""
    try:
        config = SignerConfig.from_env()
    except ValidationError as exc:
        console.print(f"[red]Error:[/red] Invalid HD_SIGNER_* configuration: {escape(str(exc))}")
        sys.exit(1)
    if log_level is not None:
        config = config.model_copy(update={"log_level": log_level.upper()})
    logging.basicConfig(level=getattr(logging, config.log_level))
    ctx.obj = config


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from hd_signer import __version__

    console.print(f"[bold]hd-signer[/bold] v{__version__}")


# ------------------------------------------------------------------
# path command group
# ------------------------------------------------------------------


@cli.group(name="path")
def path_group() -> None:
    """Inspect derivation paths."""


@path_group.command(name="validate")
@click.argument("derivation_path")
def validate_path_command(derivation_path: str) -> None:
    """Check that DERIVATION_PATH is a fully hardened path."""
    from hd_signer.path import DerivationPath

    try:
        parsed = DerivationPath.parse(derivation_path)
    except HDSignerError as exc:
        console.print(f"[red]Invalid:[/red] {escape(str(exc))}")
        sys.exit(1)
    console.print(f"[green]Valid[/green] hardened path with {len(parsed.segments)} segment(s)")


# ------------------------------------------------------------------
# key command group
# ------------------------------------------------------------------


@cli.group(name="key")
def key_group() -> None:
    """Create and inspect keypairs."""


@key_group.command(name="generate")
@click.option(
    "--seed-hex",
    default=None,
    help="Hex-encoded 32-byte seed. A random keypair is generated when omitted.",
)
@click.option(
    "--output",
    type=click.Path(),
    default=None,
    help="Write the exported key record JSON to this file path.",
)
def generate_command(seed_hex: str | None, output: str | None) -> None:
    """Generate an Ed25519 keypair."""
    try:
        if seed_hex is None:
            keypair = Ed25519Keypair.generate()
        else:
            keypair = Ed25519Keypair.from_seed(_decode_hex(seed_hex, "--seed-hex"))
    except HDSignerError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    _emit_keypair(keypair, output)


@key_group.command(name="derive")
@click.option(
    "--mnemonic",
    prompt=True,
    hide_input=True,
    envvar="HD_SIGNER_MNEMONIC",
    help="BIP-39 mnemonic phrase (prompted for when omitted).",
)
@click.option(
    "--path",
    "derivation_path",
    default=None,
    help="Hardened derivation path (defaults to the configured path).",
)
@click.option(
    "--output",
    type=click.Path(),
    default=None,
    help="Write the exported key record JSON to this file path.",
)
@click.pass_obj
def derive_command(
    config: SignerConfig,
    mnemonic: str,
    derivation_path: str | None,
    output: str | None,
) -> None:
    """Derive an Ed25519 keypair from a mnemonic."""
    path = derivation_path or config.default_derivation_path
    try:
        keypair = Ed25519Keypair.derive_keypair(
            mnemonic,
            path,
            passphrase=config.mnemonic_passphrase,
            strict=config.strict_mnemonic,
        )
    except HDSignerError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    console.print(f"  Path:       {path}")
    _emit_keypair(keypair, output)


@key_group.command(name="show")
@click.option(
    "--key-file",
    type=click.Path(exists=True),
    required=True,
    help="Path to an exported key record JSON file.",
)
def show_command(key_file: str) -> None:
    """Show the public key held in an exported key file."""
    keypair = _load_keypair(key_file)
    public_key = keypair.get_public_key()

    table = Table(title="Ed25519 Public Key", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Scheme", keypair.get_key_scheme().value)
    table.add_row("Flag", f"0x{public_key.flag():02x}")
    table.add_row("Hex", public_key.to_hex())
    console.print(table)
    click.echo(public_key.to_base64())


# ------------------------------------------------------------------
# sign / verify
# ------------------------------------------------------------------


@cli.command(name="sign")
@click.argument("message")
@click.option(
    "--key-file",
    type=click.Path(exists=True),
    required=True,
    help="Path to an exported key record JSON file.",
)
@click.option("--hex", "is_hex", is_flag=True, default=False, help="MESSAGE is hex-encoded.")
def sign_command(message: str, key_file: str, is_hex: bool) -> None:
    """Sign MESSAGE and print the base64 tagged signature."""
    keypair = _load_keypair(key_file)
    data = _decode_hex(message, "MESSAGE") if is_hex else message.encode("utf-8")
    blob = keypair.sign_data(data)
    click.echo(base64.b64encode(blob).decode("ascii"))


@cli.command(name="verify")
@click.argument("message")
@click.argument("signature")
@click.option("--hex", "is_hex", is_flag=True, default=False, help="MESSAGE is hex-encoded.")
def verify_command(message: str, signature: str, is_hex: bool) -> None:
    """Verify the base64 tagged SIGNATURE over MESSAGE."""
    from hd_signer.signature import TaggedSignature, verify_tagged_signature

    data = _decode_hex(message, "MESSAGE") if is_hex else message.encode("utf-8")
    try:
        blob = base64.b64decode(signature, validate=True)
        tagged = TaggedSignature.parse(blob)
        valid = verify_tagged_signature(data, blob)
    except (binascii.Error, HDSignerError) as exc:
        console.print(f"  [red]FAIL[/red]  Malformed signature: {escape(str(exc))}")
        sys.exit(1)

    if not valid:
        console.print("  [red]FAIL[/red]  Signature does not match message.")
        sys.exit(1)
    console.print(f"  [green]PASS[/green]  {tagged.scheme.value} signature is valid.")
    console.print(f"  Signer:     {base64.b64encode(tagged.public_key).decode('ascii')}")


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _decode_hex(value: str, name: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as exc:
        console.print(f"[red]Error:[/red] {name} is not valid hex: {escape(str(exc))}")
        sys.exit(1)


def _emit_keypair(keypair: Ed25519Keypair, output: str | None) -> None:
    """Print the public key and optionally persist the export record."""
    public_key = keypair.get_public_key()
    console.print(f"  Scheme:     {keypair.get_key_scheme().value}")
    console.print(f"  Public key: {public_key.to_hex()}")

    if output:
        record_json = json.dumps(keypair.export().to_dict(), indent=2)
        Path(output).write_text(record_json, encoding="utf-8")
        logger.info("Wrote exported key record to %s", output)
        console.print(f"[green]Key written to[/green] {output}")


def _load_keypair(key_file: str) -> Ed25519Keypair:
    """Load an exported key record, exiting with an error if it is unusable."""
    try:
        record = ExportedKeypair.model_validate_json(
            Path(key_file).read_text(encoding="utf-8")
        )
        return Ed25519Keypair.from_exported(record)
    except (ValueError, HDSignerError) as exc:
        console.print(f"[red]Error:[/red] Could not load key file: {escape(str(exc))}")
        sys.exit(1)


if __name__ == "__main__":
    cli()
