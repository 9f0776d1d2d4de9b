"""SignerConfig — runtime settings for the hd-signer CLI and applications.

Settings can be built directly or read from the environment::

    HD_SIGNER_DERIVATION_PATH      default derivation path
    HD_SIGNER_MNEMONIC_PASSPHRASE  BIP-39 passphrase
    HD_SIGNER_STRICT_MNEMONIC      "true" to enforce the BIP-39 checksum
    HD_SIGNER_LOG_LEVEL            DEBUG, INFO, WARNING or ERROR
"""
from __future__ import annotations

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from hd_signer.path import DEFAULT_ED25519_DERIVATION_PATH, is_valid_hardened_path

ENV_PREFIX = "HD_SIGNER_"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


class SignerConfig(BaseModel):
    """Typed, validated hd-signer settings."""

    model_config = ConfigDict(frozen=True)

    default_derivation_path: str = DEFAULT_ED25519_DERIVATION_PATH
    mnemonic_passphrase: str = ""
    strict_mnemonic: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    @field_validator("default_derivation_path")
    @classmethod
    def check_path(cls, value: str) -> str:
        if not is_valid_hardened_path(value):
            raise ValueError(f"not a fully hardened derivation path: {value!r}")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SignerConfig":
        """Build a config from ``HD_SIGNER_*`` environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if f"{ENV_PREFIX}DERIVATION_PATH" in env:
            values["default_derivation_path"] = env[f"{ENV_PREFIX}DERIVATION_PATH"]
        if f"{ENV_PREFIX}MNEMONIC_PASSPHRASE" in env:
            values["mnemonic_passphrase"] = env[f"{ENV_PREFIX}MNEMONIC_PASSPHRASE"]
        if f"{ENV_PREFIX}STRICT_MNEMONIC" in env:
            values["strict_mnemonic"] = (
                env[f"{ENV_PREFIX}STRICT_MNEMONIC"].strip().lower() in _TRUE_VALUES
            )
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            values["log_level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]
        return cls(**values)


__all__ = ["ENV_PREFIX", "SignerConfig"]
