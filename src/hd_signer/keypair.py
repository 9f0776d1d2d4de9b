"""Keypair — scheme-agnostic signing identity interface and export record."""
from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hd_signer.scheme import SignatureScheme, scheme_from_name


class ExportedKeypair(BaseModel):
    """Serialised private key record for persistence or transport.

    ``schema`` round-trips to the same :class:`SignatureScheme` member and
    ``private_key`` is the base64 encoding of the scheme's private key layout.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    schema_: SignatureScheme = Field(alias="schema")
    private_key: str = Field(alias="privateKey")

    @field_validator("schema_", mode="before")
    @classmethod
    def check_schema(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, SignatureScheme):
            return scheme_from_name(value)
        return value

    @field_validator("private_key")
    @classmethod
    def check_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"private_key is not valid base64: {exc}") from exc
        return value

    @property
    def scheme(self) -> SignatureScheme:
        return self.schema_

    def private_key_bytes(self) -> bytes:
        return base64.b64decode(self.private_key)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the wire form ``{"schema": ..., "privateKey": ...}``."""
        return self.model_dump(by_alias=True, mode="json")


class Keypair(ABC):
    """A signing identity: holds key material and produces tagged signatures."""

    @abstractmethod
    def get_key_scheme(self) -> SignatureScheme:
        """Return the scheme this keypair signs with."""

    @abstractmethod
    def get_public_key(self) -> Any:
        """Return the public key wrapper for this keypair."""

    @abstractmethod
    def sign_data(self, data: bytes) -> bytes:
        """Return the tagged signature of *data*."""

    @abstractmethod
    def export(self) -> ExportedKeypair:
        """Return the private key as an :class:`ExportedKeypair` record."""


__all__ = ["ExportedKeypair", "Keypair"]
