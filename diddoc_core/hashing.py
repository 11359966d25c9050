"""
Hash functions and digest encodings for document digests.

The digest engine takes any ``bytes -> bytes`` callable; this module
provides the common ones, backed by pycryptodome, under stable names.
"""

from __future__ import annotations

import base64
from typing import Callable, Union

from Crypto.Hash import BLAKE2b, SHA256, SHA3_256, SHA512, keccak

from diddoc_core.errors import InvalidArgument

HashFunction = Callable[[bytes], bytes]


def sha256(data: bytes) -> bytes:
    return SHA256.new(data).digest()


def sha512(data: bytes) -> bytes:
    return SHA512.new(data).digest()


def sha3_256(data: bytes) -> bytes:
    return SHA3_256.new(data).digest()


def keccak_256(data: bytes) -> bytes:
    return keccak.new(data=data, digest_bits=256).digest()


def blake2b_256(data: bytes) -> bytes:
    return BLAKE2b.new(data=data, digest_bits=256).digest()


HASH_FUNCTIONS: dict[str, HashFunction] = {
    "sha256": sha256,
    "sha512": sha512,
    "sha3-256": sha3_256,
    "keccak-256": keccak_256,
    "blake2b-256": blake2b_256,
}

DEFAULT_HASH = "sha256"


def get_hash_function(name: str) -> HashFunction:
    """Look up a hash function by name (case-insensitive, ``_`` == ``-``)."""
    key = name.lower().replace("_", "-")
    try:
        return HASH_FUNCTIONS[key]
    except KeyError:
        known = ", ".join(sorted(HASH_FUNCTIONS))
        raise InvalidArgument(f"Unknown hash function {name!r} (known: {known})") from None


def resolve_hash_function(hash_fn: Union[HashFunction, str, None]) -> HashFunction:
    if hash_fn is None:
        return HASH_FUNCTIONS[DEFAULT_HASH]
    if isinstance(hash_fn, str):
        return get_hash_function(hash_fn)
    if not callable(hash_fn):
        raise InvalidArgument("Expecting hash function to be callable or a name")
    return hash_fn


def encode_digest(raw: bytes, encoding: str) -> str:
    """Encode *raw* as text; encodings follow Node's ``Buffer#toString``."""
    enc = encoding.lower()
    if enc == "hex":
        return raw.hex()
    if enc == "base64":
        return base64.b64encode(raw).decode("ascii")
    if enc == "base64url":
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
    if enc in ("latin1", "binary"):
        return raw.decode("latin-1")
    raise InvalidArgument(f"Unsupported digest encoding: {encoding!r}")
