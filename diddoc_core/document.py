"""
DID Documents (W3C DID spec, section 4).

A ``DIDDocument`` binds a DID to its public keys, authentication suites and
service endpoints, together with lifecycle timestamps and a proof block:

  - entries supplied at construction are trusted as-is (deserialization)
  - entries added through ``add_*`` are syntax-checked and de-duplicated
  - ``digest()`` hashes the canonical content, excluding context and proof

Usage:
    from diddoc_core.document import DIDDocument
    ddo = DIDDocument({"id": "did:example:123"})
    ddo.add_public_key({"id": "did:example:123#key-1", "type": "Ed25519"})
    ddo.digest(encoding="hex")
"""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Callable, Mapping, Sequence, TypeVar, Union

from diddoc_core.authentication import Authentication
from diddoc_core.entity import Entity
from diddoc_core.errors import InvalidArgument, InvalidIdentifier
from diddoc_core.hashing import HashFunction, encode_digest, resolve_hash_function
from diddoc_core.identifier import parse_did
from diddoc_core.normalize import normalize
from diddoc_core.public_key import PublicKey
from diddoc_core.service import Service
from diddoc_core.timestamps import format_timestamp, parse_timestamp, utcnow

logger = logging.getLogger("diddoc_document")

DEFAULT_CONTEXT = "https://w3id.org/did/v1"

# Fields covered by digest(); "@context" and "proof" are left out.
DIGEST_FIELDS = (
    "id",
    "publicKey",
    "authentication",
    "service",
    "created",
    "updated",
    "revoked",
)

E = TypeVar("E", bound=Entity)
Context = Union[str, list[str]]
IdentifierParser = Callable[[str], Any]


class DIDDocument:
    """A DID Document with validated incremental construction."""

    def __init__(
        self,
        opts: Mapping[str, Any] | None = None,
        context: str | Sequence[str] | None = None,
        *,
        parser: IdentifierParser = parse_did,
    ):
        if not isinstance(opts, Mapping):
            opts = {}
        self._parser = parser

        # 4.1 Context
        if isinstance(context, str) and context:
            self._context: Context = context
        elif isinstance(context, (list, tuple)):
            self._context = list(context)
        else:
            self._context = DEFAULT_CONTEXT

        # 4.2 Subject
        subject = opts.get("did") or opts.get("id")
        self._id = self._parse(subject, f"DIDDocument: Expecting a valid DID, got {subject!r}.")

        # 4.3 - 4.6 Keys, authentication, services (not validated here)
        self._public_key: list[PublicKey] = [
            self._coerce(pk, PublicKey, "publicKey") for pk in opts.get("publicKey") or ()
        ]
        self._authentication: list[Authentication] = [
            self._coerce(a, Authentication, "authentication")
            for a in opts.get("authentication") or ()
        ]
        self._service: list[Service] = [
            self._coerce(s, Service, "service") for s in opts.get("service") or ()
        ]

        # 4.7 / 4.8 Created and updated
        self._created = self._timestamp_or_now(opts.get("created"), "created")
        self._updated = self._timestamp_or_now(opts.get("updated"), "updated")

        # 4.9 Proof
        proof = opts.get("proof")
        self._proof: dict[str, Any] = dict(proof) if isinstance(proof, Mapping) else {}

        # 5.0 Revoked
        self._revoked: datetime | None = None
        revoked = opts.get("revoked")
        if revoked:
            self._revoked = utcnow() if isinstance(revoked, bool) else parse_timestamp(revoked)

    # ── Factories ────────────────────────────────────────────────

    @classmethod
    def from_dict(
        cls,
        data: Mapping[str, Any],
        *,
        strict: bool = False,
        parser: IdentifierParser = parse_did,
    ) -> "DIDDocument":
        """
        Load a serialized document.

        With ``strict=True`` every key, authentication and service entry is
        re-added through the validating ``add_*`` operations instead of
        being trusted.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgument("DIDDocument.from_dict: Expecting object.")
        if not strict:
            return cls(data, data.get("@context"), parser=parser)

        base = {k: v for k, v in data.items()
                if k not in ("publicKey", "authentication", "service")}
        ddo = cls(base, data.get("@context"), parser=parser)
        for pk in data.get("publicKey") or ():
            ddo.add_public_key(pk)
        for auth in data.get("authentication") or ():
            ddo.add_authentication(auth)
        for svc in data.get("service") or ():
            ddo.add_service(svc)
        return ddo

    @classmethod
    def from_json(cls, text: str | bytes, **kwargs: Any) -> "DIDDocument":
        try:
            data = json.loads(text)
        except ValueError as exc:
            raise InvalidArgument(f"DIDDocument.from_json: {exc}") from exc
        return cls.from_dict(data, **kwargs)

    # ── Accessors ────────────────────────────────────────────────

    @property
    def context(self) -> Context:
        return self._context

    @property
    def id(self) -> Any:
        return self._id

    @property
    def public_key(self) -> tuple[PublicKey, ...]:
        return tuple(self._public_key)

    @property
    def authentication(self) -> tuple[Authentication, ...]:
        return tuple(self._authentication)

    @property
    def service(self) -> tuple[Service, ...]:
        return tuple(self._service)

    @property
    def created(self) -> datetime:
        return self._created

    @property
    def updated(self) -> datetime:
        return self._updated

    @property
    def revoked(self) -> datetime | None:
        return self._revoked

    @property
    def is_revoked(self) -> bool:
        return self._revoked is not None

    @property
    def proof(self) -> dict[str, Any]:
        return self._proof

    # ── Mutation ─────────────────────────────────────────────────

    def add_public_key(self, pk: PublicKey | Mapping[str, Any]) -> "DIDDocument":
        """Append a public key unless one with the same ``id`` exists."""
        pk = self._coerce(pk, PublicKey, "add_public_key")
        if any(key.id == pk.id for key in self._public_key):
            logger.debug("publicKey %s already present, skipping", pk.id, extra=self._log_extra)
            return self
        self._parse(pk.id, "DIDDocument.add_public_key: "
                           "Expecting id for publicKey to be a valid DID.")
        self._public_key.append(pk)
        logger.debug("Added publicKey %s", pk.id, extra=self._log_extra)
        return self

    def add_authentication(self, auth: Authentication | Mapping[str, Any]) -> "DIDDocument":
        """Append an authentication entry unless its ``publicKey`` is already referenced."""
        auth = self._coerce(auth, Authentication, "add_authentication")
        if any(a.public_key == auth.public_key for a in self._authentication):
            logger.debug("authentication for %s already present, skipping", auth.public_key,
                         extra=self._log_extra)
            return self
        self._parse(auth.public_key, "DIDDocument.add_authentication: "
                                     "Expecting publicKey for authentication to be a valid DID.")
        self._authentication.append(auth)
        logger.debug("Added authentication %s", auth.public_key, extra=self._log_extra)
        return self

    def add_service(self, service: Service | Mapping[str, Any]) -> "DIDDocument":
        """Append a service unless one with the same ``id`` exists."""
        service = self._coerce(service, Service, "add_service")
        if any(s.id == service.id for s in self._service):
            logger.debug("service %s already present, skipping", service.id, extra=self._log_extra)
            return self
        self._parse(service.did_part, "DIDDocument.add_service: "
                                      "Expecting id for service to be a valid DID.")
        self._service.append(service)
        logger.debug("Added service %s", service.id, extra=self._log_extra)
        return self

    def merge_proof(self, patch: Mapping[str, Any] | None) -> dict[str, Any]:
        """Merge *patch* into the proof block in place and return it."""
        if patch is None:
            return self._proof
        if not isinstance(patch, Mapping):
            raise InvalidArgument("DIDDocument.merge_proof: Expecting object.")
        self._proof.update(patch)
        return self._proof

    def update(self) -> "DIDDocument":
        self._updated = utcnow()
        return self

    def revoke(self, at: Any = None) -> "DIDDocument":
        self._revoked = utcnow() if at is None else parse_timestamp(at)
        return self

    # ── Digest & serialization ───────────────────────────────────

    def digest_input(self) -> str:
        """The exact string that ``digest()`` hashes."""
        ddo = self.to_dict()
        content = {k: ddo[k] for k in DIGEST_FIELDS if k in ddo}
        return json.dumps(normalize(content), separators=(",", ":"), ensure_ascii=False)

    def digest(
        self,
        hash_fn: HashFunction | str | None = None,
        encoding: str | None = None,
    ) -> bytes | str:
        """
        Hash the document's canonical content.

        Parameters
        ----------
        hash_fn : callable or str, optional
            ``bytes -> bytes`` hash, or a name from
            :data:`diddoc_core.hashing.HASH_FUNCTIONS`.  Defaults to SHA-256.
        encoding : str, optional
            ``"hex"``, ``"base64"``, ``"base64url"`` or ``"latin1"``.  When
            omitted the raw digest bytes are returned.
        """
        fn = resolve_hash_function(hash_fn)
        raw = bytes(fn(self.digest_input().encode("utf-8")))
        return encode_digest(raw, encoding) if encoding else raw

    def to_dict(self) -> dict[str, Any]:
        ddo: dict[str, Any] = {
            "@context": list(self._context) if isinstance(self._context, list) else self._context,
            "id": str(self._id),
            "publicKey": [pk.to_dict() for pk in self._public_key],
            "authentication": [a.to_dict() for a in self._authentication],
            "service": [s.to_dict() for s in self._service],
            "created": format_timestamp(self._created),
            "updated": format_timestamp(self._updated),
            "proof": dict(self._proof),
        }
        if self._revoked is not None:
            ddo["revoked"] = format_timestamp(self._revoked)
        return ddo

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    def __repr__(self) -> str:
        return f"DIDDocument({self.to_dict()!r})"

    # ── Helpers ──────────────────────────────────────────────────

    @property
    def _log_extra(self) -> dict[str, Any]:
        return {"did": str(self._id)}

    def _parse(self, value: Any, message: str) -> Any:
        try:
            return self._parser(value)
        except Exception as exc:
            # Injected parsers may raise their own error types.
            raise InvalidIdentifier(f"{message} ({exc})") from exc

    @staticmethod
    def _coerce(value: Any, cls: type[E], where: str) -> E:
        if isinstance(value, cls):
            return value
        if isinstance(value, Mapping):
            return cls.from_dict(value)
        raise InvalidArgument(f"DIDDocument.{where}: Expecting object.")

    def _timestamp_or_now(self, value: Any, name: str) -> datetime:
        if value is None:
            return utcnow()
        try:
            return parse_timestamp(value)
        except InvalidArgument:
            logger.debug("Unparseable %s %r, defaulting to now", name, value,
                         extra=self._log_extra)
            return utcnow()
