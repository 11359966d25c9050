"""Public key entries (DID spec, section 4.3)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from diddoc_core.entity import Entity


@dataclass(frozen=True, eq=True, repr=False)
class PublicKey(Entity):
    """A public key attached to a DID Document.

    ``id`` is expected to be a DID URL with a fragment, e.g.
    ``did:example:123#key-1``.  It is only checked when the key is added
    to a document.
    """
    id: Any
    type: Any
    extensions: dict[str, Any] = field(default_factory=dict, hash=False)

    _KEYS: ClassVar[tuple[tuple[str, str], ...]] = (("id", "id"), ("type", "type"))
