"""Authentication entries (DID spec, section 4.4)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from diddoc_core.entity import Entity


@dataclass(frozen=True, eq=True, repr=False)
class Authentication(Entity):
    """Binds an authentication suite to one of the document's keys."""
    type: Any
    public_key: Any             # DID URL of the referenced key
    extensions: dict[str, Any] = field(default_factory=dict, hash=False)

    _KEYS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("type", "type"),
        ("public_key", "publicKey"),
    )
