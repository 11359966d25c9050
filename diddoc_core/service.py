"""Service endpoint entries (DID spec, section 4.6)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from diddoc_core.entity import Entity

SERVICE_ID_DELIMITER = ";"


@dataclass(frozen=True, eq=True, repr=False)
class Service(Entity):
    """An endpoint the DID subject advertises.

    Service ids look like ``did:example:123;openid``: the part before the
    first ``;`` is the DID, the rest names the service.
    """
    id: Any
    type: Any
    service_endpoint: Any
    extensions: dict[str, Any] = field(default_factory=dict, hash=False)

    _KEYS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("id", "id"),
        ("type", "type"),
        ("service_endpoint", "serviceEndpoint"),
    )

    @property
    def did_part(self) -> Any:
        """The text before the first delimiter, or ``id`` unchanged if not a string."""
        if isinstance(self.id, str):
            return self.id.split(SERVICE_ID_DELIMITER, 1)[0]
        return self.id
