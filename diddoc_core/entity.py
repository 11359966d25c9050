"""
Shared behaviour for the small records a DID Document aggregates.

Each record has a fixed set of typed fields plus an open ``extensions``
dict for whatever additional properties a producer attached.  Typed fields
are mapped to their camelCase document keys through ``_KEYS``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, TypeVar

E = TypeVar("E", bound="Entity")


class Entity:
    _KEYS: ClassVar[tuple[tuple[str, str], ...]] = ()   # (attribute, json key)

    extensions: dict[str, Any]

    @classmethod
    def required_keys(cls) -> frozenset[str]:
        return frozenset(key for _, key in cls._KEYS)

    @classmethod
    def from_dict(cls: type[E], data: Mapping[str, Any]) -> E:
        """Build from a document mapping; unknown keys become extensions."""
        required = cls.required_keys()
        fields = {attr: data.get(key) for attr, key in cls._KEYS}
        extensions = {k: v for k, v in data.items() if k not in required}
        return cls(**fields, extensions=extensions)

    def to_dict(self) -> dict[str, Any]:
        out = {key: getattr(self, attr) for attr, key in self._KEYS}
        for k, v in self.extensions.items():
            out.setdefault(k, v)
        return out

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails: expose extension fields.
        if name.startswith("_") or name == "extensions":
            raise AttributeError(name)
        try:
            return self.__dict__["extensions"][name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} object has no attribute {name!r}"
            ) from None

    def __getitem__(self, key: str) -> Any:
        for attr, json_key in self._KEYS:
            if key == json_key:
                return getattr(self, attr)
        return self.extensions[key]

    def get(self, key: str, default: Any = None) -> Any:
        try:
            return self[key]
        except KeyError:
            return default

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"
