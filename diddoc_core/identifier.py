"""
DID and DID URL syntax (W3C DID Core, section 3).

    did-url = did [ ";" params ] [ "/" path ] [ "?" query ] [ "#" fragment ]
    did     = "did:" method-name ":" method-specific-id

``parse_did`` is the default identifier validator used by
:class:`diddoc_core.document.DIDDocument`; any callable with the same
contract (``str`` in, parsed object out, raise on bad syntax) can replace it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from diddoc_core.errors import InvalidIdentifier

_IDCHAR = r"(?:[A-Za-z0-9._-]|%[0-9A-Fa-f]{2})"

DID_URL_PATTERN = re.compile(
    r"^did:(?P<method>[a-z0-9]+)"
    rf":(?P<method_id>(?:{_IDCHAR}*:)*{_IDCHAR}+)"
    r"(?P<params>(?:;[^/?#]*)*)"
    r"(?P<path>/[^?#]*)?"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?\Z"
)


@dataclass(frozen=True)
class ParsedDID:
    """A syntactically valid DID, optionally carrying DID URL parts."""
    method: str
    method_id: str
    params: str = ""          # raw ";a=b;c=d" suffix, empty when absent
    path: str = ""
    query: str | None = None
    fragment: str | None = None

    @property
    def did(self) -> str:
        """The bare DID with every URL component stripped."""
        return f"did:{self.method}:{self.method_id}"

    @property
    def is_url(self) -> bool:
        return bool(self.params or self.path) or self.query is not None or self.fragment is not None

    def with_fragment(self, fragment: str) -> "ParsedDID":
        return ParsedDID(self.method, self.method_id, self.params,
                         self.path, self.query, fragment)

    def __str__(self) -> str:
        out = self.did + self.params + self.path
        if self.query is not None:
            out += "?" + self.query
        if self.fragment is not None:
            out += "#" + self.fragment
        return out


def parse_did(text: object) -> ParsedDID:
    """
    Parse *text* as a DID or DID URL.

    Raises
    ------
    InvalidIdentifier
        If *text* is not a string or does not match the DID URL grammar.
    """
    if not isinstance(text, str):
        raise InvalidIdentifier(f"Expecting DID string, got {type(text).__name__}")
    m = DID_URL_PATTERN.fullmatch(text)
    if m is None:
        raise InvalidIdentifier(f"Invalid DID: {text!r}")
    return ParsedDID(
        method=m.group("method"),
        method_id=m.group("method_id"),
        params=m.group("params") or "",
        path=m.group("path") or "",
        query=m.group("query"),
        fragment=m.group("fragment"),
    )


def is_did(text: object) -> bool:
    """True when *text* parses as a DID or DID URL."""
    try:
        parse_did(text)
    except InvalidIdentifier:
        return False
    return True
