"""
diddoc - DID Documents with validated construction and canonical digests.

Key features:
- Public key, authentication and service entries with open extension fields
- DID / DID URL syntax validation on every incremental addition
- Idempotent additions (re-adding a known entry is a no-op)
- Deterministic content digest over canonically ordered fields
- JSON-LD shaped serialization that round-trips
"""

from diddoc_core.authentication import Authentication
from diddoc_core.document import DEFAULT_CONTEXT, DIGEST_FIELDS, DIDDocument
from diddoc_core.errors import DIDDocumentError, InvalidArgument, InvalidIdentifier
from diddoc_core.identifier import ParsedDID, is_did, parse_did
from diddoc_core.normalize import compare, normalize
from diddoc_core.public_key import PublicKey
from diddoc_core.service import Service

__version__ = "0.1.0"
__all__ = [
    "Authentication",
    "DEFAULT_CONTEXT",
    "DIGEST_FIELDS",
    "DIDDocument",
    "DIDDocumentError",
    "InvalidArgument",
    "InvalidIdentifier",
    "ParsedDID",
    "PublicKey",
    "Service",
    "compare",
    "is_did",
    "normalize",
    "parse_did",
]
