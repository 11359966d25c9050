"""
Shared pytest fixtures for the diddoc test suite.
"""

import pytest

from diddoc_core.document import DIDDocument

DID = "did:example:123"
KEY_ID = "did:example:123#key-1"
TS = "2020-01-01T00:00:00.000Z"


@pytest.fixture
def ddo():
    """Empty document with fixed timestamps."""
    return DIDDocument({"id": DID, "created": TS, "updated": TS})


@pytest.fixture
def populated_ddo(ddo):
    """Document with one key, one authentication entry and one service."""
    ddo.add_public_key({"id": KEY_ID, "type": "Ed25519", "publicKeyBase58": "H3C2AVvL"})
    ddo.add_authentication({"type": "Ed25519SignatureAuthentication", "publicKey": KEY_ID})
    ddo.add_service({
        "id": "did:example:123;openid",
        "type": "OpenIdConnectVersion1.0Service",
        "serviceEndpoint": "https://openid.example.com/",
    })
    ddo.merge_proof({"type": "LinkedDataSignature2015", "creator": KEY_ID})
    return ddo


@pytest.fixture
def document_dict(populated_ddo):
    """Serialized form of ``populated_ddo``."""
    return populated_ddo.to_dict()
