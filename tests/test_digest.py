"""Tests for the canonical content digest."""

import hashlib

import pytest

from diddoc_core.document import DIGEST_FIELDS, DIDDocument
from diddoc_core.errors import InvalidArgument
from diddoc_core.hashing import sha3_256

DID = "did:example:123"
KEY_ID = "did:example:123#key-1"
TS = "2020-01-01T00:00:00.000Z"


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


@pytest.fixture
def e2e_ddo():
    ddo = DIDDocument({"id": DID, "created": TS, "updated": TS})
    ddo.add_public_key({"id": KEY_ID, "type": "Ed25519"})
    ddo.add_authentication({"type": "Ed25519SignatureAuthentication", "publicKey": KEY_ID})
    return ddo


class TestDigestInput:
    def test_exact_canonical_string(self, e2e_ddo):
        assert e2e_ddo.digest_input() == (
            '{"authentication":[{"type":"Ed25519SignatureAuthentication",'
            '"publicKey":"did:example:123#key-1"}],'
            '"created":"2020-01-01T00:00:00.000Z",'
            '"id":"did:example:123",'
            '"publicKey":[{"id":"did:example:123#key-1","type":"Ed25519"}],'
            '"service":[],'
            '"updated":"2020-01-01T00:00:00.000Z"}'
        )

    def test_revoked_included_when_set(self, e2e_ddo):
        e2e_ddo.revoke(TS)
        assert '"revoked":"2020-01-01T00:00:00.000Z","service"' in e2e_ddo.digest_input()

    def test_context_and_proof_excluded(self, e2e_ddo):
        e2e_ddo.merge_proof({"type": "LinkedDataSignature2015"})
        text = e2e_ddo.digest_input()
        assert "@context" not in text
        assert "proof" not in text
        assert "LinkedDataSignature2015" not in text

    def test_non_ascii_kept_verbatim(self, e2e_ddo):
        e2e_ddo.add_service({"id": "did:example:123;svc", "type": "Café",
                             "serviceEndpoint": "https://example.com"})
        assert "Café" in e2e_ddo.digest_input()

    def test_digest_fields(self):
        assert DIGEST_FIELDS == (
            "id", "publicKey", "authentication", "service", "created", "updated", "revoked",
        )


class TestDigest:
    def test_matches_hash_of_input(self, e2e_ddo):
        expected = sha256(e2e_ddo.digest_input().encode("utf-8"))
        assert e2e_ddo.digest(sha256) == expected

    def test_default_hash_is_sha256(self, e2e_ddo):
        assert e2e_ddo.digest() == e2e_ddo.digest(sha256)

    def test_named_hash(self, e2e_ddo):
        assert e2e_ddo.digest("sha3-256") == sha3_256(e2e_ddo.digest_input().encode())

    def test_hex_encoding(self, e2e_ddo):
        assert e2e_ddo.digest(sha256, "hex") == e2e_ddo.digest(sha256).hex()

    def test_bad_encoding(self, e2e_ddo):
        with pytest.raises(InvalidArgument):
            e2e_ddo.digest(sha256, "rot13")

    def test_deterministic(self, e2e_ddo):
        assert e2e_ddo.digest(sha256) == e2e_ddo.digest(sha256)

    def test_insertion_order_irrelevant(self):
        a = DIDDocument({"id": DID, "created": TS, "updated": TS, "proof": {}})
        b = DIDDocument({"updated": TS, "proof": {}, "created": TS, "id": DID})
        assert a.digest(sha256) == b.digest(sha256)

    def test_survives_round_trip(self, e2e_ddo):
        again = DIDDocument.from_dict(e2e_ddo.to_dict())
        assert again.digest(sha256) == e2e_ddo.digest(sha256)

    def test_proof_does_not_change_digest(self, e2e_ddo):
        before = e2e_ddo.digest(sha256)
        e2e_ddo.merge_proof({"signatureValue": "abc"})
        assert e2e_ddo.digest(sha256) == before

    def test_context_does_not_change_digest(self):
        a = DIDDocument({"id": DID, "created": TS, "updated": TS})
        b = DIDDocument({"id": DID, "created": TS, "updated": TS}, ["https://x.example"])
        assert a.digest(sha256) == b.digest(sha256)

    def test_public_key_changes_digest(self, e2e_ddo):
        before = e2e_ddo.digest(sha256)
        e2e_ddo.add_public_key({"id": "did:example:123#key-2", "type": "Ed25519"})
        assert e2e_ddo.digest(sha256) != before

    def test_authentication_changes_digest(self, e2e_ddo):
        before = e2e_ddo.digest(sha256)
        e2e_ddo.add_authentication({"type": "X", "publicKey": "did:example:123#key-2"})
        assert e2e_ddo.digest(sha256) != before

    def test_service_changes_digest(self, e2e_ddo):
        before = e2e_ddo.digest(sha256)
        e2e_ddo.add_service({"id": "did:example:123;svc", "type": "X", "serviceEndpoint": "y"})
        assert e2e_ddo.digest(sha256) != before

    def test_update_changes_digest(self, e2e_ddo):
        before = e2e_ddo.digest(sha256)
        e2e_ddo.update()
        assert e2e_ddo.digest(sha256) != before

    def test_revoke_changes_digest(self, e2e_ddo):
        before = e2e_ddo.digest(sha256)
        e2e_ddo.revoke()
        assert e2e_ddo.digest(sha256) != before

    def test_id_changes_digest(self):
        a = DIDDocument({"id": DID, "created": TS, "updated": TS})
        b = DIDDocument({"id": "did:example:124", "created": TS, "updated": TS})
        assert a.digest(sha256) != b.digest(sha256)

    def test_created_changes_digest(self):
        a = DIDDocument({"id": DID, "created": TS, "updated": TS})
        b = DIDDocument({"id": DID, "created": "2019-01-01T00:00:00Z", "updated": TS})
        assert a.digest(sha256) != b.digest(sha256)

    def test_duplicate_add_keeps_digest(self, e2e_ddo):
        before = e2e_ddo.digest(sha256)
        e2e_ddo.add_public_key({"id": KEY_ID, "type": "Other"})
        assert e2e_ddo.digest(sha256) == before
