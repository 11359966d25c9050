#!/usr/bin/env python3
"""
diddoc command-line runner — inspect and build DID Documents:
  - digest   : print the canonical content digest of a document
  - validate : re-add every entry through the validating operations
  - show     : load a document and print its serialized form
  - new      : emit a fresh document with one key and authentication

Usage:
    python run_diddoc.py digest ddo.json --hash sha3-256 --encoding base64
    python run_diddoc.py validate ddo.json
    python run_diddoc.py new did:example:123 --service-endpoint https://example.com

Environment variables (alternative to flags):
    DIDDOC_HASH, DIDDOC_ENCODING, DIDDOC_CONTEXT, DIDDOC_LOG_LEVEL, DIDDOC_LOG_FMT
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

# ---------------------------------------------------------------------------
# Ensure the project root is in sys.path so imports work before pip install
# ---------------------------------------------------------------------------
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from diddoc_core.config import DIDDocConfig, load_config  # noqa: E402
from diddoc_core.document import DIDDocument  # noqa: E402
from diddoc_core.errors import DIDDocumentError  # noqa: E402
from diddoc_core.logging_config import setup_logging  # noqa: E402

logger = logging.getLogger("diddoc")


def _read_document(path: str, strict: bool = False) -> DIDDocument:
    if path == "-":
        text = sys.stdin.read()
    else:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    return DIDDocument.from_json(text, strict=strict)


# ===================================================================
#  Commands
# ===================================================================

def cmd_digest(args, cfg: DIDDocConfig) -> int:
    ddo = _read_document(args.file)
    print(ddo.digest(args.hash or cfg.document.hash,
                     args.encoding or cfg.document.encoding))
    return 0


def cmd_validate(args, cfg: DIDDocConfig) -> int:
    ddo = _read_document(args.file, strict=True)
    print(f"OK {ddo.id} publicKey={len(ddo.public_key)} "
          f"authentication={len(ddo.authentication)} service={len(ddo.service)}")
    return 0


def cmd_show(args, cfg: DIDDocConfig) -> int:
    ddo = _read_document(args.file)
    print(ddo.to_json(indent=args.indent))
    return 0


def cmd_new(args, cfg: DIDDocConfig) -> int:
    ddo = DIDDocument({"id": args.did}, cfg.document.default_context)
    key_id = f"{args.did}#key-1"
    ddo.add_public_key({"id": key_id, "type": args.key_type})
    ddo.add_authentication({"type": args.auth_type, "publicKey": key_id})
    if args.service_endpoint:
        ddo.add_service({
            "id": f"{args.did};{args.service_name}",
            "type": args.service_type,
            "serviceEndpoint": args.service_endpoint,
        })
    logger.info("Created document for %s", ddo.id)
    print(ddo.to_json(indent=2))
    return 0


# ===================================================================
#  Main entry point
# ===================================================================

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="diddoc", description="DID Document tool")
    p.add_argument("--config", default=None, help="Path to diddoc.toml config file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    d = sub.add_parser("digest", help="Print the document digest")
    d.add_argument("file", help="Document JSON file ('-' for stdin)")
    d.add_argument("--hash", default=None, help="Hash function name (default: sha256)")
    d.add_argument("--encoding", default=None, help="Digest encoding (default: hex)")
    d.set_defaults(func=cmd_digest)

    v = sub.add_parser("validate", help="Syntax-check every entry of a document")
    v.add_argument("file", help="Document JSON file ('-' for stdin)")
    v.set_defaults(func=cmd_validate)

    s = sub.add_parser("show", help="Load and re-serialize a document")
    s.add_argument("file", help="Document JSON file ('-' for stdin)")
    s.add_argument("--indent", type=int, default=2)
    s.set_defaults(func=cmd_show)

    n = sub.add_parser("new", help="Create a document for a DID")
    n.add_argument("did", help="Subject DID, e.g. did:example:123")
    n.add_argument("--key-type", default="Ed25519VerificationKey2018")
    n.add_argument("--auth-type", default="Ed25519SignatureAuthentication2018")
    n.add_argument("--service-endpoint", default="")
    n.add_argument("--service-name", default="service")
    n.add_argument("--service-type", default="DIDService")
    n.set_defaults(func=cmd_new)
    return p


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load config (TOML + env overrides)
    cfg = load_config(args.config)
    level = "DEBUG" if args.verbose else cfg.logging.level
    setup_logging(level=level, fmt=cfg.logging.format, log_file=cfg.logging.file)

    try:
        return args.func(args, cfg)
    except DIDDocumentError as e:
        logger.error("%s", e)
        return 1
    except OSError as e:
        logger.error("Cannot read %s: %s", getattr(args, "file", "?"), e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
